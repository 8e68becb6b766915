"""Loader: locates namespace artifacts on search paths and merges them into a store."""

from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any, Callable

from lazyconf.artifact import Artifact, ArtifactSource, Producer, Value, source_for
from lazyconf.errors import InvalidArgumentError, MalformedArtifactError
from lazyconf.settings import LoaderSettings
from lazyconf.store import Store

__all__ = ["Loader", "LoadState"]

logger = logging.getLogger(__name__)

_SEPARATORS = "\\/"


class LoadState(str, Enum):
    """Lifecycle of one artifact identity. LOADED is terminal."""

    UNKNOWN = "unknown"
    LOADING = "loading"
    LOADED = "loaded"


class Loader:
    """Resolves namespace identifiers to artifact files and loads each at most once.

    An identifier naming an existing file is loaded directly. Anything else
    is treated as a namespace: ``<identifier>.<extension>`` is probed in each
    search path, in order, and every match is loaded (only the first one when
    ``first_match_only`` is set). A later match overwrites the namespace
    branch merged by an earlier one.

    Files are tracked by their real path, so one file reached through
    different spellings (relative, absolute, via a symlink) loads once. An
    identity is marked loaded only once its artifact was read and
    transformed successfully, so a failing file can be retried.

    Namespaces containing a ``..`` segment are never searched for, so a
    key cannot reach files outside the search paths.

    Not thread-safe. Callers sharing a loader across threads must serialize
    access themselves.
    """

    def __init__(
        self,
        paths: list[str] | None = None,
        extension: str = "yaml",
        source: ArtifactSource | None = None,
        first_match_only: bool = False,
    ) -> None:
        """Initialize a Loader.

        Args:
            paths: Ordered search directories.
            extension: Extension appended to namespaces when searching,
                with or without the leading dot.
            source: Artifact source used for every file. When None, the
                source is picked by file suffix.
            first_match_only: Stop at the first search path holding the
                namespace file.
        """
        self._paths: list[str] = [p.rstrip(_SEPARATORS) for p in paths or []]
        self._extension = extension.lstrip(".")
        self._source = source
        self._first_match_only = first_match_only
        self._callback: Callable[[Any], Any] | None = None
        self._states: dict[str, LoadState] = {}

    @classmethod
    def from_settings(cls, settings: LoaderSettings, source: ArtifactSource | None = None) -> Loader:
        """Build a Loader from validated settings."""
        return cls(
            paths=list(settings.paths),
            extension=settings.extension,
            source=source,
            first_match_only=settings.first_match_only,
        )

    # ==================== Properties ====================

    @property
    def paths(self) -> list[str]:
        """Search directories, in probe order."""
        return list(self._paths)

    @property
    def extension(self) -> str:
        return self._extension

    @property
    def callback(self) -> Callable[[Any], Any] | None:
        return self._callback

    @property
    def loaded(self) -> frozenset[str]:
        """Real paths of the artifacts that have been loaded."""
        return frozenset(k for k, v in self._states.items() if v is LoadState.LOADED)

    def state(self, identity: str) -> LoadState:
        return self._states.get(os.path.realpath(identity), LoadState.UNKNOWN)

    # ==================== Configuration ====================

    def set_path(self, path: str, append: bool = False) -> Loader:
        """Replace the search paths with ``path``, or append it when ``append`` is True."""
        path = path.rstrip(_SEPARATORS)
        if append:
            self._paths.append(path)
        else:
            self._paths = [path]
        return self

    def set_callback(self, callback: Callable[[Any], Any]) -> Loader:
        """Install the post-load transform, replacing any previous one.

        The callback receives the raw payload of every artifact: the loaded
        data, or the producer callable itself when the artifact is a
        producer. Its return value is what gets merged.
        """
        if not callable(callback):
            raise InvalidArgumentError(f"Callback must be callable, got {type(callback).__name__}")
        self._callback = callback
        return self

    # ==================== Loading ====================

    def load(self, identifier: str, store: Store) -> Store:
        """Load ``identifier`` into ``store`` unless it was loaded before."""
        if self.state(identifier) is not LoadState.UNKNOWN:
            return store

        if os.path.isfile(identifier):
            self._load_file(identifier, store)
        else:
            for file in self._search(identifier):
                self._load_file(file, store)
        return store

    def _search(self, identifier: str) -> list[str]:
        """Return the artifact files for a namespace, in search path order."""
        name = identifier.strip(_SEPARATORS)
        if ".." in name.replace("\\", "/").split("/"):
            logger.warning("Namespace '%s' points outside the search paths, skipping", identifier)
            return []

        filename = f"{name}.{self._extension}"
        matches: list[str] = []
        for path in self._paths:
            candidate = f"{path}/{filename}"
            if os.path.isfile(candidate):
                matches.append(candidate)
                if self._first_match_only:
                    break

        if not matches:
            logger.debug("No artifact '%s' found in search paths %s", filename, self._paths)
        elif len(matches) > 1:
            logger.warning(
                "Artifact '%s' found in %d search paths, each will be loaded: %s",
                filename,
                len(matches),
                matches,
            )
        return matches

    def _load_file(self, file: str, store: Store) -> None:
        identity = os.path.realpath(file)
        state = self._states.get(identity, LoadState.UNKNOWN)
        if state is LoadState.LOADED:
            return
        if state is LoadState.LOADING:
            logger.debug("Skipping reentrant load of %s", file)
            return

        self._states[identity] = LoadState.LOADING
        try:
            result = self._resolve(self._read(Path(file)))
        except Exception:
            del self._states[identity]
            raise
        self._states[identity] = LoadState.LOADED
        logger.debug("Loaded artifact %s", file)

        if result is not None:
            store.set(_base_name(file), result)

    def _read(self, path: Path) -> Artifact:
        source = self._source if self._source is not None else source_for(path)
        artifact = source(path)
        if not isinstance(artifact, (Value, Producer)):
            raise MalformedArtifactError(
                file_path=str(path),
                reason=f"Source returned {type(artifact).__name__}, expected Value or Producer",
            )
        return artifact

    def _resolve(self, artifact: Artifact) -> Any:
        if self._callback is not None:
            raw = artifact.factory if isinstance(artifact, Producer) else artifact.data
            return self._callback(raw)
        if isinstance(artifact, Producer):
            return artifact.produce()
        return artifact.data


def _base_name(file: str) -> str:
    """File name without its final extension."""
    return Path(file.replace("\\", "/")).stem
