"""Lazy-loading configuration container."""

from __future__ import annotations

import logging
from typing import Any, Callable

from lazyconf.artifact import ArtifactSource
from lazyconf.loader import Loader
from lazyconf.settings import LoaderSettings, load_settings
from lazyconf.store import MISSING, Store

__all__ = ["Config"]

logger = logging.getLogger(__name__)


class Config(Store):
    """Configuration accessor with dot-path keys and load-on-miss.

    When :meth:`get` cannot resolve a key, the first segment of the key is
    handed to the loader as a namespace and the lookup is retried once.
    ``has``, ``set`` and ``remove`` never trigger a load.

    Example:
        >>> config = Config().set_path("/etc/app")
        >>> config.get("db.host")  # loads /etc/app/db.yaml on first access
        'localhost'
    """

    def __init__(self, items: dict[str, Any] | None = None, loader: Loader | None = None) -> None:
        super().__init__(items)
        self._loader = loader if loader is not None else Loader()

    @classmethod
    def from_settings(
        cls,
        settings: LoaderSettings,
        items: dict[str, Any] | None = None,
        source: ArtifactSource | None = None,
    ) -> Config:
        """Create a Config whose loader is built from ``settings``."""
        return cls(items, loader=Loader.from_settings(settings, source=source))

    @classmethod
    def from_yaml(cls, settings_path: str, items: dict[str, Any] | None = None) -> Config:
        """Create a Config from a YAML loader settings file.

        Raises:
            SettingsNotFoundError: If the file does not exist.
            SettingsError: If the settings are invalid.
        """
        return cls.from_settings(load_settings(settings_path), items=items)

    @property
    def loader(self) -> Loader:
        return self._loader

    def _lookup(self, key: str) -> Any:
        value = super()._lookup(key)
        if (value is MISSING or value is None) and key:
            namespace = key.split(".", 1)[0]
            logger.debug("Key '%s' not loaded, loading namespace '%s'", key, namespace)
            self.load(namespace)
            value = super()._lookup(key)
        return value

    def load(self, identifier: str) -> Config:
        """Load an artifact or namespace into this config. No-op if already loaded."""
        self._loader.load(identifier, self)
        return self

    def set_path(self, path: str, append: bool = False) -> Config:
        """Set (or append to) the directories searched for namespace artifacts."""
        self._loader.set_path(path, append=append)
        return self

    def set_callback(self, callback: Callable[[Any], Any]) -> Config:
        """Install the transform applied to every loaded artifact before merging."""
        self._loader.set_callback(callback)
        return self
