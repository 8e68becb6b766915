"""Artifact sources: turn a configuration file into a value or a producer."""

from __future__ import annotations

import importlib.util
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Union

import yaml

from lazyconf.errors import MalformedArtifactError

__all__ = [
    "Value",
    "Producer",
    "Artifact",
    "ArtifactSource",
    "SOURCES",
    "yaml_source",
    "json_source",
    "python_source",
    "source_for",
]


@dataclass(frozen=True)
class Value:
    """An artifact that yielded its configuration data directly."""

    data: Any


@dataclass(frozen=True)
class Producer:
    """An artifact that yielded a zero-argument callable building the data."""

    factory: Callable[[], Any]

    def produce(self) -> Any:
        return self.factory()


Artifact = Union[Value, Producer]
ArtifactSource = Callable[[Path], Artifact]


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MalformedArtifactError(file_path=str(path), reason=str(exc), cause=exc) from exc


def yaml_source(path: Path) -> Artifact:
    """Read a YAML artifact. An empty document yields ``Value(None)``."""
    content = _read_text(path)
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise MalformedArtifactError(file_path=str(path), reason=f"YAML parse error: {exc}", cause=exc) from exc
    return Value(data)


def json_source(path: Path) -> Artifact:
    """Read a JSON artifact."""
    content = _read_text(path)
    if not content.strip():
        return Value(None)
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise MalformedArtifactError(file_path=str(path), reason=f"JSON parse error: {exc}", cause=exc) from exc
    return Value(data)


def python_source(path: Path) -> Artifact:
    """Import a Python artifact and take its module-level ``config`` attribute.

    A callable ``config`` is returned as a :class:`Producer` and is not
    invoked here.
    """
    module_name = f"lazyconf_artifact_{path.stem.replace('.', '_')}"
    spec = importlib.util.spec_from_file_location(module_name, str(path))
    if spec is None or spec.loader is None:
        raise MalformedArtifactError(file_path=str(path), reason="Cannot create import spec")

    mod = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(mod)
    except Exception as exc:
        raise MalformedArtifactError(
            file_path=str(path), reason=f"Failed to import artifact: {exc}", cause=exc
        ) from exc

    if not hasattr(mod, "config"):
        raise MalformedArtifactError(file_path=str(path), reason="Module does not define 'config'")

    payload = mod.config
    if callable(payload):
        return Producer(payload)
    return Value(payload)


SOURCES: dict[str, ArtifactSource] = {
    ".yaml": yaml_source,
    ".yml": yaml_source,
    ".json": json_source,
    ".py": python_source,
}


def source_for(path: Path) -> ArtifactSource:
    """Pick the artifact source registered for the file's suffix."""
    suffix = path.suffix.lower()
    try:
        return SOURCES[suffix]
    except KeyError:
        raise MalformedArtifactError(
            file_path=str(path), reason=f"No artifact source registered for suffix '{suffix}'"
        ) from None
