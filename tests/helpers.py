"""Helpers shared by lazyconf tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import yaml

from lazyconf.artifact import Artifact, yaml_source


def write_yaml(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.dump(data, default_flow_style=False))
    return path


class CountingSource:
    """Artifact source that records every path it reads."""

    def __init__(self, wrapped: Callable[[Path], Artifact] = yaml_source) -> None:
        self._wrapped = wrapped
        self.reads: list[Path] = []

    def __call__(self, path: Path) -> Artifact:
        self.reads.append(path)
        return self._wrapped(path)
