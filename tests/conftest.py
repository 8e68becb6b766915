"""Shared test fixtures for the lazyconf test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from helpers import CountingSource, write_yaml
from lazyconf.config import Config
from lazyconf.loader import Loader


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """A search directory holding db.yaml and app.yaml."""
    root = tmp_path / "etc" / "app"
    write_yaml(root / "db.yaml", {"host": "localhost", "port": 3306})
    write_yaml(root / "app.yaml", {"name": "demo", "debug": False})
    return root


@pytest.fixture
def counting_source() -> CountingSource:
    return CountingSource()


@pytest.fixture
def loader(config_dir: Path, counting_source: CountingSource) -> Loader:
    """Loader searching config_dir, reading through counting_source."""
    return Loader(paths=[str(config_dir)], source=counting_source)


@pytest.fixture
def config(loader: Loader) -> Config:
    """Empty Config bound to the counting loader."""
    return Config(loader=loader)
