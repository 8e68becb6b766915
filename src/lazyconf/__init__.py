"""lazyconf - Hierarchical configuration with dot-path access and lazy loading."""

from __future__ import annotations

# Core
from lazyconf.config import Config
from lazyconf.store import Store

# Loading
from lazyconf.loader import Loader, LoadState
from lazyconf.artifact import (
    Artifact,
    ArtifactSource,
    Producer,
    Value,
    json_source,
    python_source,
    source_for,
    yaml_source,
)

# Settings
from lazyconf.settings import LoaderSettings, load_settings

# Errors
from lazyconf.errors import (
    ErrorCodes,
    InvalidArgumentError,
    LazyConfError,
    MalformedArtifactError,
    SettingsError,
    SettingsNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Config",
    "Store",
    # Loading
    "Loader",
    "LoadState",
    "Artifact",
    "ArtifactSource",
    "Value",
    "Producer",
    "yaml_source",
    "json_source",
    "python_source",
    "source_for",
    # Settings
    "LoaderSettings",
    "load_settings",
    # Errors
    "ErrorCodes",
    "LazyConfError",
    "MalformedArtifactError",
    "InvalidArgumentError",
    "SettingsNotFoundError",
    "SettingsError",
]
