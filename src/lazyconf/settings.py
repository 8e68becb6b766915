"""Loader settings and their YAML file form."""

from __future__ import annotations

import logging
import os
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from lazyconf.errors import SettingsError, SettingsNotFoundError

__all__ = ["LoaderSettings", "load_settings"]

logger = logging.getLogger(__name__)


class LoaderSettings(BaseModel):
    """How a :class:`~lazyconf.loader.Loader` searches for artifacts.

    Attributes:
        paths: Ordered search directories. Trailing separators are stripped.
        extension: File extension appended to a namespace when searching.
        first_match_only: Stop probing search paths after the first match
            instead of loading every match.
    """

    model_config = ConfigDict(extra="forbid")

    paths: list[str] = Field(default_factory=list)
    extension: str = "yaml"
    first_match_only: bool = False

    @field_validator("paths")
    @classmethod
    def _strip_separators(cls, v: list[str]) -> list[str]:
        return [p.rstrip("\\/") for p in v]

    @field_validator("extension")
    @classmethod
    def _normalize_extension(cls, v: str) -> str:
        v = v.strip().lstrip(".")
        if not v:
            raise ValueError("extension must not be empty")
        return v


def load_settings(settings_path: str) -> LoaderSettings:
    """Load loader settings from a YAML file.

    The settings may sit at the top level or under a ``lazyconf`` key.

    Raises:
        SettingsNotFoundError: If the file does not exist.
        SettingsError: If the YAML is invalid or fails validation.
    """
    if not os.path.isfile(settings_path):
        raise SettingsNotFoundError(settings_path=settings_path)

    with open(settings_path, encoding="utf-8") as f:
        try:
            data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SettingsError(f"Invalid YAML in {settings_path}: {e}") from e

    if data is None:
        logger.debug("Settings file %s is empty, using defaults", settings_path)
        data = {}
    if not isinstance(data, dict):
        raise SettingsError(f"Settings must be a mapping, got {type(data).__name__}")
    if "lazyconf" in data:
        data = data["lazyconf"] or {}

    try:
        return LoaderSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}", cause=e) from e
