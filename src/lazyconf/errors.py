"""Error hierarchy for lazyconf."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "LazyConfError",
    "MalformedArtifactError",
    "InvalidArgumentError",
    "SettingsNotFoundError",
    "SettingsError",
    "ErrorCodes",
]


class LazyConfError(Exception):
    """Base error for all lazyconf errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class MalformedArtifactError(LazyConfError):
    """Raised when an artifact file cannot produce a usable value."""

    def __init__(self, *, file_path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="ARTIFACT_MALFORMED",
            message=f"Malformed artifact '{file_path}': {reason}",
            details={"file_path": file_path, "reason": reason},
            **kwargs,
        )

    @property
    def file_path(self) -> str:
        """Path of the offending artifact."""
        return self.details["file_path"]

    @property
    def reason(self) -> str:
        return self.details["reason"]


class InvalidArgumentError(LazyConfError):
    """Raised when an operation is called with inconsistent arguments."""

    def __init__(self, message: str = "Invalid argument", **kwargs: Any) -> None:
        super().__init__(code="INVALID_ARGUMENT", message=message, **kwargs)


class SettingsNotFoundError(LazyConfError):
    """Raised when a settings file cannot be found."""

    def __init__(self, settings_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="SETTINGS_NOT_FOUND",
            message=f"Settings file not found: {settings_path}",
            details={"settings_path": settings_path},
            **kwargs,
        )


class SettingsError(LazyConfError):
    """Raised when loader settings are invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="SETTINGS_INVALID", message=message, **kwargs)


class ErrorCodes:
    """All lazyconf error codes as constants.

    Use these instead of hardcoding error code strings.

    Example:
        if error.code == ErrorCodes.ARTIFACT_MALFORMED:
            handle_bad_file()
    """

    ARTIFACT_MALFORMED = "ARTIFACT_MALFORMED"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    SETTINGS_NOT_FOUND = "SETTINGS_NOT_FOUND"
    SETTINGS_INVALID = "SETTINGS_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
