"""Library exceptions."""

from __future__ import annotations


class PyCampusParkingError(Exception):
    """Base exception for the library."""

    error_type = "unknown"
    default_error_code: str | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: str | None = None,
        detail: str | None = None,
        user_message: str | None = None,
    ) -> None:
        self.detail = detail if detail is not None else message
        super().__init__(message if message is not None else (self.detail or ""))
        self.error_code = error_code if error_code is not None else self.default_error_code
        self.user_message = user_message


class ValidationError(PyCampusParkingError):
    """Raised when inputs or reference records fail validation."""

    error_type = "validation"
    default_error_code = "validation_error"


class ConfigError(PyCampusParkingError):
    """Raised when boundaries or timezone configuration are invalid."""

    error_type = "config"
    default_error_code = "config_error"


class DataError(PyCampusParkingError):
    """Raised when bundled reference data cannot be loaded."""

    error_type = "data"
    default_error_code = "data_error"
