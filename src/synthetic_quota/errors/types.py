"""Error types and classifications."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

import msgspec


class ErrorCategory(StrEnum):
    """Error categories for handling decisions."""

    PARSE = "parse"
    CONFIGURATION = "configuration"
    NOT_FOUND = "not_found"
    UNKNOWN = "unknown"


class ErrorSeverity(StrEnum):
    """Error severity levels."""

    FATAL = "fatal"
    RECOVERABLE = "recoverable"
    WARNING = "warning"


class QuotaError(msgspec.Struct, frozen=True):
    """Structured error with category and remediation."""

    message: str
    category: ErrorCategory
    severity: ErrorSeverity
    remediation: str | None = None
    details: dict | None = None
    timestamp: datetime = msgspec.field(
        default_factory=lambda: datetime.now().astimezone()
    )


class InvalidTimestampError(ValueError):
    """Raised when a reset timestamp cannot be parsed."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid ISO 8601 timestamp: {value!r}")


class ConfigError(Exception):
    """Raised when the configuration file cannot be loaded."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)
