"""Exception classification for structured error handling."""

from __future__ import annotations

import msgspec

from synthetic_quota.errors.types import (
    ConfigError,
    ErrorCategory,
    ErrorSeverity,
    InvalidTimestampError,
    QuotaError,
)


def classify_exception(e: Exception) -> QuotaError:
    """Classify any exception into a structured error."""

    if isinstance(e, InvalidTimestampError):
        return QuotaError(
            message=str(e),
            category=ErrorCategory.PARSE,
            severity=ErrorSeverity.FATAL,
            remediation="Reset times must be ISO 8601, e.g. 2025-01-15T12:00:00Z.",
            details={"value": str(e.value)},
        )

    if isinstance(e, ConfigError):
        details = {"path": e.path} if e.path else None
        return QuotaError(
            message=str(e),
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.FATAL,
            remediation="Fix or remove the config file and try again.",
            details=details,
        )

    # Payload decoding
    if isinstance(e, (msgspec.ValidationError, msgspec.DecodeError)):
        return QuotaError(
            message=f"Invalid quota payload: {e}",
            category=ErrorCategory.PARSE,
            severity=ErrorSeverity.RECOVERABLE,
            remediation="Expected a JSON object with a 'subscription' key.",
        )

    if isinstance(e, FileNotFoundError):
        return QuotaError(
            message=f"File not found: {e.filename}",
            category=ErrorCategory.NOT_FOUND,
            severity=ErrorSeverity.RECOVERABLE,
        )

    return QuotaError(
        message=str(e) or type(e).__name__,
        category=ErrorCategory.UNKNOWN,
        severity=ErrorSeverity.RECOVERABLE,
        details={"type": type(e).__name__},
    )
