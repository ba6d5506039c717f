"""Error handling for synthetic-quota."""

from synthetic_quota.errors.classify import classify_exception
from synthetic_quota.errors.types import (
    ConfigError,
    ErrorCategory,
    ErrorSeverity,
    InvalidTimestampError,
    QuotaError,
)

__all__ = [
    # Core types
    "ErrorCategory",
    "ErrorSeverity",
    "QuotaError",
    # Exceptions
    "InvalidTimestampError",
    "ConfigError",
    # Classification
    "classify_exception",
]
