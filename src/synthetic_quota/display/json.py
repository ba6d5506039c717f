"""JSON output utilities for synthetic-quota."""

from __future__ import annotations

import sys

import msgspec

from synthetic_quota.errors.types import QuotaError

__all__ = [
    "output_json",
    "output_json_pretty",
    "output_json_error",
    "error_to_dict",
    "encode_json",
    "decode_json",
]


def output_json(data: object) -> None:
    """Output data as compact JSON to stdout."""
    sys.stdout.write(encode_json(data).decode())
    sys.stdout.write("\n")


def output_json_pretty(data: object, indent: int = 2) -> None:
    """Output data as pretty-printed JSON to stdout.

    Args:
        data: Any msgspec-serializable object
        indent: Number of spaces for indentation
    """
    json_bytes = msgspec.json.format(encode_json(data), indent=indent)
    sys.stdout.write(json_bytes.decode())
    sys.stdout.write("\n")


def error_to_dict(error: QuotaError) -> dict:
    """Convert a QuotaError to the ``{"error": {...}}`` response shape."""
    data = {
        "message": error.message,
        "category": error.category.value,
        "severity": error.severity.value,
        "timestamp": error.timestamp.isoformat(),
    }
    if error.remediation:
        data["remediation"] = error.remediation
    if error.details:
        data["details"] = error.details
    return {"error": data}


def output_json_error(error: QuotaError, indent: int = 2) -> None:
    """Output an error in standardized JSON format."""
    output_json_pretty(error_to_dict(error), indent=indent)


def encode_json(data: object) -> bytes:
    """Encode data as JSON bytes."""
    return msgspec.json.encode(data)


def decode_json(json_bytes: bytes, type_hint: type | None = None) -> object:
    """Decode JSON bytes, validating against `type_hint` when given."""
    if type_hint:
        return msgspec.json.decode(json_bytes, type=type_hint)
    return msgspec.json.decode(json_bytes)
