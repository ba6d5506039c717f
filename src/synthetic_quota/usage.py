"""Quota display helpers.

Pure functions that turn raw quota numbers and reset timestamps into
display-ready values. None of them touch the network, the terminal or any
shared state.
"""

from __future__ import annotations

import math
from datetime import UTC
from datetime import datetime

from synthetic_quota.errors.types import InvalidTimestampError
from synthetic_quota.models import EMPTY_GLYPH
from synthetic_quota.models import FILLED_GLYPH
from synthetic_quota.models import ProgressBar
from synthetic_quota.models import UsageColor

WARNING_THRESHOLD = 60
ERROR_THRESHOLD = 85


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def build_progress_bar(
    used: float,
    limit: float,
    width: int,
    *,
    filled_glyph: str = FILLED_GLYPH,
    empty_glyph: str = EMPTY_GLYPH,
) -> ProgressBar:
    """Build a fixed-width usage bar.

    Args:
        used: Amount consumed (may exceed limit)
        limit: Quota size; zero or negative yields 0%
        width: Bar width in characters
        filled_glyph: Character for consumed segments
        empty_glyph: Character for remaining segments

    Returns:
        ProgressBar with exactly `width` glyphs and the clamped percentage
    """
    if width < 0:
        raise ValueError(f"width must be non-negative, got {width}")
    if len(filled_glyph) != 1 or len(empty_glyph) != 1:
        raise ValueError("glyphs must be single characters")

    if limit <= 0:
        percent = 0.0
    else:
        percent = _clamp(used / limit * 100, 0.0, 100.0)

    # Round half up so filled + empty always sums to width
    filled = int(_clamp(math.floor(percent / 100 * width + 0.5), 0, width))
    bar = filled_glyph * filled + empty_glyph * (width - filled)
    return ProgressBar(bar=bar, percent=percent)


def get_usage_color(percent: float) -> UsageColor:
    """Classify a usage percentage into a severity tier."""
    if percent < WARNING_THRESHOLD:
        return UsageColor.SUCCESS
    elif percent < ERROR_THRESHOLD:
        return UsageColor.WARNING
    else:
        return UsageColor.ERROR


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp into an aware datetime.

    Naive timestamps are taken to be UTC.
    """
    if not isinstance(value, str):
        raise InvalidTimestampError(value)
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError as e:
        raise InvalidTimestampError(value) from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def format_time_remaining(iso_timestamp: str, now: datetime | None = None) -> str:
    """Format the time until `iso_timestamp` as a short countdown.

    Returns "now" once the instant has passed, "< 1m" inside the final
    minute, otherwise "{h}h {m}m" or "{m}m". Hours are not folded into days.

    Raises:
        InvalidTimestampError: If the timestamp cannot be parsed
    """
    target = parse_timestamp(iso_timestamp)
    if now is None:
        now = datetime.now(UTC)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=UTC)

    delta_seconds = (target - now).total_seconds()
    if delta_seconds <= 0:
        return "now"
    if delta_seconds < 60:
        return "< 1m"

    total_minutes = math.floor(delta_seconds / 60)
    hours, minutes = divmod(total_minutes, 60)

    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"
