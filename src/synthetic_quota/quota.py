"""Quota payload structures.

Decodes the provider's quota response::

    {"subscription": {"limit": 135, "requests": 42.5, "renewsAt": "..."}}

Fetching the payload is the caller's job; this module only decodes it.
"""

from __future__ import annotations

import msgspec

from synthetic_quota.models import UsageColor
from synthetic_quota.usage import build_progress_bar
from synthetic_quota.usage import format_time_remaining
from synthetic_quota.usage import get_usage_color


class SubscriptionQuota(msgspec.Struct, frozen=True, rename="camel"):
    """Request quota for the current subscription window."""

    limit: float = 0
    requests: float = 0  # Requests used so far in this window
    renews_at: str | None = None  # ISO 8601 reset instant

    def percent(self) -> float:
        """Return usage as a clamped 0-100 percentage."""
        return build_progress_bar(self.requests, self.limit, 0).percent

    def remaining(self) -> float:
        """Return requests left, never negative."""
        return max(0.0, self.limit - self.requests)

    def color(self) -> UsageColor:
        return get_usage_color(self.percent())

    def time_remaining(self) -> str | None:
        """Return the countdown until renewal, or None if unknown."""
        if self.renews_at is None:
            return None
        return format_time_remaining(self.renews_at)


class QuotaSnapshot(msgspec.Struct, frozen=True):
    """Complete quota response."""

    subscription: SubscriptionQuota


def decode_quota(data: bytes | str) -> QuotaSnapshot:
    """Decode a quota payload.

    Raises:
        msgspec.DecodeError: If the payload is not JSON
        msgspec.ValidationError: If the payload has the wrong shape
    """
    return msgspec.json.decode(data, type=QuotaSnapshot)
