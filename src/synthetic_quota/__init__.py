"""synthetic-quota: Quota display helpers for the Synthetic model provider."""

from __future__ import annotations

__version__ = "0.1.0"

from synthetic_quota.catalog import FALLBACK_MODELS
from synthetic_quota.catalog import find_fallback_model
from synthetic_quota.catalog import get_fallback_models
from synthetic_quota.errors import InvalidTimestampError
from synthetic_quota.models import ModelDescriptor
from synthetic_quota.models import ModelPricing
from synthetic_quota.models import ProgressBar
from synthetic_quota.models import UsageColor
from synthetic_quota.pricing import parse_price
from synthetic_quota.pricing import pricing_from_api
from synthetic_quota.quota import QuotaSnapshot
from synthetic_quota.quota import SubscriptionQuota
from synthetic_quota.quota import decode_quota
from synthetic_quota.usage import build_progress_bar
from synthetic_quota.usage import format_time_remaining
from synthetic_quota.usage import get_usage_color

__all__ = [
    "__version__",
    "ModelDescriptor",
    "ModelPricing",
    "ProgressBar",
    "UsageColor",
    "QuotaSnapshot",
    "SubscriptionQuota",
    "InvalidTimestampError",
    "FALLBACK_MODELS",
    "parse_price",
    "pricing_from_api",
    "build_progress_bar",
    "get_usage_color",
    "format_time_remaining",
    "get_fallback_models",
    "find_fallback_model",
    "decode_quota",
]


def main() -> None:
    """Entry point for the synthetic-quota CLI."""
    from synthetic_quota.cli.app import run_app

    run_app()
