"""Rich-based rendering utilities for synthetic-quota."""

from __future__ import annotations

from collections.abc import Sequence

from rich.table import Table
from rich.text import Text

from synthetic_quota.config.settings import DisplayConfig
from synthetic_quota.models import ModelDescriptor
from synthetic_quota.models import UsageColor
from synthetic_quota.quota import SubscriptionQuota
from synthetic_quota.usage import build_progress_bar
from synthetic_quota.usage import get_usage_color

USAGE_STYLES: dict[UsageColor, str] = {
    UsageColor.SUCCESS: "green",
    UsageColor.WARNING: "yellow",
    UsageColor.ERROR: "red",
}


def usage_style(color: UsageColor) -> str:
    """Map a severity tier to a Rich style."""
    return USAGE_STYLES.get(color, "default")


def _format_amount(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"


def render_quota_line(
    quota: SubscriptionQuota,
    display: DisplayConfig | None = None,
    width: int | None = None,
    label: str = "Requests",
) -> Text:
    """Format a subscription quota as a single line.

    Args:
        quota: Subscription quota to render
        display: Display settings (glyphs, width, colors)
        width: Bar width override
        label: Leading label

    Returns:
        Rich Text with label, bar, percentage, counts and reset countdown
    """
    display = display or DisplayConfig()
    bar_width = display.bar_width if width is None else width

    result = build_progress_bar(
        quota.requests,
        quota.limit,
        bar_width,
        filled_glyph=display.filled_glyph,
        empty_glyph=display.empty_glyph,
    )
    style = usage_style(get_usage_color(result.percent)) if display.colors else "default"

    text = Text()
    text.append(f"{label:<10} ", style="dim")
    text.append(result.bar, style=style)
    text.append(f" {result.percent:>3.0f}%", style="bold")
    text.append(
        f" {_format_amount(quota.requests)}/{_format_amount(quota.limit)}",
        style="dim",
    )

    time_str = quota.time_remaining()
    if time_str is not None:
        text.append(f" • resets in {time_str}", style="dim")

    return text


def render_models_table(
    models: Sequence[ModelDescriptor],
    limit: int | None = None,
) -> Table:
    """Build a table of models, showing at most `limit` rows."""
    table = Table(title="Models", show_header=True, header_style="bold")
    table.add_column("Name")
    table.add_column("ID", style="dim")

    shown = models if limit is None else models[:limit]
    for model in shown:
        table.add_row(model.name, model.id)

    if limit is not None and len(models) > limit:
        table.caption = f"{len(models) - limit} more not shown"

    return table
