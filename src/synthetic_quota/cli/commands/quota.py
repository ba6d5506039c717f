"""Quota command for synthetic-quota."""

from __future__ import annotations

import sys
from pathlib import Path

import msgspec
import typer

from synthetic_quota.cli.app import app
from synthetic_quota.cli.app import exit_with_error
from synthetic_quota.cli.app import get_console
from synthetic_quota.config.settings import get_config
from synthetic_quota.errors import ConfigError
from synthetic_quota.errors import InvalidTimestampError
from synthetic_quota.quota import SubscriptionQuota
from synthetic_quota.quota import decode_quota
from synthetic_quota.usage import build_progress_bar
from synthetic_quota.usage import get_usage_color


class QuotaReport(msgspec.Struct, frozen=True):
    """JSON output for the quota command."""

    used: float
    limit: float
    remaining: float
    percent: float
    bar: str
    color: str
    resets_at: str | None = None
    resets_in: str | None = None


def read_payload(source: str) -> bytes:
    """Read a quota payload from a file path or ``-`` for stdin."""
    if source == "-":
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def build_report(quota: SubscriptionQuota, width: int, filled: str, empty: str) -> QuotaReport:
    result = build_progress_bar(
        quota.requests, quota.limit, width, filled_glyph=filled, empty_glyph=empty
    )
    return QuotaReport(
        used=quota.requests,
        limit=quota.limit,
        remaining=quota.remaining(),
        percent=result.percent,
        bar=result.bar,
        color=get_usage_color(result.percent).value,
        resets_at=quota.renews_at,
        resets_in=quota.time_remaining(),
    )


@app.command("quota")
def quota_command(
    ctx: typer.Context,
    source: str = typer.Argument(
        "-", help="Quota payload JSON file, or '-' to read stdin"
    ),
    width: int | None = typer.Option(
        None, "--width", "-w", min=0, help="Progress bar width in characters"
    ),
) -> None:
    """Render the subscription quota from a quota payload."""
    json_mode = ctx.meta.get("json", False)
    verbose = ctx.meta.get("verbose", False)

    try:
        config = get_config()
        snapshot = decode_quota(read_payload(source))
        display = config.display
        if ctx.meta.get("no_color", False):
            display = msgspec.structs.replace(display, colors=False)
        bar_width = display.bar_width if width is None else width
        report = build_report(
            snapshot.subscription,
            bar_width,
            display.filled_glyph,
            display.empty_glyph,
        )
    except (
        ConfigError,
        InvalidTimestampError,
        OSError,
        msgspec.DecodeError,
        msgspec.ValidationError,
    ) as e:
        exit_with_error(ctx, e)

    if json_mode:
        from synthetic_quota.display.json import output_json_pretty

        output_json_pretty(report)
        return

    from synthetic_quota.display.rich import render_quota_line

    console = get_console(ctx)
    console.print(render_quota_line(snapshot.subscription, display, width=bar_width))

    if verbose:
        console.print(
            f"[dim]Remaining: {report.remaining:g} of {report.limit:g} requests[/dim]"
        )
