"""Price command for synthetic-quota."""

from __future__ import annotations

import typer
from rich.markup import escape

from synthetic_quota.cli.app import app
from synthetic_quota.cli.app import get_console
from synthetic_quota.pricing import parse_price


@app.command("price")
def price_command(
    ctx: typer.Context,
    values: list[str] = typer.Argument(..., help="Price strings, e.g. '$0.00000055'"),
) -> None:
    """Convert provider price strings to per-million-token prices."""
    parsed = {value: parse_price(value) for value in values}

    if ctx.meta.get("json", False):
        from synthetic_quota.display.json import output_json_pretty

        output_json_pretty(parsed)
        return

    console = get_console(ctx)
    for value, amount in parsed.items():
        if ctx.meta.get("quiet", False):
            console.print(f"{amount:g}", highlight=False)
        else:
            console.print(
                f"{escape(value):<16} [bold]${amount:g}[/bold] [dim]/ 1M tokens[/dim]",
                highlight=False,
            )
