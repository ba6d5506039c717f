"""Models command for synthetic-quota."""

from __future__ import annotations

import typer

from synthetic_quota.catalog import get_fallback_models
from synthetic_quota.cli.app import app
from synthetic_quota.cli.app import exit_with_error
from synthetic_quota.cli.app import get_console
from synthetic_quota.config.settings import get_config
from synthetic_quota.errors import ConfigError


@app.command("models")
def models_command(
    ctx: typer.Context,
    limit: int | None = typer.Option(
        None, "--limit", "-n", min=1, help="Show at most this many models"
    ),
    show_all: bool = typer.Option(False, "--all", "-a", help="Show every model"),
) -> None:
    """List the fallback models."""
    models = get_fallback_models()

    if show_all:
        limit = None
    elif limit is None:
        try:
            limit = get_config().display.model_limit
        except ConfigError as e:
            exit_with_error(ctx, e)

    shown = models if limit is None else models[:limit]

    if ctx.meta.get("json", False):
        from synthetic_quota.display.json import output_json_pretty

        output_json_pretty(list(shown))
        return

    console = get_console(ctx)

    if ctx.meta.get("quiet", False):
        for model in shown:
            console.print(model.id, highlight=False)
        return

    from synthetic_quota.display.rich import render_models_table

    console.print(render_models_table(models, limit=limit))
