"""Main CLI application for synthetic-quota."""

from __future__ import annotations

from enum import IntEnum
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from synthetic_quota.errors import ErrorCategory
from synthetic_quota.errors import classify_exception

# Create the main app
app = typer.Typer(
    name="synthetic-quota",
    help="Show Synthetic subscription quota and fallback models",
    add_completion=False,
    no_args_is_help=True,
    invoke_without_command=True,
)


class ExitCode(IntEnum):
    """Exit codes for synthetic-quota."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    INPUT_ERROR = 2
    CONFIG_ERROR = 4


@app.callback()
def main(
    ctx: typer.Context,
    json: bool = typer.Option(False, "--json", "-j", help="Enable JSON output mode"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose output"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Enable quiet mode"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    """Synthetic quota - usage bars and model fallbacks for the terminal."""
    if version:
        from synthetic_quota import __version__

        typer.echo(f"synthetic-quota {__version__}")
        raise typer.Exit()

    # Quiet takes precedence over verbose
    if verbose and quiet:
        verbose = False

    ctx.meta["json"] = json
    ctx.meta["no_color"] = no_color
    ctx.meta["verbose"] = verbose
    ctx.meta["quiet"] = quiet

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def get_console(ctx: typer.Context, stderr: bool = False) -> Console:
    """Create a console honoring the --no-color flag."""
    return Console(stderr=stderr, no_color=ctx.meta.get("no_color", False))


def exit_with_error(ctx: typer.Context, exc: Exception) -> NoReturn:
    """Report an exception in the active output mode and exit."""
    error = classify_exception(exc)

    if ctx.meta.get("json", False):
        from synthetic_quota.display.json import output_json_error

        output_json_error(error)
    else:
        console = get_console(ctx, stderr=True)
        console.print(f"[red]Error:[/red] {escape(error.message)}")
        if error.remediation and not ctx.meta.get("quiet", False):
            console.print(f"[dim]{escape(error.remediation)}[/dim]")
        if ctx.meta.get("verbose", False) and error.details:
            for key, value in error.details.items():
                console.print(f"[dim]  {key}: {escape(str(value))}[/dim]")

    if error.category == ErrorCategory.CONFIGURATION:
        raise typer.Exit(ExitCode.CONFIG_ERROR)
    if error.category in (ErrorCategory.PARSE, ErrorCategory.NOT_FOUND):
        raise typer.Exit(ExitCode.INPUT_ERROR)
    raise typer.Exit(ExitCode.GENERAL_ERROR)


def run_app() -> None:
    """Run the CLI app."""
    app()


# Import command modules - they register themselves via @app.command() decorators
from synthetic_quota.cli.commands import models  # noqa: E402, F401
from synthetic_quota.cli.commands import price  # noqa: E402, F401
from synthetic_quota.cli.commands import quota  # noqa: E402, F401
