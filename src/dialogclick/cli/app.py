"""dialogclick CLI — Main Typer entry point.

Registers all subcommands and provides --version / --verbose global options.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console

from dialogclick import __version__

TAGLINE = "Wait for the dialog. Click the button. Retry until it lands."

console = Console()

# ── Version callback ──────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        console.print("dialogclick", style="bold cyan")
        console.print(f"  {TAGLINE}", style="dim")
        console.print(f"  v{__version__}\n", style="bold")
        raise typer.Exit()


# ── Main app ──────────────────────────────────────────────────────────────

app = typer.Typer(
    name="dialogclick",
    help=TAGLINE,
    rich_markup_mode="rich",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show dialogclick version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output.",
    ),
) -> None:
    """dialogclick -- click buttons inside modal dialogs from the command line."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(name)s  %(message)s")


# ── Register subcommands ──────────────────────────────────────────────────

from dialogclick.cli.click_cmd import click  # noqa: E402
from dialogclick.cli.validate import validate  # noqa: E402

app.command(name="click", help="Open a URL, wait for a dialog and click a button in it.")(click)
app.command(name="validate", help="Validate a config YAML without launching a browser.")(validate)
