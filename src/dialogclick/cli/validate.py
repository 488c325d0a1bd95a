"""dialogclick validate — Parse and validate a config YAML without a browser."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from dialogclick.config import DialogClickConfig, DialogClickConfigError

console = Console(stderr=True)


def validate(
    config_path: Path = typer.Argument(..., help="Path to a dialogclick YAML config file."),
) -> None:
    """Load CONFIG_PATH and print the resolved settings, or the error."""
    try:
        config = DialogClickConfig.from_file(config_path)
    except DialogClickConfigError as exc:
        console.print(
            Panel(
                f"[red]{exc}[/red]",
                title="[red]Invalid Config[/red]",
                border_style="red",
            )
        )
        raise typer.Exit(code=2)

    opts = config.options
    table = Table(title=str(config_path), show_header=False)
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    table.add_row("browser", config.browser)
    table.add_row("headless", str(config.headless))
    table.add_row("viewport", f"{config.viewport[0]}x{config.viewport[1]}")
    table.add_row("navigation_timeout", f"{config.navigation_timeout} ms")
    table.add_row("dialog_selector", opts.dialog_selector)
    table.add_row("dialog_timeout", f"{opts.dialog_timeout} ms")
    table.add_row("button_timeout", f"{opts.button_timeout} ms")
    table.add_row("retry_attempts", str(opts.retry_attempts))
    table.add_row("scroll_into_view", str(opts.scroll_into_view))
    table.add_row("retry_delay_ms", f"{opts.retry_delay_ms} ms")
    table.add_row("debug_screenshot", str(opts.debug_screenshot) if opts.debug_screenshot else "-")
    console.print(table)
    console.print("[green]Config is valid.[/green]")
