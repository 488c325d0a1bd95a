"""dialogclick click — Run the dialog click sequence against a live page.

Launches a browser, navigates to the URL, optionally clicks a trigger element
that opens the dialog, then waits for the dialog and clicks the button.
"""

from __future__ import annotations

import dataclasses
import logging
import time
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from dialogclick.config import DialogClickConfig, DialogClickConfigError
from dialogclick.engine.browser_session import BrowserSession
from dialogclick.engine.dialog_clicker import DialogClickError, DialogClicker

console = Console(stderr=True)

logger = logging.getLogger("dialogclick.cli.click")


def _config_error(message: str) -> typer.Exit:
    console.print(
        Panel(
            f"[red]{message}[/red]",
            title="[red]Config Error[/red]",
            border_style="red",
        )
    )
    return typer.Exit(code=2)


def _build_config(
    config_path: Optional[Path],
    dialog_timeout: Optional[int],
    button_timeout: Optional[int],
    retries: Optional[int],
    no_scroll: bool,
    headed: bool,
    screenshot: Optional[Path],
) -> DialogClickConfig:
    """Load config.yaml if given, then apply CLI overrides."""
    config = DialogClickConfig.from_file(config_path) if config_path else DialogClickConfig()

    overrides: dict[str, Any] = {}
    if dialog_timeout is not None:
        overrides["dialog_timeout"] = dialog_timeout
    if button_timeout is not None:
        overrides["button_timeout"] = button_timeout
    if retries is not None:
        overrides["retry_attempts"] = retries
    if no_scroll:
        overrides["scroll_into_view"] = False
    if screenshot is not None:
        overrides["debug_screenshot"] = screenshot
    if overrides:
        config.options = dataclasses.replace(config.options, **overrides)

    if headed:
        config.headless = False
    return config


def _print_attempts(error: DialogClickError) -> None:
    if not error.attempts:
        return
    table = Table(title="Click attempts", show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("Strategy")
    table.add_column("Error", overflow="fold")
    for attempt in error.attempts:
        table.add_row(str(attempt.attempt), attempt.strategy, attempt.error)
    console.print(table)


def click(
    url: str = typer.Argument(..., help="Page URL to open."),
    button_selector: str = typer.Argument(..., help="CSS selector of the button inside the dialog."),
    trigger: Optional[str] = typer.Option(
        None, "--trigger", "-t", help="Selector to click first to open the dialog."
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to a dialogclick YAML config file."
    ),
    dialog_timeout: Optional[int] = typer.Option(None, "--dialog-timeout", help="Dialog wait timeout (ms)."),
    button_timeout: Optional[int] = typer.Option(None, "--button-timeout", help="Button wait timeout (ms)."),
    retries: Optional[int] = typer.Option(None, "--retries", "-r", help="Number of click attempts."),
    no_scroll: bool = typer.Option(False, "--no-scroll", help="Do not scroll the button into view."),
    headed: bool = typer.Option(False, "--headed", help="Show the browser window."),
    alternative: bool = typer.Option(
        False, "--alternative", help="Probe dialog selectors one by one and click once."
    ),
    screenshot: Optional[Path] = typer.Option(
        None, "--screenshot", "-s", help="Save a full-page screenshot here on failure."
    ),
) -> None:
    """Open URL, wait for a dialog and click BUTTON_SELECTOR inside it."""
    try:
        config = _build_config(config_path, dialog_timeout, button_timeout, retries, no_scroll, headed, screenshot)
    except DialogClickConfigError as exc:
        raise _config_error(str(exc))

    start = time.monotonic()
    session = BrowserSession(config)
    try:
        session.start()
        session.goto(url)
        if trigger:
            logger.info("Clicking trigger: %s", trigger)
            session.page.click(trigger)

        clicker = DialogClicker(session.page, config.options)
        if alternative:
            clicker.run_alternative(button_selector)
        else:
            clicker.run(button_selector)
    except DialogClickError as exc:
        console.print(
            Panel(
                f"[red]{exc}[/red]",
                title="[red]Click Failed[/red]",
                border_style="red",
            )
        )
        _print_attempts(exc)
        raise typer.Exit(code=1)
    except Exception as exc:
        console.print(
            Panel(
                f"[red]{type(exc).__name__}:[/red] {exc}",
                title="[red]Dialog Interaction Failed[/red]",
                border_style="red",
            )
        )
        raise typer.Exit(code=1)
    finally:
        session.stop()

    elapsed = time.monotonic() - start
    console.print(
        Panel(
            f"[green]Clicked[/green] [bold]{button_selector}[/bold] in {elapsed:.1f}s",
            title="[green]Success[/green]",
            border_style="green",
        )
    )
