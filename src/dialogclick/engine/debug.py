"""Best-effort failure context: element presence, current URL, screenshot.

Nothing here raises.  Each probe is guarded on its own so one broken probe
(e.g. the page was closed) does not hide the others.
"""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from playwright.sync_api import Page

logger = logging.getLogger("dialogclick.engine.debug")


@dataclasses.dataclass
class DebugInfo:
    """Page context captured after a failed dialog interaction."""

    dialog_exists: bool | None = None
    button_exists: bool | None = None
    current_url: str | None = None
    screenshot_path: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


def _element_exists(page: Page, selector: str) -> bool | None:
    try:
        return page.query_selector(selector) is not None
    except Exception as exc:
        logger.debug("Could not query %s: %s", selector, exc)
        return None


def collect_debug_info(page: Page, button_selector: str, dialog_selector: str) -> DebugInfo:
    """Gather dialog/button presence and the page URL. ``None`` means unknown."""
    info = DebugInfo(
        dialog_exists=_element_exists(page, dialog_selector),
        button_exists=_element_exists(page, button_selector),
    )
    try:
        info.current_url = page.url
    except Exception as exc:
        logger.debug("Could not read page URL: %s", exc)
    return info


def capture_debug_screenshot(page: Page, path: str | Path) -> str | None:
    """Save a full-page screenshot. Returns the path, or None on failure."""
    try:
        page.screenshot(path=str(path), full_page=True)
    except Exception as exc:
        logger.info("Could not capture debug screenshot: %s", exc)
        return None
    logger.info("Debug screenshot saved as %s", path)
    return str(path)
