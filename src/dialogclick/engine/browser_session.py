"""dialogclick Browser Session — Playwright browser lifecycle for standalone runs.

Launches a browser, creates a context with the configured viewport and opens
a single page.  Used by the CLI; library callers normally pass in a page
they already control.
"""

from __future__ import annotations

import logging
from typing import Any

from dialogclick.config import DialogClickConfig

logger = logging.getLogger("dialogclick.engine.browser_session")


class BrowserSession:
    """Owns one Playwright browser, context and page."""

    def __init__(self, config: DialogClickConfig | None = None) -> None:
        self._config = config or DialogClickConfig()

        # Managed lifecycle -- set by start()/stop()
        self._playwright: Any = None
        self._browser: Any = None
        self._context: Any = None
        self._page: Any = None

    @property
    def page(self) -> Any:
        if self._page is None:
            raise RuntimeError("BrowserSession not started. Call start() first.")
        return self._page

    def start(self) -> Any:
        """Launch the browser and open a page. Returns the page."""
        from playwright.sync_api import sync_playwright

        config = self._config
        self._playwright = sync_playwright().start()
        browser_type = getattr(self._playwright, config.browser)
        logger.info("Launching %s (headless=%s)", config.browser, config.headless)
        self._browser = browser_type.launch(headless=config.headless)
        self._context = self._browser.new_context(
            viewport={"width": config.viewport[0], "height": config.viewport[1]},
        )
        self._page = self._context.new_page()
        self._page.set_default_navigation_timeout(config.navigation_timeout)
        return self._page

    def goto(self, url: str) -> None:
        logger.info("Navigating to %s", url)
        self.page.goto(url, wait_until="domcontentloaded")

    def stop(self) -> None:
        """Close context, browser and Playwright. Safe to call more than once."""
        for name in ("_context", "_browser"):
            resource = getattr(self, name)
            try:
                if resource is not None:
                    resource.close()
            except Exception as exc:
                logger.debug("Error closing %s: %s", name.lstrip("_"), exc)
        try:
            if self._playwright is not None:
                self._playwright.stop()
        except Exception as exc:
            logger.debug("Error stopping Playwright: %s", exc)
        self._context = None
        self._browser = None
        self._playwright = None
        self._page = None

    def __enter__(self) -> BrowserSession:
        self.start()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.stop()
