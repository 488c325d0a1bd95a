"""dialogclick Dialog Clicker — Wait for a modal dialog, then click a button in it.

Runs a fixed sequence against a Playwright page: wait for a visible dialog,
let its open animation finish, wait for the target button to be visible and
clickable, scroll it to the viewport center, then click it.  The click is
retried with progressively less strict strategies:

1. Standard click (Playwright actionability checks apply)
2. Forced click (actionability checks skipped)
3. Direct DOM ``element.click()`` (bypasses Playwright entirely)

On failure the page context is logged (and optionally screenshotted)
before the error propagates to the caller.
"""

from __future__ import annotations

import dataclasses
import logging
import time
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dialogclick.config import ClickOptions
from dialogclick.engine import scripts
from dialogclick.engine.debug import DebugInfo, capture_debug_screenshot, collect_debug_info
from dialogclick.models import (
    ALT_BUTTON_ENABLED_TIMEOUT,
    ALT_BUTTON_VISIBLE_TIMEOUT,
    ALT_DEBUG_SCREENSHOT,
    ALT_DIALOG_PROBE_TIMEOUT,
    ALT_LOADING_TIMEOUT,
    ALT_SCROLL_SETTLE,
    CLICK_STRATEGIES,
    DIALOG_SELECTORS,
    LOADING_SELECTOR,
    STRATEGY_FORCE,
    STRATEGY_JAVASCRIPT,
    STRATEGY_STANDARD,
)

if TYPE_CHECKING:
    from playwright.sync_api import Page

logger = logging.getLogger("dialogclick.engine.dialog_clicker")


class DialogClickError(Exception):
    """Raised when the button could not be clicked after all retry attempts."""

    def __init__(
        self,
        message: str,
        button_selector: str = "",
        last_error: BaseException | None = None,
        attempts: list[ClickAttempt] | None = None,
    ) -> None:
        super().__init__(message)
        self.button_selector = button_selector
        self.last_error = last_error
        self.attempts = attempts or []
        self.debug_info: DebugInfo | None = None


class DialogNotFoundError(DialogClickError):
    """Raised when none of the known dialog selectors matched a visible element."""

    pass


@dataclasses.dataclass
class ClickAttempt:
    """One failed click attempt."""

    attempt: int
    strategy: str
    error: str
    duration_ms: float = 0.0


def strategy_for_attempt(attempt: int) -> str:
    """Map a 1-based attempt number to its click strategy.

    Attempts past the last strategy keep using the last one.
    """
    index = min(max(attempt, 1), len(CLICK_STRATEGIES)) - 1
    return CLICK_STRATEGIES[index]


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class DialogClicker:
    """Drives the dialog-wait-then-click sequence against one Playwright page."""

    def __init__(self, page: Page, options: ClickOptions | dict[str, Any] | None = None) -> None:
        if options is None or isinstance(options, dict):
            options = ClickOptions.from_dict(options)
        self._page = page
        self.options = options
        self.attempts: list[ClickAttempt] = []

    # -- Waiting -------------------------------------------------------------

    def wait_for_dialog(self) -> None:
        """Wait until a dialog is visible, not just attached to the DOM."""
        logger.info("Waiting for dialog to appear...")
        self._page.wait_for_selector(
            self.options.dialog_selector,
            state="visible",
            timeout=self.options.dialog_timeout,
        )
        logger.info("Dialog is visible")

    def wait_for_button(self, button_selector: str) -> None:
        logger.info("Waiting for button: %s", button_selector)
        self._page.wait_for_selector(
            button_selector,
            state="visible",
            timeout=self.options.button_timeout,
        )

    def wait_until_clickable(self, button_selector: str) -> None:
        """Wait until the button passes the layout and computed-style checks."""
        self._page.wait_for_function(
            scripts.JS_IS_CLICKABLE,
            arg=button_selector,
            timeout=self.options.button_timeout,
        )

    def scroll_into_view(self, button_selector: str) -> None:
        self._page.evaluate(scripts.JS_SCROLL_INTO_VIEW_SMOOTH, button_selector)
        # smooth scrolling is asynchronous in the page
        self._page.wait_for_timeout(self.options.scroll_settle_ms)

    # -- Clicking ------------------------------------------------------------

    def click(self, button_selector: str, strategy: str) -> None:
        """Click once with the given strategy. Raises on failure.

        The ``javascript`` strategy raises DialogClickError when the selector
        matches nothing at click time.  Scripts that did
        ``document.querySelector(sel)?.click()`` counted that case as a
        success; here it is a failed attempt and the retry loop moves on.
        """
        if strategy == STRATEGY_STANDARD:
            self._page.click(button_selector)
        elif strategy == STRATEGY_FORCE:
            self._page.click(button_selector, force=True)
        elif strategy == STRATEGY_JAVASCRIPT:
            found = self._page.evaluate(scripts.JS_DOM_CLICK, button_selector)
            if found is False:
                raise DialogClickError(
                    f"Element not found for direct click: {button_selector}",
                    button_selector=button_selector,
                )
        else:
            raise ValueError(f"Unknown click strategy: {strategy}")

    def click_with_retry(self, button_selector: str) -> str:
        """Try each strategy in turn. Returns the strategy that worked.

        Sleeps ``retry_delay_ms`` between attempts, not after the last one.
        Raises DialogClickError carrying the last underlying error when every
        attempt fails.
        """
        retry_attempts = self.options.retry_attempts
        self.attempts = []
        last_error: BaseException | None = None

        for attempt in range(1, retry_attempts + 1):
            strategy = strategy_for_attempt(attempt)
            start = time.monotonic()
            try:
                logger.info("Click attempt %d/%d (%s)", attempt, retry_attempts, strategy)
                self.click(button_selector, strategy)
                logger.info("Button clicked successfully")
                return strategy
            except Exception as exc:
                last_error = exc
                self.attempts.append(
                    ClickAttempt(
                        attempt=attempt,
                        strategy=strategy,
                        error=_describe(exc),
                        duration_ms=round((time.monotonic() - start) * 1000, 1),
                    )
                )
                logger.warning("Click attempt %d failed: %s", attempt, _describe(exc))
                if attempt < retry_attempts:
                    self._page.wait_for_timeout(self.options.retry_delay_ms)

        last_message = _describe(last_error) if last_error is not None else None
        raise DialogClickError(
            f"Failed to click button after {retry_attempts} attempts. Last error: {last_message}",
            button_selector=button_selector,
            last_error=last_error,
            attempts=list(self.attempts),
        ) from last_error

    # -- Full sequence -------------------------------------------------------

    def run(self, button_selector: str) -> bool:
        """Wait for the dialog and click ``button_selector`` inside it.

        Returns True on success.  Any failure is logged together with the
        page context and then re-raised unchanged.
        """
        try:
            self.wait_for_dialog()
            # let open animations finish
            self._page.wait_for_timeout(self.options.settle_delay_ms)
            self.wait_for_button(button_selector)
            self.wait_until_clickable(button_selector)
            if self.options.scroll_into_view:
                self.scroll_into_view(button_selector)
            self.click_with_retry(button_selector)
            return True
        except Exception as exc:
            logger.error("Dialog interaction failed: %s", _describe(exc))
            info = self.report_failure(button_selector, self.options.debug_screenshot)
            if isinstance(exc, DialogClickError):
                exc.debug_info = info
            raise

    def report_failure(self, button_selector: str, screenshot_path: str | Path | None = None) -> DebugInfo:
        """Log page context after a failure; optionally save a screenshot."""
        info = collect_debug_info(self._page, button_selector, self.options.dialog_selector)
        if screenshot_path is not None:
            info.screenshot_path = capture_debug_screenshot(self._page, screenshot_path)
        logger.info("Debug info: %s", info.to_dict())
        return info

    # -- Alternative sequence ------------------------------------------------

    def find_dialog(self, selectors: list[str] | None = None) -> str:
        """Probe each dialog selector in order; return the first visible one."""
        for selector in selectors or DIALOG_SELECTORS:
            try:
                self._page.wait_for_selector(selector, state="visible", timeout=ALT_DIALOG_PROBE_TIMEOUT)
            except Exception:
                logger.debug("No visible dialog for selector %s", selector)
                continue
            logger.info("Dialog found with selector: %s", selector)
            return selector
        raise DialogNotFoundError("No dialog found with any of the expected selectors")

    def run_alternative(self, button_selector: str) -> bool:
        """Selector-by-selector dialog probing, loading wait, single click.

        Uses fixed timeouts.  On failure a full-page screenshot is attempted
        (to ``debug_screenshot`` or ``dialog-error-debug.png``) and the error
        is re-raised.
        """
        try:
            logger.info("Waiting for dialog with multiple strategies...")
            self.find_dialog()

            self._page.wait_for_function(
                scripts.JS_NO_LOADING_INDICATORS,
                arg=LOADING_SELECTOR,
                timeout=ALT_LOADING_TIMEOUT,
            )

            logger.info("Looking for button: %s", button_selector)
            self._page.wait_for_selector(button_selector, state="visible", timeout=ALT_BUTTON_VISIBLE_TIMEOUT)
            self._page.wait_for_function(
                scripts.JS_IS_ENABLED,
                arg=button_selector,
                timeout=ALT_BUTTON_ENABLED_TIMEOUT,
            )

            self._page.evaluate(scripts.JS_SCROLL_INTO_VIEW, button_selector)
            self._page.wait_for_timeout(ALT_SCROLL_SETTLE)

            self._page.click(button_selector)
            logger.info("Button clicked successfully")
            return True
        except Exception as exc:
            logger.error("Enhanced dialog interaction failed: %s", _describe(exc))
            screenshot_path = self.options.debug_screenshot or ALT_DEBUG_SCREENSHOT
            capture_debug_screenshot(self._page, screenshot_path)
            raise


def wait_for_dialog_and_click(
    page: Page,
    button_selector: str,
    options: ClickOptions | dict[str, Any] | None = None,
) -> bool:
    """Wait for a dialog, then click ``button_selector`` with retries.

    Args:
        page: Playwright page (sync API).
        button_selector: CSS selector of the button inside the dialog.
        options: ClickOptions, or a mapping using snake_case or the
            ``dialogTimeout``/``buttonTimeout``/``retryAttempts``/
            ``scrollIntoView`` keys.

    Returns:
        True when the button was clicked.

    Raises:
        DialogClickError: every click attempt failed.
        playwright.sync_api.TimeoutError: a wait step timed out.
    """
    return DialogClicker(page, options).run(button_selector)


def wait_for_dialog_and_click_alternative(
    page: Page,
    button_selector: str,
    options: ClickOptions | dict[str, Any] | None = None,
) -> bool:
    """Probe dialog selectors one by one, wait out loaders, click once."""
    return DialogClicker(page, options).run_alternative(button_selector)
