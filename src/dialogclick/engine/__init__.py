"""dialogclick engine — dialog waiting and click strategies.

- DialogClicker: dialog -> button -> clickability -> scroll -> click with retries
- BrowserSession: Playwright browser lifecycle for standalone runs
- collect_debug_info / capture_debug_screenshot: best-effort failure context
"""

from dialogclick.engine.browser_session import BrowserSession
from dialogclick.engine.debug import DebugInfo, capture_debug_screenshot, collect_debug_info
from dialogclick.engine.dialog_clicker import (
    ClickAttempt,
    DialogClickError,
    DialogClicker,
    DialogNotFoundError,
    strategy_for_attempt,
    wait_for_dialog_and_click,
    wait_for_dialog_and_click_alternative,
)

__all__ = [
    "BrowserSession",
    "ClickAttempt",
    "DebugInfo",
    "DialogClickError",
    "DialogClicker",
    "DialogNotFoundError",
    "capture_debug_screenshot",
    "collect_debug_info",
    "strategy_for_attempt",
    "wait_for_dialog_and_click",
    "wait_for_dialog_and_click_alternative",
]
