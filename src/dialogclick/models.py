"""Centralized selectors, timeouts and click strategy names."""

# Combined selector for any dialog-like element
DIALOG_SELECTOR = '[role="dialog"], .modal, dialog, .dialog, .popup'

# Probed one at a time by the alternative helper
DIALOG_SELECTORS = [
    '[role="dialog"]',
    ".modal",
    "dialog",
    ".dialog",
    ".popup",
    ".overlay",
    '[data-testid*="dialog"]',
    '[data-testid*="modal"]',
]

LOADING_SELECTOR = '.loading, .spinner, [data-loading="true"]'

# Timeouts (ms)
DEFAULT_DIALOG_TIMEOUT = 10_000
DEFAULT_BUTTON_TIMEOUT = 5_000
DEFAULT_SETTLE_DELAY = 500
DEFAULT_SCROLL_SETTLE = 300
DEFAULT_RETRY_DELAY = 1_000
DEFAULT_RETRY_ATTEMPTS = 3

# Alternative helper
ALT_DIALOG_PROBE_TIMEOUT = 2_000
ALT_LOADING_TIMEOUT = 5_000
ALT_BUTTON_VISIBLE_TIMEOUT = 10_000
ALT_BUTTON_ENABLED_TIMEOUT = 5_000
ALT_SCROLL_SETTLE = 500
ALT_DEBUG_SCREENSHOT = "dialog-error-debug.png"

# Click strategies, in the order they are attempted
STRATEGY_STANDARD = "standard"
STRATEGY_FORCE = "force"
STRATEGY_JAVASCRIPT = "javascript"
CLICK_STRATEGIES = (STRATEGY_STANDARD, STRATEGY_FORCE, STRATEGY_JAVASCRIPT)

# Browser defaults for the CLI
DEFAULT_VIEWPORT = (1280, 720)
DEFAULT_BROWSER = "chromium"
SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")
DEFAULT_NAVIGATION_TIMEOUT = 30_000
