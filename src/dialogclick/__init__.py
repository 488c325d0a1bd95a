"""dialogclick — wait for a modal dialog, then click a button inside it."""

__version__ = "0.1.0"

from dialogclick.config import ClickOptions, DialogClickConfig, DialogClickConfigError
from dialogclick.engine.dialog_clicker import (
    ClickAttempt,
    DialogClickError,
    DialogClicker,
    DialogNotFoundError,
    wait_for_dialog_and_click,
    wait_for_dialog_and_click_alternative,
)

__all__ = [
    "ClickAttempt",
    "ClickOptions",
    "DialogClickConfig",
    "DialogClickConfigError",
    "DialogClickError",
    "DialogClicker",
    "DialogNotFoundError",
    "wait_for_dialog_and_click",
    "wait_for_dialog_and_click_alternative",
]
