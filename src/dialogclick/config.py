"""dialogclick configuration management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from dialogclick.models import (
    DEFAULT_BROWSER,
    DEFAULT_BUTTON_TIMEOUT,
    DEFAULT_DIALOG_TIMEOUT,
    DEFAULT_NAVIGATION_TIMEOUT,
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_RETRY_DELAY,
    DEFAULT_SCROLL_SETTLE,
    DEFAULT_SETTLE_DELAY,
    DEFAULT_VIEWPORT,
    DIALOG_SELECTOR,
    SUPPORTED_BROWSERS,
)


class DialogClickConfigError(Exception):
    """Raised when configuration is invalid or missing."""

    pass


# camelCase names accepted for compatibility with existing option records
_OPTION_ALIASES = {
    "dialogTimeout": "dialog_timeout",
    "buttonTimeout": "button_timeout",
    "retryAttempts": "retry_attempts",
    "scrollIntoView": "scroll_into_view",
    "dialogSelector": "dialog_selector",
    "settleDelay": "settle_delay_ms",
    "scrollSettle": "scroll_settle_ms",
    "retryDelay": "retry_delay_ms",
    "debugScreenshot": "debug_screenshot",
}

_INT_FIELDS = (
    "dialog_timeout",
    "button_timeout",
    "retry_attempts",
    "settle_delay_ms",
    "scroll_settle_ms",
    "retry_delay_ms",
)

_CONFIG_KEYS = ("headless", "browser", "viewport", "navigation_timeout", "options")


def _require_int(name: str, value: Any, minimum: int = 0) -> int:
    # bool is an int subclass; YAML `yes` must not pass as 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise DialogClickConfigError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise DialogClickConfigError(f"{name} must be >= {minimum}, got {value}")
    return value


def _require_bool(name: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise DialogClickConfigError(f"{name} must be true or false, got {value!r}")
    return value


@dataclass
class ClickOptions:
    """Timeouts and retry policy for one dialog click. All times in ms."""

    dialog_timeout: int = DEFAULT_DIALOG_TIMEOUT
    button_timeout: int = DEFAULT_BUTTON_TIMEOUT
    retry_attempts: int = DEFAULT_RETRY_ATTEMPTS
    scroll_into_view: bool = True

    dialog_selector: str = DIALOG_SELECTOR
    settle_delay_ms: int = DEFAULT_SETTLE_DELAY
    scroll_settle_ms: int = DEFAULT_SCROLL_SETTLE
    retry_delay_ms: int = DEFAULT_RETRY_DELAY
    debug_screenshot: Path | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise DialogClickConfigError if any field is out of range."""
        for name in _INT_FIELDS:
            _require_int(name, getattr(self, name), minimum=1 if name == "retry_attempts" else 0)
        _require_bool("scroll_into_view", self.scroll_into_view)
        if not isinstance(self.dialog_selector, str):
            raise DialogClickConfigError(f"dialog_selector must be a string, got {self.dialog_selector!r}")
        if not self.dialog_selector.strip():
            raise DialogClickConfigError("dialog_selector must not be empty")
        if self.debug_screenshot is not None and not isinstance(self.debug_screenshot, (str, Path)):
            raise DialogClickConfigError(f"debug_screenshot must be a file path, got {self.debug_screenshot!r}")

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> ClickOptions:
        """Build options from a mapping with snake_case or camelCase keys."""
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise DialogClickConfigError(f"Options must be a mapping, got {type(data).__name__}")

        known = set(cls.__dataclass_fields__)
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                raise DialogClickConfigError(f"Unknown option: {key}")
            kwargs[name] = value

        screenshot = kwargs.get("debug_screenshot")
        if screenshot is not None:
            if not isinstance(screenshot, (str, Path)):
                raise DialogClickConfigError(f"debug_screenshot must be a file path, got {screenshot!r}")
            kwargs["debug_screenshot"] = Path(screenshot)
        return cls(**kwargs)


@dataclass
class DialogClickConfig:
    """Configuration for a CLI run: browser settings plus click options."""

    headless: bool = True
    browser: str = DEFAULT_BROWSER
    viewport: tuple[int, int] = DEFAULT_VIEWPORT
    navigation_timeout: int = DEFAULT_NAVIGATION_TIMEOUT
    options: ClickOptions = field(default_factory=ClickOptions)

    @classmethod
    def from_file(cls, config_path: Path) -> DialogClickConfig:
        """Load config from a YAML file."""
        if not config_path.exists():
            raise DialogClickConfigError(f"Config file not found: {config_path}")
        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise DialogClickConfigError(f"YAML parse error in {config_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise DialogClickConfigError(f"Config file must be a YAML mapping: {config_path}")
        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> DialogClickConfig:
        """Create config from a dictionary."""
        config = cls()

        unknown = [str(key) for key in data if key not in _CONFIG_KEYS]
        if unknown:
            raise DialogClickConfigError(
                f"Unknown config key(s): {', '.join(unknown)} (expected {', '.join(_CONFIG_KEYS)})"
            )

        if "headless" in data:
            config.headless = _require_bool("headless", data["headless"])
        if "browser" in data:
            browser = str(data["browser"]).lower()
            if browser not in SUPPORTED_BROWSERS:
                raise DialogClickConfigError(
                    f"Unsupported browser: {data['browser']} (expected one of {', '.join(SUPPORTED_BROWSERS)})"
                )
            config.browser = browser
        if "navigation_timeout" in data:
            config.navigation_timeout = _require_int("navigation_timeout", data["navigation_timeout"])
        if "viewport" in data:
            vp = data["viewport"]
            if isinstance(vp, dict):
                config.viewport = (
                    _require_int("viewport.width", vp.get("width", DEFAULT_VIEWPORT[0]), minimum=1),
                    _require_int("viewport.height", vp.get("height", DEFAULT_VIEWPORT[1]), minimum=1),
                )
            else:
                raise DialogClickConfigError("viewport must be a mapping with width and height")
        if "options" in data:
            config.options = ClickOptions.from_dict(data["options"])

        return config
