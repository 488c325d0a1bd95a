"""Unit tests for dialogclick.models — selectors, defaults and strategy names."""

from __future__ import annotations

from dialogclick.models import (
    CLICK_STRATEGIES,
    DEFAULT_BUTTON_TIMEOUT,
    DEFAULT_DIALOG_TIMEOUT,
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_RETRY_DELAY,
    DIALOG_SELECTOR,
    DIALOG_SELECTORS,
    SUPPORTED_BROWSERS,
)


class TestSelectors:
    def test_combined_selector_parts_are_all_probed(self):
        """Every part of the combined selector is also probed individually."""
        for part in DIALOG_SELECTOR.split(", "):
            assert part in DIALOG_SELECTORS

    def test_probe_list_starts_with_role_dialog(self):
        assert DIALOG_SELECTORS[0] == '[role="dialog"]'

    def test_probe_list_has_no_duplicates(self):
        assert len(DIALOG_SELECTORS) == len(set(DIALOG_SELECTORS))


class TestDefaults:
    def test_dialog_wait_is_longer_than_button_wait(self):
        assert DEFAULT_DIALOG_TIMEOUT > DEFAULT_BUTTON_TIMEOUT

    def test_one_attempt_per_strategy_by_default(self):
        assert DEFAULT_RETRY_ATTEMPTS == len(CLICK_STRATEGIES)

    def test_retry_delay_is_one_second(self):
        assert DEFAULT_RETRY_DELAY == 1_000

    def test_strategy_order(self):
        assert CLICK_STRATEGIES == ("standard", "force", "javascript")

    def test_chromium_is_supported(self):
        assert "chromium" in SUPPORTED_BROWSERS
