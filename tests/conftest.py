"""Shared fixtures for dialogclick unit tests."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
import yaml


# ---------------------------------------------------------------------------
# Fixture: Playwright page stand-in
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_page() -> MagicMock:
    """A MagicMock shaped like playwright.sync_api.Page.

    Every wait and click succeeds unless a test sets a side_effect.
    ``evaluate`` returns True so the direct DOM click reports a hit.
    """
    mock_page = MagicMock(name="Page")
    mock_page.url = "http://localhost:3000/settings"
    mock_page.evaluate.return_value = True
    mock_page.query_selector.return_value = MagicMock(name="ElementHandle")
    return mock_page


# ---------------------------------------------------------------------------
# Fixture: sample config YAML
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_config_yaml() -> str:
    """Return a valid dialogclick config.yaml as a string."""
    return """\
headless: false
browser: firefox
viewport:
  width: 1920
  height: 1080
navigation_timeout: 15000
options:
  dialog_timeout: 15000
  button_timeout: 8000
  retry_attempts: 5
  scroll_into_view: true
  debug_screenshot: debug.png
"""


@pytest.fixture
def config_file(tmp_path: Path, sample_config_yaml: str) -> Path:
    path = tmp_path / "dialogclick.yaml"
    path.write_text(sample_config_yaml, encoding="utf-8")
    return path


@pytest.fixture
def write_yaml(tmp_path: Path):
    """Return a helper that dumps a dict to a YAML file under tmp_path."""

    def _write(data, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.dump(data, default_flow_style=False), encoding="utf-8")
        return path

    return _write
