"""
Unit test fixtures.

`FakePage` stands in for a Playwright sync `Page`: it records every locator
action, serves configured text, and raises Playwright's TimeoutError for
selectors marked as missing. That is enough to drive whole page-object chains
without a browser.
"""

from pathlib import Path

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from leaftaps_suites.ui_testing.framework.config_loader import ConfigLoader


class FakeLocator:
    def __init__(self, page, selector):
        self.page = page
        self.selector = selector

    def _require(self):
        if self.selector in self.page.missing:
            raise PlaywrightTimeoutError(f"Timeout waiting for {self.selector}")

    def click(self, timeout=None):
        self._require()
        self.page.actions.append(("click", self.selector))

    def fill(self, value, timeout=None):
        self._require()
        self.page.values[self.selector] = value
        self.page.actions.append(("fill", self.selector, value))

    def select_option(self, label=None, timeout=None):
        self._require()
        self.page.values[self.selector] = label
        self.page.actions.append(("select", self.selector, label))

    def text_content(self, timeout=None):
        self._require()
        return self.page.texts.get(self.selector, "")

    def wait_for(self, state="visible", timeout=None):
        self._require()


class FakePage:
    def __init__(self, texts=None, missing=(), url="about:blank"):
        self.url = url
        self.texts = dict(texts or {})
        self.missing = set(missing)
        self.values = {}
        self.actions = []

    def locator(self, selector):
        return FakeLocator(self, selector)

    def goto(self, url, wait_until=None):
        self.url = url
        self.actions.append(("goto", url))

    def wait_for_load_state(self, state="load", timeout=None):
        self.actions.append(("wait_for_load_state", state))

    def screenshot(self, path=None, full_page=False):
        if path:
            Path(path).write_bytes(b"\x89PNG")
        self.actions.append(("screenshot", full_page))
        return b"\x89PNG"


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Start every unit test from the bundled config with no env overrides."""
    for key in (
        "UI_BASE_URL",
        "UI_LOGIN_PATH",
        "UI_ENABLED",
        "UI_TIMEOUT_MS",
        "DATA_DIRECTORY",
        "LOGGING_FILE",
        "LOGGING_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()


@pytest.fixture
def fake_page():
    return FakePage()


@pytest.fixture
def make_fake_page():
    return FakePage
