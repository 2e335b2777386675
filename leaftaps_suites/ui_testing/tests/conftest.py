"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for UI tests, providing fixtures for browser
management, page objects, and test setup/teardown.

Key Features:
- Browser and page lifecycle management
- Data-provider parametrization for ProjectSpecificTest cases
- Screenshot capture on failure

UI tests need a reachable Leaftaps application and are skipped unless
UI_ENABLED=true (or `ui.enabled: true` in config.yaml).

================================================================================
"""

from typing import Generator

import pytest
from playwright.sync_api import BrowserContext, Page

from leaftaps_suites.ui_testing.framework.browser_manager import BrowserManager
from leaftaps_suites.ui_testing.framework.config_loader import ConfigLoader
from leaftaps_suites.ui_testing.framework.pytest_hooks import (  # noqa: F401
    pytest_generate_tests,
    pytest_runtest_makereport,
)
from leaftaps_suites.ui_testing.pages.login_page import LoginPage


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def browser_manager() -> Generator[BrowserManager, None, None]:
    """
    Session-scoped browser manager fixture.

    Launches a single browser for all UI tests in the session.
    """
    config = ConfigLoader()
    if not config.get("ui.enabled", False):
        pytest.skip("UI tests disabled; set UI_ENABLED=true to run against a live app")

    manager = BrowserManager(
        headless=config.get("ui.headless", True),
        browser_type=config.get("ui.browser", "chromium"),
        viewport={
            "width": config.get("ui.viewport.width", 1920),
            "height": config.get("ui.viewport.height", 1080),
        },
    )
    manager.start()
    yield manager
    manager.close()


@pytest.fixture(scope="function")
def context(browser_manager: BrowserManager) -> Generator[BrowserContext, None, None]:
    """
    Function-scoped browser context fixture.

    Creates a new browser context for each test, providing isolation.
    """
    context = browser_manager.new_context()
    yield context
    browser_manager.release(context)


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    """Function-scoped page fixture."""
    page = context.new_page()
    page.set_default_timeout(ConfigLoader().get("ui.timeout_ms", 10000))
    yield page
    page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(page: Page) -> LoginPage:
    """Provides LoginPage instance."""
    return LoginPage(page)


@pytest.fixture
def test_data():
    """
    Provides credentials for UI tests that are not sheet-driven.
    """
    config = ConfigLoader()
    return {
        "valid_user": {
            "username": config.get("ui.username"),
            "password": config.get("ui.password"),
        },
        "invalid_user": {
            "username": "invalid_user",
            "password": "wrong_password",
        },
    }
