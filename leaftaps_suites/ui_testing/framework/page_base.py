"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation relative to the configured base URL
    - Thin, reported wrappers over Playwright locator actions
    - Screenshot and failure-capture utilities

Waiting and element resolution are left to Playwright's auto-waiting locators.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

import allure
from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from .config_loader import ConfigLoader


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"


class BasePage:
    """
    Base class for all page objects.

    Actions that keep the user on the same screen return `self`; actions that
    move to another screen return that screen's page object, which makes a
    whole workflow readable as one chained expression.

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/opentaps/control/main"
            USERNAME_INPUT = "#username"

            def enter_username(self, username: str) -> "LoginPage":
                self.fill(self.USERNAME_INPUT, username, name="Username")
                return self
    """

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = ""

    def __init__(
        self,
        page: Page,
        base_url: str = "",
        timeout: Optional[int] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL for the application. Defaults to `ui.base_url`.
            timeout: Action timeout in milliseconds. Defaults to `ui.timeout_ms`.
        """
        config = ConfigLoader()
        self.page = page
        if not base_url:
            base_url = config.get("ui.base_url", "http://leaftaps.com")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else config.get("ui.timeout_ms", 10000)

    def _next(self, page_class: type) -> "BasePage":
        """Build the next page object over the same browser page."""
        return page_class(self.page, base_url=self.base_url, timeout=self.timeout)

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    def navigate(self, wait_for: str = "load") -> None:
        """
        Navigate to this page.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
        """
        with allure.step(f"Navigate to {self.URL_PATH}"):
            self.page.goto(self.url, wait_until=wait_for)
            logger.debug(f"Navigated to: {self.url}")

    def wait_for_page_load(self, state: str = "load") -> None:
        """
        Wait for the page to reach a stable load state.

        Args:
            state: Playwright load state ('load', 'domcontentloaded', 'networkidle')
        """
        self.page.wait_for_load_state(state, timeout=self.timeout)

    # =========================================================================
    # Element Interactions
    # =========================================================================

    def click(self, selector: str, name: str = "") -> None:
        """
        Click element.

        Args:
            selector: Playwright selector
            name: Human-readable element name for the report
        """
        with allure.step(f"Click: {name or selector}"):
            self.page.locator(selector).click(timeout=self.timeout)
            logger.debug(f"Clicked: {name or selector}")

    def fill(
        self,
        selector: str,
        value: str,
        name: str = "",
        secret: bool = False,
    ) -> None:
        """
        Fill input element.

        Args:
            selector: Playwright selector
            value: Value to fill
            name: Human-readable element name for the report
            secret: Mask the value in report and log
        """
        shown = "*" * len(value) if secret else value
        with allure.step(f"Fill {name or selector}: {shown}"):
            self.page.locator(selector).fill(value, timeout=self.timeout)
            logger.debug(f"Filled {name or selector}: {shown}")

    def select_by_label(self, selector: str, label: str, name: str = "") -> None:
        """
        Select a dropdown option by its visible text.

        Args:
            selector: Playwright selector of the <select> element
            label: Visible option text
            name: Human-readable element name for the report
        """
        with allure.step(f"Select {name or selector}: {label}"):
            self.page.locator(selector).select_option(label=label, timeout=self.timeout)
            logger.debug(f"Selected {label} in {name or selector}")

    def get_text(self, selector: str, name: str = "") -> str:
        """
        Get text content of element.

        Args:
            selector: Playwright selector
            name: Human-readable element name for the log

        Returns:
            Text content
        """
        text = self.page.locator(selector).text_content(timeout=self.timeout) or ""
        logger.debug(f"Text of {name or selector}: '{text}'")
        return text

    def is_visible(self, selector: str, timeout: int = 2000) -> bool:
        """
        Check if element becomes visible within `timeout`.

        Args:
            selector: Playwright selector
            timeout: Timeout for visibility check in milliseconds

        Returns:
            True if visible
        """
        try:
            self.page.locator(selector).wait_for(state="visible", timeout=timeout)
            return True
        except PlaywrightError:
            return False

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            allure.attach.file(
                str(filepath),
                name=name,
                attachment_type=allure.attachment_type.PNG,
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    def capture_failure(self, test_name: str) -> None:
        """
        Capture debugging information on test failure.

        Saves:
            - Full-page screenshot
            - Current URL
        """
        with allure.step("Capture failure details"):
            self.screenshot(f"failure_{test_name}", full_page=True)
            allure.attach(
                self.page.url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )


__all__ = [
    "BasePage",
    "SCREENSHOT_DIR",
]
