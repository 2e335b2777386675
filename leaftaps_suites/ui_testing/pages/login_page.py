"""
================================================================================
Login Page Object
================================================================================

Entry screen of the Leaftaps (opentaps) application.

Selectors follow the ids the application renders.

================================================================================
"""

from __future__ import annotations

import allure

from leaftaps_suites.ui_testing.framework.exceptions import VerificationError
from leaftaps_suites.ui_testing.framework.page_base import BasePage
from leaftaps_suites.ui_testing.pages.welcome_page import WelcomePage


class LoginPage(BasePage):
    """Login page object."""

    URL_PATH = "/opentaps/control/main"
    PAGE_TITLE = "Leaftaps - TestLeaf Automation Platform"

    USERNAME_INPUT = "#username"
    PASSWORD_INPUT = "#password"
    LOGIN_BUTTON = "input.decorativeSubmit"
    ERROR_MESSAGE = "#errorDiv"

    @allure.step("Open login page")
    def open(self) -> "LoginPage":
        """Navigate to the login page."""
        self.navigate()
        return self

    @allure.step("Verify login form is displayed")
    def verify_form_displayed(self) -> "LoginPage":
        """Raise VerificationError unless username, password and login button are visible."""
        missing = [
            selector
            for selector in (self.USERNAME_INPUT, self.PASSWORD_INPUT, self.LOGIN_BUTTON)
            if not self.is_visible(selector)
        ]
        if missing:
            raise VerificationError(f"Login form elements not visible: {missing}")
        return self

    def enter_username(self, username: str) -> "LoginPage":
        self.fill(self.USERNAME_INPUT, username, name="Username")
        return self

    def enter_password(self, password: str) -> "LoginPage":
        self.fill(self.PASSWORD_INPUT, password, name="Password", secret=True)
        return self

    def click_login(self) -> WelcomePage:
        """Submit credentials; the welcome page is expected next."""
        self.click(self.LOGIN_BUTTON, name="Login")
        return self._next(WelcomePage)

    def click_login_expecting_error(self) -> "LoginPage":
        """Submit credentials that should be rejected."""
        self.click(self.LOGIN_BUTTON, name="Login")
        return self

    @allure.step("Verify login error is displayed")
    def verify_error_displayed(self) -> "LoginPage":
        if not self.is_visible(self.ERROR_MESSAGE, timeout=self.timeout):
            raise VerificationError("Login error message was not displayed")
        return self
