"""
================================================================================
Welcome Page Object
================================================================================

Landing screen right after a successful login.

================================================================================
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import allure

from leaftaps_suites.ui_testing.framework.exceptions import VerificationError
from leaftaps_suites.ui_testing.framework.page_base import BasePage
from leaftaps_suites.ui_testing.pages.my_home_page import MyHomePage

if TYPE_CHECKING:
    from leaftaps_suites.ui_testing.pages.login_page import LoginPage


class WelcomePage(BasePage):
    """Welcome page object."""

    URL_PATH = "/opentaps/control/login"

    WELCOME_HEADER = "h2:has-text('Welcome')"
    CRMSFA_LINK = "a:has-text('CRM/SFA')"
    LOGOUT_BUTTON = "input[value='Logout']"

    @allure.step("Verify welcome message is displayed")
    def verify_welcome_displayed(self) -> "WelcomePage":
        if not self.is_visible(self.WELCOME_HEADER, timeout=self.timeout):
            raise VerificationError("Welcome message was not displayed after login")
        return self

    def click_crmsfa_link(self) -> MyHomePage:
        self.click(self.CRMSFA_LINK, name="CRM/SFA")
        return self._next(MyHomePage)

    def click_logout(self) -> "LoginPage":
        from leaftaps_suites.ui_testing.pages.login_page import LoginPage

        self.click(self.LOGOUT_BUTTON, name="Logout")
        return self._next(LoginPage)
