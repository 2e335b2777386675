"""
================================================================================
My Home Page Object
================================================================================

CRM/SFA home screen with the module tabs.

================================================================================
"""

from __future__ import annotations

from leaftaps_suites.ui_testing.framework.page_base import BasePage
from leaftaps_suites.ui_testing.pages.leads_page import LeadsPage


class MyHomePage(BasePage):
    """CRM/SFA home page object."""

    URL_PATH = "/crmsfa/control/main"

    LEADS_LINK = "a[href*='leadsMain']"

    def click_leads_link(self) -> LeadsPage:
        self.click(self.LEADS_LINK, name="Leads")
        return self._next(LeadsPage)
