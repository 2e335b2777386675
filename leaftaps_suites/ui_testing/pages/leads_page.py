"""
================================================================================
Leads Page Object
================================================================================

Leads module landing screen with the shortcuts menu.

================================================================================
"""

from __future__ import annotations

from leaftaps_suites.ui_testing.framework.page_base import BasePage
from leaftaps_suites.ui_testing.pages.create_lead_page import CreateLeadPage


class LeadsPage(BasePage):
    """Leads page object."""

    URL_PATH = "/crmsfa/control/leadsMain"

    CREATE_LEAD_LINK = "a[href*='createLeadForm']"

    def click_create_lead_link(self) -> CreateLeadPage:
        self.click(self.CREATE_LEAD_LINK, name="Create Lead")
        return self._next(CreateLeadPage)
