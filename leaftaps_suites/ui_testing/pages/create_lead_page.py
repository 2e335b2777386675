"""
================================================================================
Create Lead Page Object
================================================================================

Lead entry form. Only the fields the regression suite fills are modelled.

================================================================================
"""

from __future__ import annotations

from leaftaps_suites.ui_testing.framework.page_base import BasePage
from leaftaps_suites.ui_testing.pages.view_lead_page import ViewLeadPage


class CreateLeadPage(BasePage):
    """Create Lead form page object."""

    URL_PATH = "/crmsfa/control/createLeadForm"

    COMPANY_NAME_INPUT = "#createLeadForm_companyName"
    FIRST_NAME_INPUT = "#createLeadForm_firstName"
    LAST_NAME_INPUT = "#createLeadForm_lastName"
    SOURCE_SELECT = "#createLeadForm_dataSourceId"
    SUBMIT_BUTTON = "input[name='submitButton']"

    def enter_company_name(self, company_name: str) -> "CreateLeadPage":
        self.fill(self.COMPANY_NAME_INPUT, company_name, name="Company Name")
        return self

    def enter_first_name(self, first_name: str) -> "CreateLeadPage":
        self.fill(self.FIRST_NAME_INPUT, first_name, name="First Name")
        return self

    def enter_last_name(self, last_name: str) -> "CreateLeadPage":
        self.fill(self.LAST_NAME_INPUT, last_name, name="Last Name")
        return self

    def select_source(self, source: str) -> "CreateLeadPage":
        """Pick the lead source by its visible label, e.g. "Conference"."""
        self.select_by_label(self.SOURCE_SELECT, source, name="Source")
        return self

    def click_create_lead_button(self) -> ViewLeadPage:
        self.click(self.SUBMIT_BUTTON, name="Create Lead")
        return self._next(ViewLeadPage)
