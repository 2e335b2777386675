"""
================================================================================
View Lead Page Object
================================================================================

Read-only lead details shown after a lead is saved. Verification methods raise
`VerificationError` on mismatch and return the page otherwise, so they can
close a fluent chain.

================================================================================
"""

from __future__ import annotations

import re
from typing import Optional

import allure
from loguru import logger

from leaftaps_suites.ui_testing.framework.exceptions import VerificationError
from leaftaps_suites.ui_testing.framework.page_base import BasePage


# "TestLeaf (10123)" -> "10123"
LEAD_ID_PATTERN = re.compile(r"\((\d+)\)\s*$")


class ViewLeadPage(BasePage):
    """View Lead page object."""

    URL_PATH = "/crmsfa/control/viewLead"

    FIRST_NAME_TEXT = "#viewLead_firstName_sp"
    COMPANY_NAME_TEXT = "#viewLead_companyName_sp"

    def get_first_name(self) -> str:
        return self.get_text(self.FIRST_NAME_TEXT, name="First Name").strip()

    def get_lead_id(self) -> Optional[str]:
        """Lead id rendered next to the company name, or None."""
        company = self.get_text(self.COMPANY_NAME_TEXT, name="Company Name").strip()
        match = LEAD_ID_PATTERN.search(company)
        return match.group(1) if match else None

    @allure.step("Verify first name is '{expected}'")
    def verify_first_name(self, expected: str) -> "ViewLeadPage":
        """
        Compare the displayed first name with `expected`.

        Raises:
            VerificationError: When the names differ
        """
        actual = self.get_first_name()
        if actual != expected:
            raise VerificationError(
                f"First name mismatch: expected '{expected}', displayed '{actual}'"
            )
        logger.info(f"Lead created with first name '{actual}'")
        return self
