"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the Leaftaps CRM screens.

Each page class encapsulates:
    - Element selectors
    - Page-specific actions returning the next page object
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .view_lead_page import ViewLeadPage
from .create_lead_page import CreateLeadPage
from .leads_page import LeadsPage
from .my_home_page import MyHomePage
from .welcome_page import WelcomePage
from .login_page import LoginPage

__all__ = [
    "CreateLeadPage",
    "LeadsPage",
    "LoginPage",
    "MyHomePage",
    "ViewLeadPage",
    "WelcomePage",
]
