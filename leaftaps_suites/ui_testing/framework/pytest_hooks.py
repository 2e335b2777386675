"""
================================================================================
UI Test Hooks
================================================================================

Pytest hooks shared by every UI test directory. A conftest activates them by
importing the names:

    from leaftaps_suites.ui_testing.framework.pytest_hooks import (
        pytest_generate_tests,
        pytest_runtest_makereport,
    )

Failure evidence is best effort: if the page cannot be captured, a warning is
logged and the test keeps its original outcome.

================================================================================
"""

import pytest
from loguru import logger
from playwright.sync_api import Error as PlaywrightError

from .page_base import BasePage
from .project_base import parametrize_from_data_provider


def pytest_generate_tests(metafunc):
    """Expand `@pytest.mark.data_provider` tests into one case per data row."""
    parametrize_from_data_provider(metafunc)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Hook to capture screenshots on test failure.

    Attaches a full-page screenshot and the current URL to the Allure report
    when the call phase of a test holding a `page` fixture fails.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = getattr(item, "funcargs", {}).get("page")
        if page is None:
            return
        try:
            BasePage(page).capture_failure(item.name)
        except (PlaywrightError, OSError) as e:
            logger.warning(f"Failed to capture screenshot on failure: {e}")


__all__ = [
    "pytest_generate_tests",
    "pytest_runtest_makereport",
]
