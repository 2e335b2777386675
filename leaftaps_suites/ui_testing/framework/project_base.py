"""
================================================================================
Project-Specific Test Base
================================================================================

Base class shared by every Leaftaps UI test case.

A test case only declares who it is and where its data lives:

    class TestCreateLead(ProjectSpecificTest):
        testcase_name = "CreateLead"
        test_description = "Verify that the lead is created"
        authors = "Testleaf"
        category = "Smoke"
        data_file_name = "CreateLead"

        @pytest.mark.data_provider
        def test_create_lead(self, username, password, ...):
            ...

The base class then:
    - publishes the metadata to the Allure report
    - opens the application login page on a fresh browser page (`self.page`)
    - parametrizes `data_provider` tests from the named data sheet

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generator, Optional

import allure
import pytest
from loguru import logger
from playwright.sync_api import Page

from .config_loader import ConfigLoader
from .data_provider import DataProvider
from .exceptions import DataProviderError, MetadataError


DATA_PROVIDER_MARKER = "data_provider"


@dataclass
class TestCaseMetadata:
    """Descriptive fields of one test case."""
    __test__ = False

    testcase_name: str
    test_description: str = ""
    authors: str = ""
    category: str = ""
    data_file_name: str = ""

    def validate(self) -> None:
        """Raise MetadataError when the test case is anonymous."""
        if not self.testcase_name:
            raise MetadataError("Test case declares no testcase_name")

    def apply_to_report(self) -> None:
        """Publish title, description, owner and category to Allure."""
        allure.dynamic.title(self.testcase_name)
        if self.test_description:
            allure.dynamic.description(self.test_description)
        if self.authors:
            allure.dynamic.label("owner", self.authors)
        if self.category:
            allure.dynamic.tag(self.category)


class ProjectSpecificTest:
    """
    Base class for data-driven UI test cases.

    Subclasses override the metadata class attributes. The autouse fixture
    below runs before every test method and leaves the application's login
    page open in `self.page`.
    """

    testcase_name: str = ""
    test_description: str = ""
    authors: str = ""
    category: str = ""
    data_file_name: str = ""

    page: Page

    @classmethod
    def metadata(cls) -> TestCaseMetadata:
        """Collect the class-level metadata."""
        return TestCaseMetadata(
            testcase_name=cls.testcase_name,
            test_description=cls.test_description,
            authors=cls.authors,
            category=cls.category,
            data_file_name=cls.data_file_name,
        )

    @pytest.fixture(autouse=True)
    def _start_app(self, page: Page) -> Generator[None, None, None]:
        """Publish metadata and open the application for this test."""
        metadata = self.metadata()
        metadata.validate()
        metadata.apply_to_report()

        self.page = page
        self.start_app(page)
        logger.info(f"Started test case: {metadata.testcase_name}")
        yield
        logger.info(f"Finished test case: {metadata.testcase_name}")

    def start_app(self, page: Page) -> None:
        """Load the application's login URL."""
        config = ConfigLoader()
        base_url = config.get("ui.base_url", "http://leaftaps.com").rstrip("/")
        login_url = f"{base_url}{config.get('ui.login_path', '/opentaps/control/main')}"
        with allure.step(f"Open application: {login_url}"):
            page.goto(login_url, wait_until="load")


def parametrize_from_data_provider(
    metafunc: Any,
    provider: Optional[DataProvider] = None,
) -> None:
    """
    Parametrize a `data_provider` test from its class's data sheet.

    Called from `pytest_generate_tests`. The marker may name a sheet
    explicitly (`@pytest.mark.data_provider("OtherSheet")`); otherwise the
    class attribute `data_file_name` is used.

    Raises:
        DataProviderError: No sheet name, or sheet columns that the test
            function does not accept
    """
    marker = metafunc.definition.get_closest_marker(DATA_PROVIDER_MARKER)
    if marker is None:
        return

    cls = metafunc.cls
    sheet_name = marker.args[0] if marker.args else getattr(cls, "data_file_name", "")
    if not sheet_name:
        raise DataProviderError(
            f"{metafunc.function.__name__} is a data_provider test "
            f"but names no data sheet"
        )

    sheet = (provider or DataProvider()).fetch_data(sheet_name)

    unknown = [col for col in sheet.columns if col not in metafunc.fixturenames]
    if unknown:
        raise DataProviderError(
            f"Sheet '{sheet_name}' columns {unknown} are not parameters "
            f"of {metafunc.function.__name__}"
        )

    metafunc.parametrize(sheet.columns, sheet.as_params())


__all__ = [
    "DATA_PROVIDER_MARKER",
    "ProjectSpecificTest",
    "TestCaseMetadata",
    "parametrize_from_data_provider",
]
