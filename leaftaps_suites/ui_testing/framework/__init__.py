"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based glue for data-driven page-object tests.

Components:
    - config_loader: YAML + environment configuration
    - log_setup: Loguru sink configuration
    - page_base: Base page object over a Playwright page
    - browser_manager: Browser lifecycle for fixtures
    - data_provider: YAML data sheets turned into pytest parameters
    - project_base: Test case base class (metadata, app start, data provider)
    - pytest_hooks: Data-provider and failure-screenshot hooks for UI conftests

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager
from .config_loader import ConfigLoader
from .data_provider import DataProvider, DataSheet
from .exceptions import (
    ConfigurationError,
    DataProviderError,
    LeaftapsError,
    MetadataError,
    VerificationError,
)
from .log_setup import init_logger
from .page_base import BasePage
from .project_base import ProjectSpecificTest, TestCaseMetadata

__all__ = [
    "BasePage",
    "BrowserManager",
    "ConfigLoader",
    "ConfigurationError",
    "DataProvider",
    "DataProviderError",
    "DataSheet",
    "LeaftapsError",
    "MetadataError",
    "ProjectSpecificTest",
    "TestCaseMetadata",
    "VerificationError",
    "init_logger",
]
