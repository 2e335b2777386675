"""
================================================================================
Suite Pytest Configuration
================================================================================

This module registers the markers used across the suite and tags collected
tests by directory.

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Browser tests against a live application"
    )
    config.addinivalue_line(
        "markers", "unit: Framework tests that need no browser"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "lead: Tests related to lead management"
    )
    config.addinivalue_line(
        "markers",
        "data_provider(sheet=None): parametrize from the class data sheet "
        "(or the named sheet)",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-tag tests with 'ui' or 'unit' by directory."""
    for item in items:
        path = str(item.path)
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
        elif "unit" in path:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Leaftaps CRM UI Regression Suite",
        "=" * 60,
        "",
    ]
