"""
Repository-level pytest configuration.

Why this exists:
  - Configure Loguru once per session, before any fixture logs
  - Expose the repository root to tests

Important:
  Credentials in leaftaps_suites/config/config.yaml belong to the public
  Leaftaps demo account. Real projects should load secrets from CI/CD.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from leaftaps_suites.ui_testing.framework.log_setup import init_logger

# pytester drives the UI hooks in an isolated inner session
pytest_plugins = ["pytester"]


def pytest_configure(config):
    """Initialize logging for the whole session."""
    init_logger()


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
