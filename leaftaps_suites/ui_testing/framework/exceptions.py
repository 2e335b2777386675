"""
================================================================================
Framework Exceptions
================================================================================

Exception hierarchy shared by the UI testing framework.

`VerificationError` also derives from `AssertionError` so that a failed
page-level verification is reported by pytest as a test failure rather than
an error.

Author: Automation Team
License: MIT
================================================================================
"""


class LeaftapsError(Exception):
    """Base exception for the Leaftaps automation framework."""
    pass


class ConfigurationError(LeaftapsError):
    """Raised when configuration loading or access fails."""
    pass


class DataProviderError(LeaftapsError):
    """Raised when a test data sheet is missing or malformed."""
    pass


class MetadataError(LeaftapsError):
    """Raised when a test case declares incomplete metadata."""
    pass


class VerificationError(LeaftapsError, AssertionError):
    """Raised when a page shows something other than the expected value."""
    pass


__all__ = [
    "LeaftapsError",
    "ConfigurationError",
    "DataProviderError",
    "MetadataError",
    "VerificationError",
]
