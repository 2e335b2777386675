"""
Leaftaps UI regression suites.

This package keeps `leaftaps_suites` importable to support:
  - IDE navigation
  - programmatic runners (e.g., `run_tests.py`)
  - CI/CD module imports

Credentials in the bundled configuration are the public Leaftaps demo account.
"""

__version__ = "1.0.0"
