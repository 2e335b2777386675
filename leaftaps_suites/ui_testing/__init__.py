"""Playwright UI testing: framework glue, page objects, data sheets and tests."""
