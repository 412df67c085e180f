"""Pytest configuration for live-model integration tests."""

import os

import pytest


def pytest_collection_modifyitems(items):
    """Mark every test here as integration; skip them all without an API key."""
    skip = pytest.mark.skip(reason="GEMINI_API_KEY not set")
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
            if not os.getenv("GEMINI_API_KEY"):
                item.add_marker(skip)
