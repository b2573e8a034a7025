"""
Pytest Configuration for buildinfo Testing
==========================================

Root conftest.py - re-exports tests/fixtures/ so every test module sees them.
"""

import pytest

# Import shared fixtures
from tests.fixtures import *


def pytest_collection_modifyitems(config, items):
    """Automatically add markers based on test location."""
    for item in items:
        if "/unit/" in item.nodeid:
            item.add_marker(pytest.mark.unit)
        if "/cli/" in item.nodeid:
            item.add_marker(pytest.mark.cli)
        if "config" in item.nodeid.lower():
            item.add_marker(pytest.mark.config)
