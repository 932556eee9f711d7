"""
Pytest Configuration and Shared Fixtures

This file contains pytest configuration and fixtures shared across all test modules.
"""

import pytest
import os
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from datecue.config import EVENING_TIME_VAR, MORNING_TIME_VAR, reset_configuration


def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


@pytest.fixture(autouse=True)
def default_configuration():
    """Every test starts and ends with the default morning/evening times"""
    reset_configuration()
    yield
    reset_configuration()


@pytest.fixture
def test_env_vars():
    """Set up test environment variables"""
    test_vars = {
        MORNING_TIME_VAR: '07:30',
        EVENING_TIME_VAR: '19:45',
    }

    # Save original values
    original_values = {}
    for key, value in test_vars.items():
        original_values[key] = os.environ.get(key)
        os.environ[key] = value

    yield test_vars

    # Restore original values
    for key, value in original_values.items():
        if value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = value
