"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import os

# Application modules build their engine from DATABASE_URL at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def test_engine():
    """Fresh database with all tables, dropped after the test."""
    from tests import create_test_engine, teardown_test_database

    engine = create_test_engine()
    yield engine
    teardown_test_database(engine)
