"""
Pytest configuration and fixtures for the art_generator test suite.

This file contains shared fixtures, test configuration, and utilities
used across the test suite.
"""
import logging
import os
import sys

import numpy as np
import pytest


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)


def pytest_collection_modifyitems(config, items):
    """Mark import tests for easy selection."""
    for item in items:
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


@pytest.fixture(scope="session")
def random_coordinates():
    """10,000 reproducible coordinate pairs spread over positive and negative space."""
    rng = np.random.default_rng(42)
    xs = rng.uniform(-100.0, 100.0, 10_000)
    ys = rng.uniform(-100.0, 100.0, 10_000)
    return xs, ys


@pytest.fixture
def test_logger():
    """A quiet logger for components that require one."""
    logger = logging.getLogger("ArtGeneratorTests")
    logger.setLevel(logging.DEBUG)
    return logger


class TestDataManager:
    """Helper class for building automaton fixtures."""

    @staticmethod
    def grid_from_rows(rows):
        """Builds a bool grid from strings such as '.O.'."""
        return np.array([[ch == 'O' for ch in row] for row in rows], dtype=bool)


@pytest.fixture
def test_data_manager():
    """Provide access to test data creation utilities."""
    return TestDataManager()
