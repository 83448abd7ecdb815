"""
Pytest configuration.

This file provides pytest-specific configuration.
For shared test utilities, see tests/__init__.py
"""


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as using a database session (deselect with '-m \"not db\"')"
    )
