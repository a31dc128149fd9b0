"""
Pytest configuration and fixtures for clientip tests
"""
import pytest

from clientip.logging import disable_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """Leave the library logger silent between tests"""
    yield
    disable_logging()
