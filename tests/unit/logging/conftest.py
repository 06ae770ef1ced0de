"""Fixtures for i18nkit.logging tests."""

from unittest.mock import Mock

import pytest


@pytest.fixture
def mock_logger():
    """Mock structlog logger recording warning/info calls."""
    return Mock(spec=["info", "warning", "debug", "error"])
