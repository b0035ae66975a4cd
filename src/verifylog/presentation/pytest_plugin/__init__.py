"""pytest plugin for verifylog.

Provides fixtures for log verification:
    verifier_config: Diagnostics configuration (override in conftest.py)
    logger_mock: Fresh plain LoggerMock
    logger_mock_factory: Builds category LoggerMocks

Configuration (pytest.ini or pyproject.toml):
    verifylog_show_invocations: Append performed invocations to failures (default: true)
    verifylog_width: Width of the invocations table (default: 120)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from verifylog.presentation.pytest_plugin.fixtures import (
    logger_mock,
    logger_mock_factory,
    verifier_config,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "logger_mock",
    "logger_mock_factory",
    "verifier_config",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "verifylog_show_invocations",
        "append performed invocations to verification failures",
        default="true",
    )
    parser.addini(
        "verifylog_width",
        "width of the performed invocations table",
        default="120",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "verifylog: mark test as log verification test",
    )
