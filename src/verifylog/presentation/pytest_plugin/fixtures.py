"""pytest fixtures for log verification.

Each test gets fresh mocks. Override verifier_config in conftest.py
to change diagnostics for a whole suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from verifylog.domain.model.configuration import VerifierConfig
from verifylog.infrastructure.mocking.logger_mock import LoggerMock

if TYPE_CHECKING:
    from collections.abc import Callable


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback.

    Args:
        config: pytest Config object
        name: ini option name
        default: default value if not set

    Returns:
        String value of ini option
    """
    value = config.getini(name)
    if value:
        return str(value)
    return default


@pytest.fixture
def verifier_config(request: pytest.FixtureRequest) -> VerifierConfig:
    """Diagnostics configuration from ini options.

    Reads verifylog_show_invocations and verifylog_width.

    Returns:
        VerifierConfig
    """
    show = _get_ini_value(request.config, "verifylog_show_invocations", "true")
    width = _get_ini_value(request.config, "verifylog_width", "120")
    return VerifierConfig(
        show_invocations=show.strip().lower() in ("1", "true", "yes", "on"),
        width=int(width),
    )


@pytest.fixture
def logger_mock(verifier_config: VerifierConfig) -> LoggerMock:
    """Fresh plain LoggerMock."""
    return LoggerMock(config=verifier_config)


@pytest.fixture
def logger_mock_factory(verifier_config: VerifierConfig) -> Callable[[type | str | None], LoggerMock]:
    """Factory for category LoggerMocks.

    Example:
        def test_process(logger_mock_factory):
            mock = logger_mock_factory(OrdersProcessor)
    """

    def factory(category: type | str | None = None) -> LoggerMock:
        return LoggerMock(category, config=verifier_config)

    return factory
