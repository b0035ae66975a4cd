"""Mock framework: LoggerMock, verify primitive and structural matching."""

from verifylog.infrastructure.mocking.diagnostics import render_invocations
from verifylog.infrastructure.mocking.logger_mock import LoggerMock, MockLogger
from verifylog.infrastructure.mocking.structural import structural_match
from verifylog.infrastructure.mocking.verifier import verify_invocations

__all__ = [
    "LoggerMock",
    "MockLogger",
    "render_invocations",
    "structural_match",
    "verify_invocations",
]
