"""verifylog - verify structured logging calls against a logger mock."""

__version__ = "0.1.0"

from verifylog.domain.exceptions import (
    MockVerificationError,
    UnsupportedExpressionError,
    UnsupportedMethodError,
    VerifyLogBaseError,
    VerifyLogError,
    VerifyLogUnexpectedError,
)
from verifylog.domain.model.configuration import VerifierConfig
from verifylog.domain.model.event_id import EventId
from verifylog.domain.model.log_level import LogLevel
from verifylog.domain.model.times import Times
from verifylog.infrastructure.facade.log_values import FormattedLogValues
from verifylog.infrastructure.facade.logger import Logger
from verifylog.infrastructure.facade.stdlib import StdlibLogger
from verifylog.infrastructure.mocking.logger_mock import LoggerMock
from verifylog.presentation.api import It, verify_log

__all__ = [
    "EventId",
    "FormattedLogValues",
    "It",
    "LogLevel",
    "Logger",
    "LoggerMock",
    "MockVerificationError",
    "StdlibLogger",
    "Times",
    "UnsupportedExpressionError",
    "UnsupportedMethodError",
    "VerifierConfig",
    "VerifyLogBaseError",
    "VerifyLogError",
    "VerifyLogUnexpectedError",
    "__version__",
    "verify_log",
]
