"""Logging facade: Logger base, structured state and message formatter."""

from verifylog.infrastructure.facade.formatter import (
    LogValuesFormatter,
    format_value,
    parse_template,
)
from verifylog.infrastructure.facade.log_values import FormattedLogValues
from verifylog.infrastructure.facade.logger import Logger, format_message
from verifylog.infrastructure.facade.stdlib import StdlibLogger

__all__ = [
    "FormattedLogValues",
    "LogValuesFormatter",
    "Logger",
    "StdlibLogger",
    "format_message",
    "format_value",
    "parse_template",
]
