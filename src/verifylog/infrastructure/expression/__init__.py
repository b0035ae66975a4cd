"""Verification expression capture and source rendering."""

from verifylog.infrastructure.expression.recorder import capture_call, to_argument
from verifylog.infrastructure.expression.source import describe_callable, lambda_source

__all__ = [
    "capture_call",
    "describe_callable",
    "lambda_source",
    "to_argument",
]
