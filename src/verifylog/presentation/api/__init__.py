"""Public verification API.

Public exports:
    verify_log: Verify a convenience logging call against a LoggerMock
    It: Matcher builders for verification expressions
"""

from verifylog.presentation.api.it import It
from verifylog.presentation.api.verify import verify_log

__all__ = [
    "It",
    "verify_log",
]
