"""Domain enumerations."""

from enum import Enum, auto


class FaultKind(Enum):
    """Classification of an exception escaping verification."""

    EXPECTED_NO_MATCH = auto()  # assertion failed: report as VerifyLogError
    UNEXPECTED = auto()  # engine or helper broke: report as VerifyLogUnexpectedError
