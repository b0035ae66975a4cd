"""Domain model entities."""

from verifylog.domain.model.call_expression import (
    ArgumentExpression,
    BuilderCall,
    CallExpression,
    Literal,
    Opaque,
)
from verifylog.domain.model.configuration import VerifierConfig
from verifylog.domain.model.enums import FaultKind
from verifylog.domain.model.event_id import EventId
from verifylog.domain.model.invocation import Invocation
from verifylog.domain.model.log_call_args import ExtractedLogCallArgs
from verifylog.domain.model.log_level import LogLevel
from verifylog.domain.model.log_state import (
    NULL_MESSAGE,
    ORIGINAL_FORMAT_KEY,
    StructuredMessage,
    split_structured,
)
from verifylog.domain.model.matcher import LogCallMatcher, Matcher, MatcherKind
from verifylog.domain.model.times import Times, TimesKind

__all__ = [
    # Enums
    "FaultKind",
    "LogLevel",
    "MatcherKind",
    "TimesKind",
    # Value objects
    "EventId",
    "Invocation",
    "Matcher",
    "LogCallMatcher",
    "Times",
    "StructuredMessage",
    # Configuration
    "VerifierConfig",
    # Expressions
    "ArgumentExpression",
    "BuilderCall",
    "CallExpression",
    "ExtractedLogCallArgs",
    "Literal",
    "Opaque",
    # Log state conventions
    "NULL_MESSAGE",
    "ORIGINAL_FORMAT_KEY",
    "split_structured",
]
