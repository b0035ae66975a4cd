"""Application layer: the verification engine."""

from verifylog.application.classifier import CONVENIENCE_METHODS, classify
from verifylog.application.comparator import MessageContext, compare_exceptions, compare_messages
from verifylog.application.driver import resolve_times, verify
from verifylog.application.extractor import CONVENIENCE_SIGNATURE, extract
from verifylog.application.rendering import classify_fault, render_argument, render_expression
from verifylog.application.synthesizer import synthesize
from verifylog.application.wildcard import (
    compile_wildcard,
    equals_ignore_case,
    is_wildcard,
    wildcard_match,
)

__all__ = [
    "CONVENIENCE_METHODS",
    "CONVENIENCE_SIGNATURE",
    "MessageContext",
    "classify",
    "classify_fault",
    "compare_exceptions",
    "compare_messages",
    "compile_wildcard",
    "equals_ignore_case",
    "extract",
    "is_wildcard",
    "render_argument",
    "render_expression",
    "resolve_times",
    "synthesize",
    "verify",
    "wildcard_match",
]
