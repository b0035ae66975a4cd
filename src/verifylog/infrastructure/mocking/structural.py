"""Structural match of partially specified values."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from unittest import mock

from verifylog.domain.model.matcher import Matcher


def structural_match(expected: object, actual: object) -> bool:
    """Check actual against expected, where expected may embed matchers.

    Rules, applied recursively:
        Matcher        -> matcher.matches(actual)
        mock.ANY       -> always True
        Mapping        -> same keys, each value matches
        Sequence       -> same length, each item matches (str excluded)
        anything else  -> expected == actual

    Args:
        expected: Partial specification
        actual: Recorded value

    Returns:
        True if actual satisfies expected
    """
    if isinstance(expected, Matcher):
        return expected.matches(actual)
    if expected is mock.ANY:
        return True
    if isinstance(expected, Mapping):
        if not isinstance(actual, Mapping) or expected.keys() != actual.keys():
            return False
        return all(structural_match(expected[key], actual[key]) for key in expected)
    if _is_sequence(expected):
        if not _is_sequence(actual) or len(expected) != len(actual):
            return False
        return all(structural_match(e, a) for e, a in zip(expected, actual, strict=True))
    return bool(expected == actual)


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))
