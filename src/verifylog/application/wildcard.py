"""Wildcard message patterns.

    *   any run of characters (possibly empty)
    ?   exactly one character
    \\*  literal asterisk
    \\?  literal question mark

Matching is whole-string and case-insensitive; "." in the compiled
pattern also matches newlines. A pattern without an unescaped "*" is
compared with plain case-insensitive equality after unescaping.
"""

from __future__ import annotations

import re
from functools import lru_cache


def is_wildcard(text: str | None) -> bool:
    """Check whether text contains an unescaped "*"."""
    if not text:
        return False
    return any(c == "*" and (i == 0 or text[i - 1] != "\\") for i, c in enumerate(text))


def equals_ignore_case(left: str | None, right: str | None) -> bool:
    """Case-insensitive equality; None and "" are equal to each other only."""
    if not left or not right:
        return not left and not right
    return left.casefold() == right.casefold()


@lru_cache(maxsize=256)
def compile_wildcard(pattern: str) -> re.Pattern[str]:
    """Compile wildcard pattern to a regex.

    Args:
        pattern: Wildcard pattern

    Returns:
        Compiled case-insensitive regex, to be used with fullmatch
    """
    parts: list[str] = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "\\" and pattern[i + 1 : i + 2] in ("*", "?"):
            parts.append(re.escape(pattern[i + 1]))
            i += 2
            continue
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
        i += 1
    return re.compile("".join(parts), re.IGNORECASE | re.DOTALL)


def unescape(pattern: str) -> str:
    """Drop the backslash in front of escaped "*" and "?"."""
    return pattern.replace("\\*", "*").replace("\\?", "?")


def wildcard_match(pattern: str | None, text: str | None) -> bool:
    """Check whether text matches pattern.

    Args:
        pattern: Expected text, possibly with wildcards
        text: Actual text

    Returns:
        True on match
    """
    if pattern is None or text is None:
        return equals_ignore_case(pattern, text)
    if not is_wildcard(pattern):
        return equals_ignore_case(unescape(pattern), text)
    return compile_wildcard(pattern).fullmatch(text) is not None
