"""Message and exception comparison run by synthesized matchers.

compare_messages decides whether a recorded message state satisfies
the expected message, in order:

    1. expected and actual both null          -> match
    2. exactly one of them null               -> no match
    3. actual is plain text                   -> wildcard match
    4. actual is structured (template + args):
       expected args written:
           template matches expected (wildcard or equality)
           AND actual args structurally match expected args
       no expected args:
           template matches expected
           OR rendered message matches expected

Callers may thus phrase the expectation as the original template or as
the final text, without saying which.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from verifylog.application.wildcard import wildcard_match
from verifylog.domain.model.log_state import NULL_MESSAGE, split_structured

if TYPE_CHECKING:
    from verifylog.domain.ports.mock import StructuralMatcherPort
    from verifylog.domain.ports.renderer import MessageRendererPort


@dataclass(frozen=True, slots=True)
class MessageContext:
    """Expected trailing args plus the collaborators used to compare.

    Attributes:
        renderer: Renders (template, args) to display text
        structural_match: Matches actual args against expected args
        expected_args: Expected trailing args, may embed matchers
        has_args: Whether trailing args were written in the expression
    """

    renderer: MessageRendererPort
    structural_match: StructuralMatcherPort
    expected_args: tuple[object, ...] = ()
    has_args: bool = False


def _is_null(text: str | None) -> bool:
    return text is None or text == NULL_MESSAGE


def compare_messages(expected: str | None, context: MessageContext, actual: object) -> bool:
    """Check a recorded message state against the expected message.

    Args:
        expected: Expected text, template or wildcard pattern; None = null message
        context: Expected args and comparison collaborators
        actual: Recorded state (plain text or structured record)

    Returns:
        True if actual satisfies expected
    """
    actual_text = str(actual)
    expected_null = _is_null(expected)
    actual_null = actual_text == NULL_MESSAGE
    if expected is None or expected_null or actual_null:
        return expected_null and actual_null

    structured = split_structured(actual)
    if structured is None:
        return wildcard_match(expected, actual_text)

    template_matches = wildcard_match(expected, structured.template)

    if context.has_args:
        return template_matches and context.structural_match(context.expected_args, structured.args)

    if template_matches:
        return True
    rendered = context.renderer.render(structured.template, structured.args)
    return wildcard_match(expected, rendered)


def compare_exceptions(expected: BaseException | None, actual: object) -> bool:
    """Check a recorded exception against an expected instance.

    Same object, or same type with the same message.
    """
    if expected is None or not isinstance(actual, BaseException):
        return False
    if expected is actual:
        return True
    return type(expected) is type(actual) and str(expected) == str(actual)
