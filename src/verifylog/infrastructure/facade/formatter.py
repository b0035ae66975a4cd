"""Message template formatter.

Templates use named placeholders filled positionally:

    "Processed {@Position} in {Elapsed:000} ms."

Syntax:
    {Name}            value rendered with str()
    {Name,10}         right-aligned to width 10 (negative = left-aligned)
    {Name:spec}       value rendered with format spec
    {{ and }}         literal braces

Format specs made only of zeros (e.g. 000, 0.00) zero-pad numbers;
anything else is passed to format(). None renders as "(null)",
mappings as "{ Key = Value, ... }", lists and tuples comma-joined.
Placeholders without a matching argument are left as written.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

from verifylog.domain.model.log_state import NULL_MESSAGE

NULL_VALUE = "(null)"

_ZERO_PAD = re.compile(r"(0+)(?:\.(0+))?")


@dataclass(frozen=True, slots=True)
class Placeholder:
    """Parsed {Name,alignment:format} placeholder.

    Attributes:
        name: Placeholder name as written (e.g. "@Position")
        alignment: Field width, negative = left-aligned, None = none
        format_spec: Format spec, None = none
        text: Placeholder as written, braces included
    """

    name: str
    alignment: int | None
    format_spec: str | None
    text: str


@dataclass(frozen=True, slots=True)
class ParsedTemplate:
    """Template split into literal text and placeholders."""

    segments: tuple[str | Placeholder, ...]

    @property
    def names(self) -> tuple[str, ...]:
        """Placeholder names in order of appearance."""
        return tuple(s.name for s in self.segments if isinstance(s, Placeholder))


@lru_cache(maxsize=1024)
def parse_template(template: str) -> ParsedTemplate:
    """Split template into literal segments and placeholders.

    Args:
        template: Message template

    Returns:
        ParsedTemplate (cached per template)
    """
    segments: list[str | Placeholder] = []
    literal: list[str] = []
    i = 0
    while i < len(template):
        char = template[i]
        if char in "{}" and template[i + 1 : i + 2] == char:
            literal.append(char)
            i += 2
            continue
        if char == "{":
            end = template.find("}", i + 1)
            if end == -1:
                literal.append(template[i:])
                break
            if literal:
                segments.append("".join(literal))
                literal = []
            segments.append(_parse_placeholder(template[i : end + 1]))
            i = end + 1
            continue
        literal.append(char)
        i += 1

    if literal:
        segments.append("".join(literal))
    return ParsedTemplate(segments=tuple(segments))


def _parse_placeholder(text: str) -> Placeholder:
    body = text[1:-1]
    name_part, _, format_spec = body.partition(":")
    name, _, alignment = name_part.partition(",")
    return Placeholder(
        name=name.strip(),
        alignment=int(alignment) if alignment.strip().lstrip("-").isdigit() else None,
        format_spec=format_spec or None,
        text=text,
    )


def format_value(value: object, format_spec: str | None = None) -> str:
    """Render a single template argument.

    Args:
        value: Argument value
        format_spec: Optional format spec from the placeholder

    Returns:
        Display text

    Raises:
        ValueError: If format_spec is invalid for the value
    """
    if value is None:
        return NULL_VALUE
    if isinstance(value, Mapping):
        items = ", ".join(f"{k} = {format_value(v)}" for k, v in value.items())
        return f"{{ {items} }}"
    if isinstance(value, (list, tuple)):
        return ", ".join(format_value(v) for v in value)
    if not format_spec:
        return str(value)

    zero_pad = _ZERO_PAD.fullmatch(format_spec)
    if zero_pad and isinstance(value, (int, float)) and not isinstance(value, bool):
        digits = len(zero_pad.group(1))
        decimals = len(zero_pad.group(2) or "")
        number = f"{abs(value):.{decimals}f}"
        whole, dot, fraction = number.partition(".")
        sign = "-" if value < 0 else ""
        return f"{sign}{whole.zfill(digits)}{dot}{fraction}"

    return format(value, format_spec)


class LogValuesFormatter:
    """Renders templates with positional arguments.

    Implements MessageRendererPort. Stateless; parsing is cached.
    """

    def render(self, template: str | None, args: tuple[object, ...]) -> str:
        """Render template with args.

        Args:
            template: Template, None for a null message
            args: Values in placeholder order

        Returns:
            Display text (NULL_MESSAGE for a None template)
        """
        if template is None:
            return NULL_MESSAGE

        parts: list[str] = []
        index = 0
        for segment in parse_template(template).segments:
            if isinstance(segment, str):
                parts.append(segment)
                continue
            if index >= len(args):
                parts.append(segment.text)
                continue
            text = format_value(args[index], segment.format_spec)
            index += 1
            if segment.alignment is not None:
                width = abs(segment.alignment)
                text = text.ljust(width) if segment.alignment < 0 else text.rjust(width)
            parts.append(text)
        return "".join(parts)
