"""Performed invocations section of native verification failures."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from verifylog.domain.model.configuration import VerifierConfig
    from verifylog.domain.model.invocation import Invocation


def render_invocations(
    invocations: tuple[Invocation, ...],
    config: VerifierConfig,
    *,
    label: str = "logger",
) -> str:
    """Render recorded invocations as a plain text table.

    Output is str, not print(). Cells are Text objects so message
    brackets are never read as rich markup.

    Args:
        invocations: Recorded invocations in call order
        config: Verifier configuration
        label: Mock label shown in the heading

    Returns:
        Rendered section, "" when disabled
    """
    if not config.show_invocations:
        return ""

    output = StringIO()
    console = Console(
        file=output,
        width=config.width,
        color_system=None,
        highlight=False,
        emoji=False,
    )

    if not invocations:
        console.print(Text(f"No invocations performed on {label}."))
        return output.getvalue().rstrip()

    shown = invocations
    if config.max_invocations is not None:
        shown = invocations[: config.max_invocations]

    console.print(Text(f"Performed invocations on {label}:"))
    table = Table()
    table.add_column("#", justify="right")
    table.add_column("Level")
    table.add_column("Event")
    table.add_column("Message", overflow="fold")
    table.add_column("Exception", overflow="fold")

    for index, invocation in enumerate(shown, start=1):
        exception = "" if invocation.exception is None else repr(invocation.exception)
        table.add_row(
            Text(str(index)),
            Text(invocation.level.name),
            Text(repr(invocation.event_id)),
            Text(str(invocation.state)),
            Text(exception),
        )

    console.print(table)
    hidden = len(invocations) - len(shown)
    if hidden:
        console.print(Text(f"... {hidden} more not shown (max_invocations={config.max_invocations})"))

    return "\n".join(line.rstrip() for line in output.getvalue().rstrip().splitlines())
