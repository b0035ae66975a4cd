"""Message renderer port (interface)."""

from __future__ import annotations

from typing import Protocol


class MessageRendererPort(Protocol):
    """Renders a message template with its arguments to display text.

    The logging facade provides the implementation. The comparator uses
    the same renderer the facade used when the message was logged.
    """

    def render(self, template: str | None, args: tuple[object, ...]) -> str:
        """Render template with positional args.

        Args:
            template: Template with {Name} placeholders, None for null message
            args: Values in placeholder order

        Returns:
            Display text
        """
        ...
