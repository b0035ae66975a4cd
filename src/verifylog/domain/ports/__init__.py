"""Domain ports: contracts collaborators must implement."""

from verifylog.domain.ports.mock import LoggerMockPort, StructuralMatcherPort
from verifylog.domain.ports.renderer import MessageRendererPort

__all__ = [
    "LoggerMockPort",
    "MessageRendererPort",
    "StructuralMatcherPort",
]
