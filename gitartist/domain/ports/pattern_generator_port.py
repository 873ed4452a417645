"""Pattern generator port - interface for the generative artist."""

from dataclasses import dataclass, field
from typing import Any, Protocol

from ..entities import Drawing


@dataclass(frozen=True)
class DrawingIntent:
    """Classified request: what kind of art the user asked for."""

    intent: str
    plan: str
    parameters: dict[str, Any] = field(default_factory=dict)
    pixels: Drawing | None = None


class PatternGeneratorPort(Protocol):
    """Protocol for turning free text into pixels."""

    def triage(self, request: str) -> DrawingIntent:
        """Classify a request as text, known_shape or custom_shape."""
        ...

    def generate_pixels(self, description: str) -> Drawing:
        """Produce pixels for a description; empty drawing on bad output."""
        ...
