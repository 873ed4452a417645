"""Drawing service - resolve a request into pixels."""

import logging

from gitartist.domain import (
    Drawing,
    DrawingIntent,
    PatternGeneratorPort,
    ShapeLibrary,
    TextRenderer,
)

logger = logging.getLogger(__name__)

INTENT_TEXT = "text"
INTENT_KNOWN_SHAPE = "known_shape"
INTENT_CUSTOM_SHAPE = "custom_shape"


class DrawingService:
    """Turn user requests into drawings.

    Text and known shapes are rendered locally; anything else goes to the
    generative artist.
    """

    def __init__(
        self,
        generator: PatternGeneratorPort,
        text_renderer: TextRenderer | None = None,
        shapes: ShapeLibrary | None = None,
    ) -> None:
        self._generator = generator
        self._text_renderer = text_renderer or TextRenderer()
        self._shapes = shapes or ShapeLibrary()

    @property
    def shape_names(self) -> list[str]:
        return self._shapes.names()

    def interpret(self, request: str) -> DrawingIntent:
        """Classify a free-text request."""
        return self._generator.triage(request)

    def resolve(self, intent: DrawingIntent) -> Drawing:
        """Produce the drawing for a classified request."""
        params = intent.parameters
        if intent.intent == INTENT_TEXT:
            return self._text_renderer.render(str(params.get("text", "")))
        if intent.intent == INTENT_KNOWN_SHAPE:
            name = str(params.get("name", ""))
            if name in self._shapes:
                return self._shapes.get(name)
            # Triage picked a shape we don't have; let the artist draw it
            logger.info("Unknown shape %r, falling back to generative artist", name)
            return self._generator.generate_pixels(name)
        if intent.intent == INTENT_CUSTOM_SHAPE:
            if intent.pixels is not None:
                return intent.pixels
            return self._generator.generate_pixels(str(params.get("description", "")))

        logger.warning("Unknown intent %r", intent.intent)
        return Drawing()

    def refine(self, description: str, refinement: str) -> tuple[str, Drawing]:
        """Ask the artist again with an amended description.

        Returns:
            The combined description and the new drawing.
        """
        combined = f"{description}, but {refinement}" if refinement.strip() else description
        return combined, self._generator.generate_pixels(combined)
