"""Tests for DrawingService."""

import pytest
from conftest import FakePatternGenerator

from gitartist.application.services import (
    INTENT_CUSTOM_SHAPE,
    INTENT_KNOWN_SHAPE,
    INTENT_TEXT,
    DrawingService,
)
from gitartist.domain import Drawing, DrawingIntent, ShapeLibrary, TextRenderer


@pytest.fixture
def service(fake_generator):
    """Drawing service with a fake generator."""
    return DrawingService(fake_generator)


class TestResolve:
    """Tests for resolving intents into drawings."""

    def test_text_rendered_locally(self, service, fake_generator):
        """Test that text never reaches the generator."""
        drawing = service.resolve(DrawingIntent(INTENT_TEXT, "plan", {"text": "hi"}))

        assert drawing == TextRenderer().render("HI")
        assert fake_generator.descriptions == []

    def test_known_shape_from_library(self, service, fake_generator):
        """Test that library shapes are used directly."""
        drawing = service.resolve(DrawingIntent(INTENT_KNOWN_SHAPE, "plan", {"name": "heart"}))

        assert drawing == ShapeLibrary().get("heart")
        assert fake_generator.descriptions == []

    def test_unknown_shape_goes_to_generator(self, service, fake_generator):
        """Test fallback to the artist for shapes the library lacks."""
        drawing = service.resolve(DrawingIntent(INTENT_KNOWN_SHAPE, "plan", {"name": "unicorn"}))

        assert drawing == fake_generator.drawing
        assert fake_generator.descriptions == ["unicorn"]

    def test_custom_shape_uses_pregenerated_pixels(self, service, fake_generator):
        """Test that pixels attached by triage are reused."""
        pixels = Drawing.from_triples([(0, 0, 4)])

        drawing = service.resolve(DrawingIntent(INTENT_CUSTOM_SHAPE, "plan", {"description": "cat"}, pixels))

        assert drawing is pixels
        assert fake_generator.descriptions == []

    def test_custom_shape_generated_on_demand(self, service, fake_generator):
        """Test that a custom shape without pixels asks the artist."""
        service.resolve(DrawingIntent(INTENT_CUSTOM_SHAPE, "plan", {"description": "a cat"}))

        assert fake_generator.descriptions == ["a cat"]

    def test_unknown_intent_is_empty(self, service):
        """Test that an unrecognized intent produces nothing."""
        assert service.resolve(DrawingIntent("poetry", "plan")).is_empty


class TestInterpretAndRefine:
    """Tests for triage and refinement."""

    def test_interpret_delegates_to_triage(self, service, fake_generator):
        """Test that requests are classified by the generator."""
        intent = service.interpret("evin")

        assert intent is fake_generator.intent
        assert fake_generator.triage_requests == ["evin"]

    def test_refine_combines_description(self):
        """Test that refinements are appended to the description."""
        generator = FakePatternGenerator(drawing=Drawing.from_triples([(1, 1, 1)]))
        service = DrawingService(generator)

        description, drawing = service.refine("a helicopter", "make it wider")

        assert description == "a helicopter, but make it wider"
        assert generator.descriptions == ["a helicopter, but make it wider"]
        assert len(drawing) == 1

    def test_blank_refinement_keeps_description(self, service):
        """Test that an empty refinement regenerates the same description."""
        description, _ = service.refine("a cat", "  ")

        assert description == "a cat"

    def test_shape_names(self, service):
        """Test that known shape names are exposed."""
        assert service.shape_names == ShapeLibrary().names()
