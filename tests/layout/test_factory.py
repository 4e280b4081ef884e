"""
Unit tests for the page/element factory.
"""

from ebook_toolkit.core.models import ContentUnit
from ebook_toolkit.layout import ElementFactory, ElementIdGenerator, ElementKind


class TestElementIdGenerator:
    """Tests for element id generation."""

    def test_next_when_called_repeatedly_then_unique(self):
        ids = ElementIdGenerator()

        generated = [ids.next() for _ in range(1000)]

        assert len(set(generated)) == 1000

    def test_next_when_fixed_token_then_reproducible(self):
        first = ElementIdGenerator(token="abc")
        second = ElementIdGenerator(token="abc")

        assert [first.next() for _ in range(3)] == ["el-1-abc", "el-2-abc", "el-3-abc"]
        assert second.next() == "el-1-abc"

    def test_next_when_separate_generators_then_tokens_differ(self):
        """Ids from two runs do not collide even within the same millisecond."""
        assert ElementIdGenerator().next() != ElementIdGenerator().next()


class TestElementFactory:
    """Tests for ElementFactory."""

    def test_heading_when_created_then_wrapped_in_level_tag(self, small_config, fixed_factory):
        # Arrange
        factory = fixed_factory(small_config)

        # Act
        element = factory.heading(ContentUnit.heading(2, "Arrival"), y=120, unit_index=3)

        # Assert
        assert element.kind is ElementKind.TEXT
        assert element.content == "<h2>Arrival</h2>"
        assert element.text == "Arrival"
        assert element.unit_index == 3
        assert element.typography.font_weight == 700
        assert element.geometry.height == 40

    def test_paragraph_when_created_then_justified_and_full_width(self, small_config, fixed_factory):
        factory = fixed_factory(small_config)

        element = factory.paragraph("Body text.", y=50, height=30)

        assert element.content == "<p>Body text.</p>"
        assert element.typography.text_align == "justify"
        assert element.typography.font_size == small_config.body_font_size
        assert element.geometry.x == small_config.margin_left
        assert element.geometry.width == small_config.content_width
        assert element.geometry.rotation == 0
        assert element.locked is False
        assert element.continues is False

    def test_paragraph_when_markup_characters_then_escaped(self, small_config, fixed_factory):
        """Plain text must not inject markup; the plain text is kept as-is."""
        factory = fixed_factory(small_config)

        element = factory.paragraph("a < b & c", y=50, height=30)

        assert element.content == "<p>a &lt; b &amp; c</p>"
        assert element.text == "a < b & c"

    def test_image_when_created_then_reference_verbatim(self, small_config, fixed_factory):
        factory = fixed_factory(small_config)

        element = factory.image("https://example.com/a.png?w=400&h=300", y=70)

        assert element.kind is ElementKind.IMAGE
        assert element.content == "https://example.com/a.png?w=400&h=300"
        assert element.text is None
        assert element.geometry.height == small_config.image_height
        assert element.box.object_fit == "cover"

    def test_cover_when_created_then_locked_full_page(self, small_config, fixed_factory):
        factory = fixed_factory(small_config)

        element = factory.cover("The Long Night", subtitle="A novel")

        assert element.locked is True
        assert element.geometry.y == 0
        assert element.geometry.height == small_config.page_height
        assert element.content == "<h1>The Long Night</h1><p>A novel</p>"
        assert element.typography.text_align == "center"

    def test_page_when_created_then_sequential_id_and_master(self, small_config, fixed_factory):
        factory = fixed_factory(small_config)
        element = factory.paragraph("x", y=50, height=30)

        page = factory.page(2, [element])

        assert page.id == "page-3"
        assert page.index == 2
        assert page.master_page_id == "master-a"
        assert page.elements == (element,)

    def test_elements_when_same_factory_then_ids_unique(self, small_config):
        factory = ElementFactory(small_config)

        elements = [
            factory.heading(ContentUnit.heading(1, "T"), y=50),
            factory.paragraph("x", y=120, height=30),
            factory.image("a.png", y=160),
        ]

        assert len({e.id for e in elements}) == 3
