"""
Tests for the build pipeline.
"""

import pytest

from ebook_toolkit.controller import BuildError, build_from_file, build_from_text
from ebook_toolkit.importing import DocumentImportError
from ebook_toolkit.layout import ElementKind


class TestBuildFromText:
    """Tests for build_from_text()."""

    def test_build_when_plain_text_then_pages_and_counts(self, tall_config):
        # Act
        result = build_from_text("# Title\n\nShort paragraph.", config=tall_config)

        # Assert
        assert result.page_count == 1
        assert result.unit_count == 2
        assert result.title is None
        assert result.warnings == ()
        assert result.elapsed >= 0
        assert result.pages[0].id == "page-1"

    def test_build_when_cover_requested_then_cover_is_page_one(self, tall_config):
        """Content pages are numbered after the cover."""
        # Act
        result = build_from_text(
            "Body text.",
            config=tall_config,
            title="My Book",
            with_cover=True,
            cover_subtitle="Draft",
        )

        # Assert
        assert [p.id for p in result.pages] == ["page-1", "page-2"]
        cover = result.pages[0].elements[0]
        assert cover.locked
        assert cover.content == "<h1>My Book</h1><p>Draft</p>"
        assert result.layout.unit_page_map == {0: [1]}

    def test_build_when_cover_without_title_then_raises_error(self):
        with pytest.raises(BuildError, match="needs a title"):
            build_from_text("Body.", with_cover=True)

    def test_build_when_images_then_placed_after_text(self, tall_config):
        result = build_from_text("Body.", ["a.png", "b.png"], tall_config)

        kinds = [e.kind for e in result.pages[0].elements]
        assert kinds == [ElementKind.TEXT, ElementKind.IMAGE, ElementKind.IMAGE]

    def test_build_when_checkpoint_then_called_with_progress(self, small_config):
        calls = []
        text = "\n\n".join(["Paragraph."] * 60)

        result = build_from_text(text, config=small_config, checkpoint=calls.append)

        assert calls
        assert calls[0].units_processed == 50
        assert result.unit_count == 60

    def test_build_when_empty_input_then_no_pages(self):
        result = build_from_text("")

        assert result.page_count == 0
        assert result.unit_count == 0


class TestBuildFromFile:
    """Tests for build_from_file()."""

    def test_build_when_markdown_then_titled_cover_and_content(self, sample_markdown):
        # Act
        result = build_from_file(sample_markdown)

        # Assert
        assert result.title == "The Long Night"
        assert result.unit_count == 4
        assert result.page_count == 2
        assert result.pages[0].elements[0].content.startswith("<h1>The Long Night</h1>")
        assert [e.text for e in result.pages[1].elements] == [
            "Chapter One",
            "It was a cold night.",
            "Arrival",
            "The train was late.",
        ]

    def test_build_when_no_cover_then_content_starts_at_page_one(self, sample_markdown):
        result = build_from_file(sample_markdown, with_cover=False)

        assert result.page_count == 1
        assert result.pages[0].id == "page-1"

    def test_build_when_missing_file_then_wraps_import_error(self, tmp_path):
        with pytest.raises(BuildError, match="Failed to import document") as exc_info:
            build_from_file(tmp_path / "missing.md")

        assert isinstance(exc_info.value.__cause__, DocumentImportError)

    def test_build_when_empty_file_then_raises_error(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("\n\n", encoding="utf-8")

        with pytest.raises(BuildError, match="No text found in empty.txt"):
            build_from_file(path)

    def test_build_when_title_line_only_then_cover_page_only(self, tmp_path):
        """A document holding just its title still gets a cover."""
        # Arrange
        path = tmp_path / "draft.md"
        path.write_text("# Working Title\n", encoding="utf-8")

        # Act
        result = build_from_file(path)

        # Assert
        assert result.title == "Working Title"
        assert result.unit_count == 0
        assert [p.id for p in result.pages] == ["page-1"]
        assert result.pages[0].elements[0].locked

    def test_build_when_title_line_only_without_cover_then_raises_error(self, tmp_path):
        path = tmp_path / "draft.md"
        path.write_text("# Working Title\n", encoding="utf-8")

        with pytest.raises(BuildError, match="No text found in draft.md"):
            build_from_file(path, with_cover=False)

    def test_build_when_empty_file_with_images_then_image_pages(self, tmp_path, tall_config):
        path = tmp_path / "album.txt"
        path.write_text("", encoding="utf-8")

        result = build_from_file(path, ["a.png"], tall_config, with_cover=False)

        assert result.page_count == 1
        assert result.pages[0].elements[0].kind is ElementKind.IMAGE
