import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import ebook_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from ebook_toolkit.layout import ElementFactory, ElementIdGenerator, LayoutConfig


# Common test fixtures
@pytest.fixture
def small_config():
    """
    Config with round numbers for hand-checked layouts.

    page_bottom = 250, usable height = 200, line height = 20,
    10 chars per line, paragraph box = lines * 20 + 10.
    """
    return LayoutConfig(
        page_width=300,
        page_height=300,
        margin_top=50,
        margin_bottom=50,
        margin_left=20,
        margin_right=20,
        chars_per_line=10,
        body_font_size=10,
        body_line_height=2,
        heading_heights=(60, 40, 30),
        paragraph_padding=10,
        heading_gap=10,
        paragraph_gap=10,
        image_height=80,
        image_gap=20,
        heading_break_threshold=100,
        min_split_height=40,
    )


@pytest.fixture
def tall_config():
    """Default metrics on a page tall enough that nothing needs to break."""
    return LayoutConfig(page_height=5000)


@pytest.fixture
def fixed_factory():
    """Return a factory builder with reproducible element ids."""
    def _create(config: LayoutConfig) -> ElementFactory:
        return ElementFactory(config, ElementIdGenerator(token="test"))
    return _create


@pytest.fixture
def sample_markdown(tmp_path: Path):
    """Create a small markdown document."""
    path = tmp_path / "sample.md"
    path.write_text(
        "The Long Night\n"
        "# Chapter One\n"
        "\n"
        "It was a cold night.\n"
        "\n"
        "## Arrival\n"
        "\n"
        "The train was late.\n",
        encoding="utf-8",
    )
    return path
