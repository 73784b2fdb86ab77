"""Test configuration and shared fixtures for the xoj_writer test-suite.

Provides document snapshots, sinks and handler instances. All test files
should use the fixtures defined here for consistency.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from xoj_writer.config import ConfigManager
from xoj_writer.core.models import (
    Background,
    BackgroundType,
    Document,
    Element,
    Font,
    Layer,
    Page,
    Stroke,
    StrokeTool,
    Text,
)
from xoj_writer.core.save_handler import SaveHandler, SaveSettings
from xoj_writer.core.streams import BytesOutputStream

# Configure test logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


class UnknownElement(Element):
    """Element kind the writer does not know how to serialize."""


class FailingOutputStream:
    """Sink whose writes fail after *fail_after* successful calls."""

    def __init__(self, fail_after: int = 0):
        self.fail_after = fail_after
        self.calls = 0

    def write(self, data: bytes) -> None:
        if self.calls >= self.fail_after:
            raise OSError("disk full")
        self.calls += 1

    def close(self) -> None:
        pass


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point user config at a temporary directory and reset the singleton."""
    monkeypatch.setenv("XOJ_WRITER_CONFIG_DIR", str(tmp_path / "user_config"))
    ConfigManager._instance = None
    yield tmp_path / "user_config"
    ConfigManager._instance = None


@pytest.fixture
def settings():
    return SaveSettings()


@pytest.fixture
def handler(settings):
    return SaveHandler(settings)


@pytest.fixture
def sink():
    return BytesOutputStream()


@pytest.fixture
def simple_document():
    """One A4-ish page, lined background, one uniform pen stroke."""
    stroke = Stroke(
        tool=StrokeTool.PEN,
        color=0xff0000,
        width=1.5,
        points=[(0, 0), (10, 10)],
    )
    page = Page(
        width=600,
        height=800,
        background=Background(BackgroundType.LINED, color=0x000000),
        layers=[Layer([stroke])],
    )
    return Document(pages=[page])


@pytest.fixture
def pdf_document():
    """Three PDF-backed pages around a solid page."""
    return Document(
        pages=[
            Page(background=Background(BackgroundType.GRAPH, color=0xffffff)),
            Page(background=Background(BackgroundType.PDF, pdf_page_no=0)),
            Page(background=Background(BackgroundType.PDF, pdf_page_no=1)),
            Page(background=Background(BackgroundType.PDF, pdf_page_no=4)),
        ],
        pdf_filename="file:///home/u/doc.pdf",
    )


@pytest.fixture
def mixed_document():
    """Page with strokes, text and an element kind the writer skips."""
    layer = Layer([
        Stroke(tool=StrokeTool.HIGHLIGHTER, color=0xffff00, width=8.0,
               points=[(1, 2), (3, 4), (5, 6)]),
        UnknownElement(),
        Text(text="Hello <world> & co", font=Font("Sans", 12.0, italic=True, bold=True),
             x=10.5, y=20.25, color=0x0000ff),
        Stroke(tool=StrokeTool.ERASER, color=0xffffff, width=3.0,
               widths=[3.0, 3.0], points=[(0, 0), (1, 1), (2, 2)]),
    ])
    return Document(pages=[Page(width=612, height=792, layers=[layer, Layer()])])
