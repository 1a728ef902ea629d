# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Pytest fixtures for the glyphlist test suite."""

import logging
from pathlib import Path

import pikepdf
import pytest
from pikepdf import Array, Dictionary, Name, Pdf

from glyphlist.config import GLYPHLIST_PATH_ENV, GLYPHLIST_STRICT_ENV
from glyphlist.resolver import reset_default_glyph_list

SAMPLE_GLYPH_LIST = """\
A 0041
Aacute 00C1
Aringacute 00C5 0301
dalethatafpatah 05D3 05B2
u1D49C 1D49C
"""


@pytest.fixture(autouse=True)
def _isolated_glyph_list(monkeypatch: pytest.MonkeyPatch):
    """Clear glyph list environment and the shared resolver per test."""
    monkeypatch.delenv(GLYPHLIST_PATH_ENV, raising=False)
    monkeypatch.delenv(GLYPHLIST_STRICT_ENV, raising=False)
    reset_default_glyph_list()
    yield
    reset_default_glyph_list()
    glyphlist_logger = logging.getLogger("glyphlist")
    glyphlist_logger.handlers.clear()
    glyphlist_logger.setLevel(logging.NOTSET)


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Temporary directory for tests.

    Args:
        tmp_path: Pytest-provided temporary directory.

    Returns:
        Path to the temporary directory.
    """
    return tmp_path


def write_glyph_list(directory: Path, text: str, name: str = "agl.txt") -> Path:
    """Writes glyph list text to a file and returns its path."""
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def glyph_list_file(tmp_dir: Path) -> Path:
    """Small well-formed glyph list on disk."""
    return write_glyph_list(tmp_dir, SAMPLE_GLYPH_LIST)


def build_test_font(path: Path, glyph_names: list[str]) -> Path:
    """Builds a minimal TrueType font with the given glyph order.

    Args:
        path: Where to save the font.
        glyph_names: Glyph order; should start with ".notdef".

    Returns:
        The font path.
    """
    from fontTools.fontBuilder import FontBuilder
    from fontTools.pens.ttGlyphPen import TTGlyphPen

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_names)
    fb.setupCharacterMap({})

    glyphs = {}
    for name in glyph_names:
        pen = TTGlyphPen(None)
        pen.moveTo((0, 0))
        pen.lineTo((500, 0))
        pen.lineTo((500, 700))
        pen.lineTo((0, 700))
        pen.closePath()
        glyphs[name] = pen.glyph()

    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics({name: (500, 0) for name in glyph_names})
    fb.setupHorizontalHeader()
    fb.setupNameTable({"familyName": "Test", "styleName": "Regular"})
    fb.setupOS2()
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture
def sample_font(tmp_dir: Path) -> Path:
    """TrueType font with AGL and non-AGL glyph names."""
    return build_test_font(
        tmp_dir / "sample.ttf", [".notdef", "A", "Aacute", "customglyph"]
    )


def build_differences_pdf(path: Path, differences: list) -> Path:
    """Builds a one-page PDF with a Type1 font using a /Differences array.

    Args:
        path: Where to save the PDF.
        differences: Items of the /Differences array (ints and names).

    Returns:
        The PDF path.
    """
    pdf = Pdf.new()
    try:
        font = Dictionary(
            Type=Name.Font,
            Subtype=Name.Type1,
            BaseFont=Name("/Helvetica"),
            Encoding=Dictionary(
                Type=Name.Encoding,
                Differences=Array(differences),
            ),
        )
        page = pikepdf.Page(
            Dictionary(
                Type=Name.Page,
                MediaBox=Array([0, 0, 612, 792]),
                Resources=Dictionary(Font=Dictionary(F1=font)),
            )
        )
        pdf.pages.append(page)
        pdf.save(path)
    finally:
        pdf.close()
    return path


@pytest.fixture
def sample_pdf(tmp_dir: Path) -> Path:
    """PDF whose font maps codes 65-67 to A, Aacute and an unknown glyph."""
    return build_differences_pdf(
        tmp_dir / "sample.pdf",
        [65, Name("/A"), Name("/Aacute"), Name("/customglyph")],
    )
