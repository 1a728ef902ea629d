# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Glyph name discovery in font programs and PDF font encodings.

These helpers collect glyph names from a font file (via fontTools) or from
the ``/Differences`` arrays of simple fonts in a PDF (via pikepdf) so they
can be resolved against the Adobe Glyph List.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pikepdf
from pikepdf import Dictionary, Pdf

from .entry import AGLUnicode
from .exceptions import InspectionError
from .resolver import AdobeGlyphList, default_glyph_list

logger = logging.getLogger(__name__)

# Font subtypes whose /Encoding may carry a /Differences array
SIMPLE_FONT_SUBTYPES = frozenset({"/Type1", "/MMType1", "/TrueType", "/Type3"})

TYPE1_SUFFIXES = frozenset({".pfa", ".pfb"})


@dataclass(frozen=True)
class GlyphResolution:
    """Result of resolving one glyph name.

    Attributes:
        glyph_name: The glyph name looked up.
        unicode: The Adobe Glyph List entry (empty if unknown).
    """

    glyph_name: str
    unicode: AGLUnicode

    @property
    def resolved(self) -> bool:
        return not self.unicode.is_empty


@dataclass(frozen=True)
class DifferencesEntry:
    """One code-to-glyph assignment from a PDF /Differences array.

    Attributes:
        page_number: 1-based page on which the font is used.
        font_key: Resource name of the font (e.g. "/F1").
        base_font: The font's /BaseFont name, or "" if absent.
        code: Character code assigned by the /Differences array.
        glyph_name: Glyph name without leading slash.
    """

    page_number: int
    font_key: str
    base_font: str
    code: int
    glyph_name: str


def resolve_glyph_names(
    names: Iterable[str],
    glyph_list: AdobeGlyphList | None = None,
) -> list[GlyphResolution]:
    """Resolves glyph names against the Adobe Glyph List.

    Args:
        names: Glyph names to look up.
        glyph_list: Resolver to use. Defaults to the process-wide one.

    Returns:
        One resolution per input name, in input order.
    """
    if glyph_list is None:
        glyph_list = default_glyph_list()
    return [GlyphResolution(name, glyph_list.get(name)) for name in names]


def font_glyph_names(font_path: str | Path) -> list[str]:
    """Lists the glyph names of a font program.

    TrueType/OpenType fonts return their glyph order; Type1 fonts
    (.pfa/.pfb) return their CharStrings names sorted.

    Args:
        font_path: Path to the font file.

    Returns:
        Glyph names of the font.

    Raises:
        InspectionError: If the font cannot be parsed.
    """
    font_path = Path(font_path)

    if font_path.suffix.lower() in TYPE1_SUFFIXES:
        from fontTools.t1Lib import T1Font

        try:
            t1 = T1Font(str(font_path))
            return sorted(t1.getGlyphSet().keys())
        except Exception as e:
            raise InspectionError(
                f"Could not read Type1 font '{font_path.name}': {e}"
            ) from e

    from fontTools.ttLib import TTFont

    try:
        with TTFont(str(font_path), lazy=True) as tt_font:
            return list(tt_font.getGlyphOrder())
    except Exception as e:
        raise InspectionError(f"Could not read font '{font_path.name}': {e}") from e


def _resolve_indirect(obj: Any) -> Any:
    """Resolves an indirect pikepdf object reference if needed.

    Args:
        obj: A pikepdf object that may be an indirect reference.

    Returns:
        The resolved object, or obj itself when it is direct.
    """
    try:
        return obj.get_object()
    except Exception:
        return obj


def _iter_differences(differences: pikepdf.Array) -> Iterator[tuple[int, str]]:
    """Yields (code, glyph name) pairs from a /Differences array."""
    current_code = 0
    for item in differences:
        if isinstance(item, pikepdf.Name):
            yield current_code, str(item)[1:]
            current_code += 1
            continue
        try:
            current_code = int(item)
        except (TypeError, ValueError):
            logger.debug("Ignoring unexpected /Differences item: %r", item)


def iter_page_differences(
    page: pikepdf.Page, page_number: int
) -> Iterator[DifferencesEntry]:
    """Yields /Differences assignments of the simple fonts on one page.

    Args:
        page: A pikepdf Page object.
        page_number: 1-based page number recorded in the entries.

    Yields:
        One DifferencesEntry per glyph name in each font's array.
    """
    resources = page.get("/Resources")
    if resources is None:
        return
    resources = _resolve_indirect(resources)
    if not isinstance(resources, Dictionary):
        return

    fonts = resources.get("/Font")
    if fonts is None:
        return
    fonts = _resolve_indirect(fonts)
    if not isinstance(fonts, Dictionary):
        return

    for font_key in list(fonts.keys()):
        font = _resolve_indirect(fonts[font_key])
        if not isinstance(font, Dictionary):
            continue
        subtype = font.get("/Subtype")
        if subtype is None or str(subtype) not in SIMPLE_FONT_SUBTYPES:
            continue

        encoding = font.get("/Encoding")
        if encoding is None:
            continue
        encoding = _resolve_indirect(encoding)
        if not isinstance(encoding, Dictionary):
            continue
        differences = encoding.get("/Differences")
        if differences is None:
            continue

        base_font = font.get("/BaseFont")
        base_font_name = str(base_font)[1:] if base_font is not None else ""
        for code, glyph_name in _iter_differences(_resolve_indirect(differences)):
            yield DifferencesEntry(
                page_number=page_number,
                font_key=str(font_key),
                base_font=base_font_name,
                code=code,
                glyph_name=glyph_name,
            )


def pdf_differences(pdf_path: str | Path) -> list[DifferencesEntry]:
    """Collects /Differences glyph names from every page of a PDF.

    Args:
        pdf_path: Path to the PDF file.

    Returns:
        All /Differences assignments in page order.

    Raises:
        InspectionError: If the PDF cannot be opened.
    """
    pdf_path = Path(pdf_path)
    try:
        pdf = Pdf.open(pdf_path)
    except Exception as e:
        raise InspectionError(f"Could not open PDF '{pdf_path.name}': {e}") from e

    with pdf:
        entries: list[DifferencesEntry] = []
        for page_number, page in enumerate(pdf.pages, start=1):
            entries.extend(iter_page_differences(page, page_number))
    logger.debug("Found %d /Differences entries in %s", len(entries), pdf_path)
    return entries
