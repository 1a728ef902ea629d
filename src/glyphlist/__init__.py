# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""glyphlist - Resolve PostScript glyph names to Unicode."""

from importlib.metadata import PackageNotFoundError, version

from .config import GlyphListConfig
from .entry import EMPTY, AGLUnicode
from .exceptions import (
    GlyphListError,
    GlyphListLoadError,
    InspectionError,
    MalformedLineError,
    StreamClosedError,
)
from .loader import build_glyph_table, load_glyph_table
from .resolver import (
    AdobeGlyphList,
    contains,
    default_glyph_list,
    empty,
    get,
    reset_default_glyph_list,
)
from .streams import InputStream, InternalInputStream
from .table import GlyphTable

try:
    __version__ = version("glyphlist")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "__version__",
    "get",
    "contains",
    "empty",
    "default_glyph_list",
    "reset_default_glyph_list",
    "AdobeGlyphList",
    "AGLUnicode",
    "EMPTY",
    "GlyphTable",
    "GlyphListConfig",
    "build_glyph_table",
    "load_glyph_table",
    "InputStream",
    "InternalInputStream",
    "GlyphListError",
    "GlyphListLoadError",
    "MalformedLineError",
    "StreamClosedError",
    "InspectionError",
]
