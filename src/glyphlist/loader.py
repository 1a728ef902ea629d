# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Loading of the Adobe Glyph List into a GlyphTable.

The bundled list is opened through ``importlib.resources``, which reads
loose files and files inside zip archives alike, so no temporary copy is
ever written. External files are read through ``InternalInputStream``.
"""

import logging
import os
from collections.abc import Iterator
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import BinaryIO

from .config import GlyphListConfig
from .entry import AGLUnicode
from .exceptions import GlyphListLoadError
from .parser import iter_entries
from .streams import InputStream, InternalInputStream
from .table import GlyphTable

logger = logging.getLogger(__name__)

AGL_RESOURCE = "AdobeGlyphList.txt"

GlyphListSource = str | os.PathLike[str] | Traversable

_CHUNK_SIZE = 8192


def bundled_glyph_list() -> Traversable:
    """Returns the packaged Adobe Glyph List resource."""
    return resources.files("glyphlist") / "resources" / AGL_RESOURCE


def resolve_source(
    source: GlyphListSource | None = None,
    config: GlyphListConfig | None = None,
) -> GlyphListSource:
    """Picks the glyph list to read.

    An explicit source wins over the configured path, which wins over the
    bundled resource.
    """
    if source is not None:
        return source
    if config is not None and config.path is not None:
        return config.path
    return bundled_glyph_list()


def iter_lines(stream: InputStream | BinaryIO) -> Iterator[str]:
    """Yields decoded text lines from a byte stream.

    Lines are decoded as UTF-8; a leading byte order mark is dropped and
    line terminators are stripped.

    Raises:
        GlyphListLoadError: If a line is not valid UTF-8.
    """
    pending = b""
    first = True
    line_number = 0
    while True:
        chunk = stream.read(_CHUNK_SIZE)
        if not chunk:
            break
        pending += chunk
        *complete, pending = pending.split(b"\n")
        for raw in complete:
            line_number += 1
            yield _decode(raw, line_number, first)
            first = False
    if pending:
        yield _decode(pending, line_number + 1, first)


def _decode(raw: bytes, line_number: int, first: bool) -> str:
    try:
        text = raw.decode("utf-8-sig" if first else "utf-8")
    except UnicodeDecodeError as e:
        raise GlyphListLoadError(f"Line {line_number} is not valid UTF-8") from e
    return text.rstrip("\r")


def _read_into(
    source: GlyphListSource,
    entries: dict[str, AGLUnicode],
    strict: bool,
) -> None:
    """Parses ``source`` into ``entries``, keeping progress on failure."""
    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        if not path.is_file():
            raise FileNotFoundError(f"Error: File {path} not found!")
        with InternalInputStream(path) as stream:
            for name, entry in iter_entries(iter_lines(stream), strict=strict):
                entries[name] = entry
    else:
        with source.open("rb") as stream:
            for name, entry in iter_entries(iter_lines(stream), strict=strict):
                entries[name] = entry


def load_glyph_table(
    source: GlyphListSource | None = None,
    config: GlyphListConfig | None = None,
) -> GlyphTable:
    """Reads and parses a glyph list, raising on failure.

    Args:
        source: File path or resource to read. Defaults to the configured
            path, then to the bundled Adobe Glyph List.
        config: Loading configuration. Defaults to ``GlyphListConfig()``.

    Returns:
        The parsed table.

    Raises:
        GlyphListLoadError: If the source cannot be read, or on a
            malformed line in strict mode.
    """
    config = config or GlyphListConfig()
    source = resolve_source(source, config)
    entries: dict[str, AGLUnicode] = {}
    try:
        _read_into(source, entries, config.strict)
    except OSError as e:
        raise GlyphListLoadError(f"Could not read glyph list '{source}': {e}") from e
    logger.debug("Loaded %d glyph list entries from %s", len(entries), source)
    return GlyphTable(entries.items())


def build_glyph_table(
    source: GlyphListSource | None = None,
    config: GlyphListConfig | None = None,
) -> GlyphTable:
    """Reads and parses a glyph list without ever raising.

    A failure is logged at DEBUG level and the table keeps the entries
    parsed before it, possibly none.

    Args:
        source: File path or resource to read. Defaults to the configured
            path, then to the bundled Adobe Glyph List.
        config: Loading configuration. Defaults to ``GlyphListConfig()``.

    Returns:
        The (possibly empty or partial) table.
    """
    config = config or GlyphListConfig()
    source = resolve_source(source, config)
    entries: dict[str, AGLUnicode] = {}
    try:
        _read_into(source, entries, config.strict)
    except (OSError, GlyphListLoadError):
        logger.debug("Error in opening Adobe Glyph List file %s", source, exc_info=True)
    else:
        logger.debug("Loaded %d glyph list entries from %s", len(entries), source)
    return GlyphTable(entries.items())
