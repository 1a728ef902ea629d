# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Glyph name to Unicode lookups against the Adobe Glyph List.

``AdobeGlyphList`` owns one table, built on first use. Concurrent first
callers block until the single build finishes; afterwards lookups are
plain, lock-free dictionary reads. The module-level ``get``, ``contains``
and ``empty`` functions use a shared default instance.
"""

import logging
import threading
from collections.abc import Iterator, Mapping

from .config import GlyphListConfig
from .entry import EMPTY, AGLUnicode
from .loader import GlyphListSource, build_glyph_table
from .table import GlyphTable

logger = logging.getLogger(__name__)


class AdobeGlyphList:
    """Resolves glyph names to their Adobe Glyph List Unicode values.

    Example:
        >>> agl = AdobeGlyphList({"Aacute": AGLUnicode(0x00C1)})
        >>> agl.get("Aacute").unicode_string
        'Á'
    """

    def __init__(
        self,
        table: Mapping[str, AGLUnicode] | None = None,
        *,
        source: GlyphListSource | None = None,
        config: GlyphListConfig | None = None,
    ) -> None:
        """Initializes the resolver.

        Args:
            table: Prebuilt name-to-entry mapping. When given, nothing is
                read from disk.
            source: Glyph list file or resource to load on first use.
            config: Loading configuration; read from the environment if
                omitted.
        """
        self._source = source
        self._config = config
        self._lock = threading.Lock()
        self._table: GlyphTable | None = None
        if table is not None:
            if not isinstance(table, GlyphTable):
                table = GlyphTable(table.items())
            self._table = table

    def __repr__(self) -> str:
        if self._table is None:
            return "AdobeGlyphList(not loaded)"
        return f"AdobeGlyphList({len(self._table)} entries)"

    @property
    def loaded(self) -> bool:
        return self._table is not None

    @property
    def table(self) -> GlyphTable:
        """The built table; triggers the build on first access."""
        return self.load()

    def load(self) -> GlyphTable:
        """Builds the table once and returns it.

        Returns:
            The table, possibly empty if the glyph list could not be read.
        """
        table = self._table
        if table is not None:
            return table
        with self._lock:
            if self._table is None:
                config = self._config or GlyphListConfig.from_env()
                self._table = build_glyph_table(self._source, config)
                logger.debug("Adobe Glyph List ready with %d entries", len(self._table))
            return self._table

    def get(self, glyph_name: str) -> AGLUnicode:
        """Returns the AGLUnicode for a glyph name.

        Args:
            glyph_name: PostScript glyph name (case-sensitive).

        Returns:
            The glyph's entry, or the shared empty entry if the name is not
            in the list.
        """
        entry = self.table.get(glyph_name)
        if entry is None:
            logger.debug("Cannot find glyph %s in Adobe Glyph List", glyph_name)
            return EMPTY
        return entry

    def contains(self, glyph_name: str) -> bool:
        return glyph_name in self.table

    def empty(self) -> AGLUnicode:
        return EMPTY

    def names(self) -> Iterator[str]:
        return iter(self.table)

    def __contains__(self, glyph_name: object) -> bool:
        return glyph_name in self.table

    def __len__(self) -> int:
        return len(self.table)


_default: AdobeGlyphList | None = None
_default_lock = threading.Lock()


def default_glyph_list() -> AdobeGlyphList:
    """Returns the process-wide resolver, creating it on first call."""
    global _default  # noqa: PLW0603
    instance = _default
    if instance is not None:
        return instance
    with _default_lock:
        if _default is None:
            _default = AdobeGlyphList()
        return _default


def reset_default_glyph_list() -> None:
    """Drops the process-wide resolver so the next call rebuilds it."""
    global _default  # noqa: PLW0603
    with _default_lock:
        _default = None


def get(glyph_name: str) -> AGLUnicode:
    """Looks a glyph name up in the default Adobe Glyph List."""
    return default_glyph_list().get(glyph_name)


def contains(glyph_name: str) -> bool:
    """Checks if the default Adobe Glyph List knows a glyph name."""
    return default_glyph_list().contains(glyph_name)


def empty() -> AGLUnicode:
    """Returns the entry used for glyph names without mapping."""
    return EMPTY
