# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Read-only glyph name to Unicode table."""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from .entry import AGLUnicode


class GlyphTable(Mapping[str, AGLUnicode]):
    """Immutable mapping from glyph name to AGLUnicode.

    Built once from (name, entry) pairs; a name that appears more than once
    keeps its last entry.
    """

    __slots__ = ("_entries",)

    def __init__(self, pairs: Iterable[tuple[str, AGLUnicode]] = ()) -> None:
        entries: dict[str, AGLUnicode] = {}
        for name, entry in pairs:
            entries[name] = entry
        self._entries = MappingProxyType(entries)

    def __getitem__(self, name: str) -> AGLUnicode:
        return self._entries[name]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"GlyphTable({len(self._entries)} entries)"


EMPTY_TABLE = GlyphTable()
