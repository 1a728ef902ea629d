# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Unicode value stored in the Adobe Glyph List for one glyph name.

An entry is either a single Unicode scalar value or a base symbol followed
by one or more combining diacritic marks (e.g. ``dalethatafpatah`` maps to
U+05D3 U+05B2).
"""

from dataclasses import dataclass

# Symbol code of the entry returned when a glyph name has no mapping
NO_SYMBOL = -1

MAX_CODE_POINT = 0x10FFFF


@dataclass(frozen=True)
class AGLUnicode:
    """Unicode mapping of a glyph name.

    Attributes:
        symbol_code: Unicode scalar value of the primary symbol, or -1 if
            the glyph name has no mapping.
        diacritic_codes: Unicode scalar values of combining marks applied
            after the primary symbol, in rendering order.
    """

    symbol_code: int
    diacritic_codes: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable of ints but always store an immutable tuple
        object.__setattr__(self, "diacritic_codes", tuple(self.diacritic_codes))

        if self.symbol_code < NO_SYMBOL or self.symbol_code > MAX_CODE_POINT:
            raise ValueError(f"Invalid symbol code: {self.symbol_code}")
        if self.symbol_code == NO_SYMBOL and self.diacritic_codes:
            raise ValueError("Empty entry cannot carry diacritic codes")
        for code in self.diacritic_codes:
            if not 0 <= code <= MAX_CODE_POINT:
                raise ValueError(f"Invalid diacritic code: {code}")

    @classmethod
    def from_hex(cls, symbol: str, *diacritics: str) -> "AGLUnicode":
        """Creates an entry from base-16 code strings without prefix.

        Args:
            symbol: Hex code of the primary symbol (e.g. "00C5").
            *diacritics: Hex codes of the diacritic marks, in order.

        Returns:
            The parsed entry.

        Raises:
            ValueError: If a token is not a valid hex scalar value.
        """
        return cls(int(symbol, 16), tuple(int(d, 16) for d in diacritics))

    @property
    def is_empty(self) -> bool:
        """True for the "no mapping" sentinel."""
        return self.symbol_code == NO_SYMBOL

    @property
    def has_diacritic(self) -> bool:
        return len(self.diacritic_codes) != 0

    @property
    def code_points(self) -> tuple[int, ...]:
        """All scalar values of this entry, symbol first."""
        if self.is_empty:
            return ()
        return (self.symbol_code, *self.diacritic_codes)

    @property
    def unicode_string(self) -> str:
        """Text made of the symbol followed by its diacritics.

        Python strings hold scalar values directly, so values outside the
        BMP need no surrogate handling. The empty entry yields "".
        """
        return "".join(chr(code) for code in self.code_points)

    def format_code_points(self) -> str:
        """Formats the code points as e.g. ``U+00C5 U+0301``."""
        return " ".join(f"U+{code:04X}" for code in self.code_points)

    def __str__(self) -> str:
        return self.unicode_string


EMPTY = AGLUnicode(NO_SYMBOL)
