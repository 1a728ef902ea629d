# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Custom exceptions for glyphlist."""


class GlyphListError(Exception):
    """Base exception for all glyphlist errors."""


class GlyphListLoadError(GlyphListError):
    """The glyph list could not be built."""


class MalformedLineError(GlyphListLoadError):
    """A glyph list line could not be parsed."""

    def __init__(self, message: str, line_number: int = 0, line: str = "") -> None:
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class StreamClosedError(GlyphListError, OSError):
    """I/O was attempted on a closed input stream."""


class InspectionError(GlyphListError):
    """A font or PDF file could not be inspected."""
