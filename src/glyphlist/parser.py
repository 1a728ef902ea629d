# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Line parser for Adobe Glyph List text.

Each mapping line has the form ``<glyphName> <hex>[ <hex> ...]``: the glyph
name, the primary Unicode scalar value and optional diacritic values, all
in base 16 without prefix. The upstream ``glyphlist.txt`` layout
``<glyphName>;<hex>[ <hex> ...]`` is accepted as well.
"""

import logging
import re
from collections.abc import Iterable, Iterator

from .entry import MAX_CODE_POINT, AGLUnicode
from .exceptions import MalformedLineError

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"

_HEX_TOKEN = re.compile(r"[0-9A-Fa-f]+")


def is_ignorable(line: str) -> bool:
    """Checks if a line carries no mapping (blank or comment)."""
    stripped = line.strip()
    return not stripped or stripped.startswith(COMMENT_PREFIX)


def split_tokens(line: str) -> list[str]:
    """Splits a glyph list line into name and code tokens.

    Args:
        line: One line of glyph list text.

    Returns:
        List of tokens, the glyph name first.
    """
    name, sep, codes = line.strip().partition(";")
    # The ";" layout only applies when the name is a single token
    if sep and len(name.split()) == 1:
        return [name.strip(), *codes.split()]
    return line.split()


def parse_line(line: str, line_number: int = 0) -> tuple[str, AGLUnicode]:
    """Parses one mapping line.

    Args:
        line: Line text, e.g. "Aringacute 00C5 0301".
        line_number: 1-based line number used in error messages.

    Returns:
        Tuple of (glyph name, entry).

    Raises:
        MalformedLineError: If the line has fewer than two tokens or a
            code is not a valid base-16 Unicode scalar value.
    """
    tokens = split_tokens(line)
    if len(tokens) < 2 or not tokens[0]:
        raise MalformedLineError(
            f"Line {line_number}: expected '<name> <hex>...', got {line.strip()!r}",
            line_number,
            line,
        )

    name, codes = tokens[0], tokens[1:]
    for token in codes:
        if not _HEX_TOKEN.fullmatch(token) or int(token, 16) > MAX_CODE_POINT:
            raise MalformedLineError(
                f"Line {line_number}: invalid code {token!r} for glyph {name!r}",
                line_number,
                line,
            )

    return name, AGLUnicode.from_hex(*codes)


def iter_entries(
    lines: Iterable[str], strict: bool = False
) -> Iterator[tuple[str, AGLUnicode]]:
    """Yields (name, entry) pairs from glyph list lines.

    Blank lines and ``#`` comments are skipped silently. Malformed lines are
    logged and skipped, unless ``strict`` is set.

    Args:
        lines: Lines of glyph list text.
        strict: If True, a malformed line raises instead of being skipped.

    Yields:
        Tuples of (glyph name, entry) in input order.

    Raises:
        MalformedLineError: On a malformed line when ``strict`` is True.
    """
    for line_number, line in enumerate(lines, start=1):
        if is_ignorable(line):
            continue
        try:
            yield parse_line(line, line_number)
        except MalformedLineError as e:
            if strict:
                raise
            logger.warning("Skipping malformed glyph list line: %s", e)
