# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Runtime configuration for glyph list loading."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

# Environment variable pointing to an external glyph list file
GLYPHLIST_PATH_ENV = "GLYPHLIST_PATH"

# Environment variable enabling fail-fast parsing of malformed lines
GLYPHLIST_STRICT_ENV = "GLYPHLIST_STRICT"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class GlyphListConfig:
    """Where the glyph list is read from and how strictly it is parsed.

    Attributes:
        path: External glyph list file. None selects the bundled resource.
        strict: If True, a malformed line aborts the build instead of
            being skipped.
    """

    path: Path | None = None
    strict: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GlyphListConfig":
        """Builds a configuration from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            Configuration with ``GLYPHLIST_PATH`` and ``GLYPHLIST_STRICT``
            applied.
        """
        if environ is None:
            environ = os.environ
        raw_path = environ.get(GLYPHLIST_PATH_ENV, "").strip()
        strict = environ.get(GLYPHLIST_STRICT_ENV, "").strip().lower() in _TRUE_VALUES
        return cls(path=Path(raw_path) if raw_path else None, strict=strict)
