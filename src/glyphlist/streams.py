# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Seekable byte input streams.

``InputStream`` describes the minimal random-access reading contract used
by font and glyph list readers; ``InternalInputStream`` implements it over
a read-only file on disk.
"""

import logging
import os
from typing import BinaryIO, Protocol, runtime_checkable

from .exceptions import StreamClosedError

logger = logging.getLogger(__name__)


@runtime_checkable
class InputStream(Protocol):
    """Random-access byte source."""

    def read(self, size: int = -1) -> bytes: ...

    def readinto(self, buffer: bytearray | memoryview) -> int: ...

    def skip(self, size: int) -> int: ...

    def seek(self, pos: int) -> "InputStream": ...

    def tell(self) -> int: ...

    def reset(self) -> None: ...

    def close(self) -> None: ...


class InternalInputStream:
    """Read-only, seekable stream over a file on disk.

    Usable as a context manager; the underlying file handle is closed on
    exit, including when an exception propagates.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        """Opens the file for reading.

        Args:
            path: Path of the file to read.

        Raises:
            FileNotFoundError: If the file does not exist.
            OSError: If the file cannot be opened.
        """
        self._path = os.fspath(path)
        self._source: BinaryIO | None = open(self._path, "rb")  # noqa: SIM115

    def __enter__(self) -> "InternalInputStream":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else f"pos={self.tell()}"
        return f"InternalInputStream({self._path!r}, {state})"

    @property
    def name(self) -> str:
        return self._path

    @property
    def closed(self) -> bool:
        return self._source is None

    def _file(self) -> BinaryIO:
        if self._source is None:
            raise StreamClosedError(f"Stream for {self._path!r} is closed")
        return self._source

    def read(self, size: int = -1) -> bytes:
        """Reads up to ``size`` bytes; all remaining bytes if negative.

        Returns:
            The bytes read, empty at end of file.
        """
        return self._file().read(size)

    def readinto(self, buffer: bytearray | memoryview) -> int:
        """Fills ``buffer`` with up to ``len(buffer)`` bytes.

        Returns:
            Number of bytes read, 0 at end of file.
        """
        return self._file().readinto(buffer)

    def skip(self, size: int) -> int:
        """Advances the position by ``size`` bytes without passing EOF.

        Returns:
            Number of bytes actually skipped.
        """
        source = self._file()
        if size <= 0:
            return 0
        pos = source.tell()
        end = os.fstat(source.fileno()).st_size
        target = min(pos + size, max(end, pos))
        source.seek(target)
        return target - pos

    def seek(self, pos: int) -> "InternalInputStream":
        """Moves to an absolute position.

        Raises:
            ValueError: If ``pos`` is negative.
        """
        if pos < 0:
            raise ValueError(f"Negative seek position: {pos}")
        self._file().seek(pos)
        return self

    def tell(self) -> int:
        return self._file().tell()

    def reset(self) -> None:
        """Moves back to the start of the file."""
        self.seek(0)

    def unread(self) -> "InternalInputStream":
        """Steps back one byte (no-op at the start of the file)."""
        pos = self.tell()
        if pos > 0:
            self._file().seek(pos - 1)
        return self

    def is_cloneable(self) -> bool:
        return False

    def close(self) -> None:
        """Closes the stream. Closing twice is allowed."""
        if self._source is not None:
            source, self._source = self._source, None
            source.close()
            logger.debug("Closed input stream %s", self._path)
