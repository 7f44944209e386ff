# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Byte-counting stream decorator."""

from __future__ import annotations

import io
from collections.abc import Buffer
from typing import Self, override

from ..dbc import ensure, invariant
from ..logging import StructuredLogger, get_logger
from ..preconditions import check_not_null
from ..threading import AtomicCounter
from ._types import END_OF_STREAM, ReadableByteStream

logger: StructuredLogger = get_logger(
    __name__, context={"component": "counting_stream"}
)

_SKIP_CHUNK_SIZE = 8192


def _tally_non_negative(stream: CountingByteStream) -> bool:
    return stream.count >= 0


def _previous_tally_returned(
    stream: CountingByteStream,
    *,
    result: int | None = None,
    exception: Exception | None = None,
) -> tuple[bool, str]:
    if exception is not None:
        return True, ""
    return result is not None and result >= 0, f"reset_count returned {result!r}"


@invariant(_tally_non_negative)
class CountingByteStream(io.RawIOBase):
    """Readable stream that counts the bytes delivered to its caller.

    Every read forwards to the wrapped source and adds the number of bytes
    actually returned to an atomic tally. Bytes read more than once (after a
    ``reset_to_mark`` or a backwards ``seek``) are counted each time. Skipped
    bytes and end-of-stream reads are never counted.

    The wrapper owns its source: closing the wrapper closes the source.
    Source failures propagate unchanged.

    Example::

        with CountingByteStream(open(path, "rb")) as stream:
            header = stream.read(16)
            stream.skip(48)
            body = stream.read()
            assert stream.count == len(header) + len(body)
    """

    def __new__(cls, source: ReadableByteStream | None) -> Self:
        _ = check_not_null(source, "source")
        return super().__new__(cls)

    def __init__(self, source: ReadableByteStream | None) -> None:
        super().__init__()
        self._source: ReadableByteStream = check_not_null(source, "source")
        self._tally = AtomicCounter()
        self._mark: int | None = None

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}(source={self._source!r}, count={self.count})"

    @property
    def count(self) -> int:
        """Bytes delivered to callers since creation or the last reset."""
        return self._tally.get()

    def current_count(self) -> int:
        """Return :attr:`count`."""
        return self._tally.get()

    @ensure(_previous_tally_returned)
    def reset_count(self) -> int:
        """Set the tally to zero and return the value it held before.

        The read and the clear happen as one atomic step, so bytes counted by
        a concurrent read land either in the returned value or in the new
        tally, never in neither.
        """
        previous = self._tally.get_and_set(0)
        logger.debug(
            "counting_stream.reset",
            event="counting_stream.reset",
            context={"previous_count": previous},
        )
        return previous

    def read_byte(self) -> int | None:
        """Read a single byte.

        Returns:
            The byte value (0-255), ``END_OF_STREAM`` once the source is
            exhausted, or ``None`` when a non-blocking source has no data
            available.
        """
        data = self._source.read(1)
        if data is None:
            return None
        if not data:
            return END_OF_STREAM
        self._tally.increment()
        return data[0]

    @override
    def read(self, size: int | None = -1, /) -> bytes | None:
        data = self._source.read(-1 if size is None else size)
        if data:
            self._tally.add(len(data))
        return data

    @override
    def readinto(
        self, buffer: Buffer, /, offset: int = 0, length: int | None = None
    ) -> int | None:
        """Read into ``buffer[offset:offset + length]``.

        ``length`` defaults to the rest of the buffer past ``offset``.

        Returns:
            The number of bytes read (``0`` at end of stream), or ``None``
            when a non-blocking source has no data available.

        Raises:
            IndexError: If the window does not fit inside ``buffer``.
        """
        view = memoryview(buffer).cast("B")
        if length is None:
            length = view.nbytes - offset
        if offset < 0 or length < 0 or offset + length > view.nbytes:
            msg = (
                f"offset={offset} length={length} out of bounds for a "
                f"{view.nbytes}-byte buffer"
            )
            raise IndexError(msg)
        n = self._source.readinto(view[offset : offset + length])
        if n is not None and n > 0:
            self._tally.add(n)
        return n

    def skip(self, n: int) -> int:
        """Advance the source by up to ``n`` bytes without counting them.

        Seekable sources are repositioned, clamped to the end of the stream;
        other sources are read and the data discarded.

        Returns:
            The number of bytes actually skipped.
        """
        if n <= 0:
            return 0
        source = self._source
        if source.seekable():
            start = source.tell()
            end = source.seek(0, io.SEEK_END)
            target = min(start + n, max(end, start))
            _ = source.seek(target)
            return target - start
        skipped = 0
        while skipped < n:
            chunk = source.read(min(n - skipped, _SKIP_CHUNK_SIZE))
            if not chunk:
                break
            skipped += len(chunk)
        return skipped

    def available(self) -> int:
        """Bytes readable without blocking; ``0`` when it cannot be known."""
        source = self._source
        if not source.seekable():
            return 0
        position = source.tell()
        end = source.seek(0, io.SEEK_END)
        _ = source.seek(position)
        return max(end - position, 0)

    def mark(self, read_limit: int) -> None:
        """Remember the source position for :meth:`reset_to_mark`.

        ``read_limit`` is accepted for parity with other mark-capable streams;
        a seekable source keeps the mark valid regardless of how much is read.
        Does nothing when the source cannot seek.
        """
        del read_limit
        if self._source.seekable():
            self._mark = self._source.tell()

    def mark_supported(self) -> bool:
        """Whether :meth:`mark` and :meth:`reset_to_mark` work on this source."""
        return self._source.seekable()

    def reset_to_mark(self) -> None:
        """Reposition the source at the last mark. The tally is unchanged.

        Raises:
            io.UnsupportedOperation: If the source cannot seek.
            OSError: If no mark has been set.
        """
        if not self._source.seekable():
            raise io.UnsupportedOperation("mark/reset not supported")
        if self._mark is None:
            raise OSError("Resetting to invalid mark")
        _ = self._source.seek(self._mark)

    @override
    def readable(self) -> bool:
        return self._source.readable()

    @override
    def seekable(self) -> bool:
        return self._source.seekable()

    @override
    def seek(self, offset: int, whence: int = io.SEEK_SET, /) -> int:
        return self._source.seek(offset, whence)

    @override
    def tell(self) -> int:
        return self._source.tell()

    @override
    def close(self) -> None:
        if self.closed:
            return
        try:
            self._source.close()
        finally:
            super().close()
            logger.debug(
                "counting_stream.close",
                event="counting_stream.close",
                context={"count": self._tally.get()},
            )


__all__ = ["CountingByteStream"]
