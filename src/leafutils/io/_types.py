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

"""Protocols describing the byte sources the io helpers wrap."""

from __future__ import annotations

from collections.abc import Buffer
from typing import Final, Protocol, runtime_checkable

END_OF_STREAM: Final[int] = -1
"""Returned by single-byte reads once the source is exhausted."""


@runtime_checkable
class ReadableByteStream(Protocol):
    """Readable binary stream.

    Any standard binary file object (``io.BytesIO``, ``io.BufferedReader``,
    ``io.FileIO``, a socket file) satisfies this protocol.
    """

    @property
    def closed(self) -> bool:
        """Whether the stream has been closed."""
        ...

    def read(self, size: int = -1, /) -> bytes | None:
        """Read up to ``size`` bytes; ``b""`` signals end of stream."""
        ...

    def readinto(self, buffer: Buffer, /) -> int | None:
        """Fill ``buffer`` and return the number of bytes written."""
        ...

    def readable(self) -> bool:
        """Whether the stream supports reading."""
        ...

    def seekable(self) -> bool:
        """Whether ``seek`` and ``tell`` are supported."""
        ...

    def seek(self, offset: int, whence: int = 0, /) -> int:
        """Move to ``offset`` relative to ``whence`` and return the position."""
        ...

    def tell(self) -> int:
        """Return the current position."""
        ...

    def close(self) -> None:
        """Release the stream."""
        ...


__all__ = ["END_OF_STREAM", "ReadableByteStream"]
