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

"""Property-based tests for the byte-counting stream."""

from __future__ import annotations

import io

from hypothesis import given, settings, strategies as st

from leafutils.io import END_OF_STREAM, CountingByteStream
from tests.helpers.streams import NonSeekableStream

_operations = st.lists(
    st.one_of(
        st.tuples(st.just("read"), st.integers(min_value=0, max_value=64)),
        st.tuples(st.just("readinto"), st.integers(min_value=0, max_value=64)),
        st.tuples(st.just("read_byte"), st.just(1)),
        st.tuples(st.just("skip"), st.integers(min_value=-4, max_value=64)),
        st.tuples(st.just("reset"), st.just(0)),
    ),
    max_size=40,
)


def _run(stream: CountingByteStream, operations: list[tuple[str, int]]) -> int:
    """Apply ``operations`` and return the bytes delivered since the last reset."""

    delivered = 0
    for name, size in operations:
        if name == "read":
            delivered += len(stream.read(size) or b"")
        elif name == "readinto":
            delivered += stream.readinto(bytearray(size)) or 0
        elif name == "read_byte":
            delivered += 0 if stream.read_byte() == END_OF_STREAM else 1
        elif name == "skip":
            _ = stream.skip(size)
        else:
            assert stream.reset_count() == delivered
            delivered = 0
    return delivered


# ============================================================================
# Property Tests: tally matches delivered bytes
# ============================================================================


@given(data=st.binary(max_size=512), operations=_operations)
@settings(max_examples=100)
def test_tally_matches_bytes_delivered_on_seekable_source(
    data: bytes, operations: list[tuple[str, int]]
) -> None:
    """The tally equals the bytes returned by reads, whatever else happens."""
    stream = CountingByteStream(io.BytesIO(data))

    delivered = _run(stream, operations)
    assert stream.count == delivered


@given(
    data=st.binary(max_size=512),
    chunk=st.integers(min_value=1, max_value=16),
    operations=_operations,
)
@settings(max_examples=100)
def test_tally_matches_bytes_delivered_on_chunked_source(
    data: bytes, chunk: int, operations: list[tuple[str, int]]
) -> None:
    """Short reads from a pipe-like source are counted exactly."""
    stream = CountingByteStream(NonSeekableStream(data, chunk=chunk))

    delivered = _run(stream, operations)
    assert stream.count == delivered


@given(data=st.binary(max_size=256), skips=st.lists(st.integers(-8, 300)))
@settings(max_examples=50)
def test_skip_never_changes_tally(data: bytes, skips: list[int]) -> None:
    """Skipping any amount leaves the tally where it was."""
    stream = CountingByteStream(io.BytesIO(data))
    _ = stream.read(len(data) // 2)
    before = stream.count

    for n in skips:
        _ = stream.skip(n)

    assert stream.count == before
