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

"""Byte stream decorators.

Example::

    from io import BytesIO

    from leafutils.io import CountingByteStream

    stream = CountingByteStream(BytesIO(b"payload"))
    stream.read(3)
    assert stream.count == 3
"""

from __future__ import annotations

from leafutils.io._counting import CountingByteStream
from leafutils.io._types import END_OF_STREAM, ReadableByteStream

__all__ = [
    "END_OF_STREAM",
    "CountingByteStream",
    "ReadableByteStream",
]
