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

from __future__ import annotations

import io
from collections.abc import Callable, Iterator

import pytest

import leafutils.dbc as dbc_module
from leafutils.io import CountingByteStream

StreamFactory = Callable[[bytes], CountingByteStream]


@pytest.fixture(autouse=True)
def contracts_enabled(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test with design-by-contract checks switched on."""

    monkeypatch.delenv("LEAFUTILS_DBC", raising=False)
    dbc_module._forced_state = None
    dbc_module.enable_dbc()
    yield
    dbc_module._forced_state = None


@pytest.fixture
def counting_stream() -> StreamFactory:
    """Return a factory wrapping bytes in a seekable counting stream."""

    def factory(data: bytes) -> CountingByteStream:
        return CountingByteStream(io.BytesIO(data))

    return factory
