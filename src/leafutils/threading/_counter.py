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

"""Atomic integer counter."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from ..dbc import ensure


def _grew_by_delta(
    self: AtomicCounter,
    delta: int,
    *,
    result: int | None = None,
    exception: Exception | None = None,
) -> bool:
    return exception is not None or (result is not None and result >= delta)


@dataclass
class AtomicCounter:
    """Integer counter whose updates are atomic across threads.

    Updates take the counter's lock for the duration of a single
    read-modify-write, so concurrent ``add`` and ``get_and_set`` calls never
    lose an update. ``get`` reads without the lock and never blocks.

    Example::

        counter = AtomicCounter()
        counter.add(3)
        counter.increment()
        assert counter.get_and_set(0) == 4
        assert counter.get() == 0
    """

    initial_value: int = 0
    _value: int = field(init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __post_init__(self) -> None:
        if self.initial_value < 0:
            msg = "Counter value must be non-negative"
            raise ValueError(msg)
        self._value = self.initial_value

    def get(self) -> int:
        """Current value. Never waits on a concurrent update."""
        return self._value

    @ensure(_grew_by_delta)
    def add(self, delta: int) -> int:
        """Add a non-negative ``delta`` and return the new value."""
        if delta < 0:
            msg = "Counter delta must be non-negative"
            raise ValueError(msg)
        with self._lock:
            self._value += delta
            return self._value

    def increment(self) -> int:
        """Add one and return the new value."""
        return self.add(1)

    def get_and_set(self, value: int) -> int:
        """Replace the value and return the one it held before."""
        if value < 0:
            msg = "Counter value must be non-negative"
            raise ValueError(msg)
        with self._lock:
            previous = self._value
            self._value = value
            return previous


__all__ = ["AtomicCounter"]
