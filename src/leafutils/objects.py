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

"""Null-safe object helpers."""

from __future__ import annotations


def to_string(value: object, default: str) -> str:
    """Return ``str(value)``, or ``default`` when ``value`` is ``None``.

    Never raises: when ``__str__`` fails the identity form from
    ``object.__repr__`` is returned instead.
    """

    if value is None:
        return default
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


__all__ = ["to_string"]
