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

"""Argument checks shared by the public entry points."""

from __future__ import annotations

from typing import TypeVar

from .errors import InvalidArgumentError

T = TypeVar("T")


def check_not_null(value: T | None, name: str = "value") -> T:  # noqa: UP047
    """Return ``value`` unchanged, raising when it is ``None``.

    Args:
        value: The argument to check.
        name: Argument name used in the error message.

    Raises:
        InvalidArgumentError: If ``value`` is ``None``.
    """
    if value is None:
        msg = f"{name} must not be None"
        raise InvalidArgumentError(msg)
    return value


__all__ = ["check_not_null"]
