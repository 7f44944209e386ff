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

"""Base exception hierarchy for :mod:`leafutils`."""

from __future__ import annotations


class LeafUtilsError(Exception):
    """Base class for all leafutils exceptions.

    Catching this class handles every error the library raises on its own
    behalf. Failures that originate in caller-supplied objects (for example
    an ``OSError`` from a wrapped stream) are never wrapped and propagate
    with their original type.

    Example:
        Catch any leafutils-specific error::

            try:
                joiner = Joiner.on(separator)
            except LeafUtilsError as e:
                logger.error("Bad joiner configuration: %s", e)
    """


class InvalidArgumentError(LeafUtilsError, ValueError):
    """Raised when a required argument is absent.

    The library treats ``None`` as "absent". Every public entry point that
    needs a value (a stream to wrap, a separator, a prefix or suffix, a
    replacement text, an iterable of parts) raises this error at the call
    site instead of failing later with an ``AttributeError``.

    Example:
        Rejecting an absent separator::

            try:
                Joiner.on(None)
            except InvalidArgumentError:
                ...

    Note:
        This exception also inherits from ``ValueError``, so handlers written
        against the standard validation error keep working.
    """


__all__ = [
    "InvalidArgumentError",
    "LeafUtilsError",
]
