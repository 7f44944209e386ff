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

"""Configurable string joiner."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from ..objects import to_string
from ..preconditions import check_not_null


@dataclass(frozen=True, slots=True)
class Joiner:
    """Immutable policy for joining values into one string.

    Create a joiner with :meth:`on` and derive variants with the ``with_*``,
    ``ignore_*``, ``replace_*`` and :meth:`trim_inputs` methods. Each
    derivation returns a new joiner; the receiver never changes, so joiners
    can be shared freely between threads and stored as constants.

    Example::

        csv = Joiner.on(", ").ignore_nulls()
        csv.join(["a", None, "b"])  # "a, b"
        csv.with_prefix("[").with_suffix("]").join([])  # "[]"

    Each part goes through these steps, in order:

    1. ``None`` is dropped when :attr:`skip_nulls` is set.
    2. The part is rendered: ``None`` becomes :attr:`null_text`, anything
       else ``str(part)``.
    3. The text is stripped when :attr:`trim` is set.
    4. Empty text is dropped when :attr:`skip_empty` is set, and replaced by
       :attr:`empty_text` otherwise.

    Surviving texts are joined with :attr:`separator` and wrapped in
    :attr:`prefix` and :attr:`suffix`. Dropped parts leave no separator
    behind.

    Attributes:
        separator: Text placed between two surviving parts.
        prefix: Text placed before the first part.
        suffix: Text placed after the last part.
        trim: Strip leading and trailing whitespace from rendered parts.
        skip_nulls: Drop ``None`` parts.
        skip_empty: Drop parts whose rendered text is empty.
        null_text: Rendering of ``None`` parts that are not dropped.
        empty_text: Replacement for empty parts that are not dropped.
    """

    separator: str
    prefix: str = ""
    suffix: str = ""
    trim: bool = False
    skip_nulls: bool = False
    skip_empty: bool = False
    null_text: str = "null"
    empty_text: str = ""

    def __post_init__(self) -> None:
        _ = check_not_null(self.separator, "separator")
        _ = check_not_null(self.prefix, "prefix")
        _ = check_not_null(self.suffix, "suffix")
        _ = check_not_null(self.null_text, "null_text")
        _ = check_not_null(self.empty_text, "empty_text")

    @classmethod
    def on(cls, separator: str) -> Joiner:
        """Return a joiner using ``separator`` and the default policy.

        The default policy has no prefix or suffix, renders ``None`` as
        ``"null"``, keeps empty strings, and does not trim.

        Raises:
            InvalidArgumentError: If ``separator`` is ``None``.
        """
        return cls(check_not_null(separator, "separator"))

    def trim_inputs(self) -> Joiner:
        """Return a joiner that strips whitespace around every part."""
        return replace(self, trim=True)

    def ignore_nulls(self) -> Joiner:
        """Return a joiner that drops ``None`` parts."""
        return replace(self, skip_nulls=True)

    def ignore_empty_strings(self) -> Joiner:
        """Return a joiner that drops parts rendering to an empty string."""
        return replace(self, skip_empty=True)

    def replace_null_with(self, text: str) -> Joiner:
        """Return a joiner rendering ``None`` parts as ``text``.

        ``None`` parts are kept from then on, even if this joiner ignored
        them.
        """
        return replace(
            self, skip_nulls=False, null_text=check_not_null(text, "text")
        )

    def replace_empty_string_with(self, text: str) -> Joiner:
        """Return a joiner replacing empty parts with ``text``.

        Empty parts are kept from then on, even if this joiner ignored them.
        """
        return replace(
            self, skip_empty=False, empty_text=check_not_null(text, "text")
        )

    def with_prefix(self, prefix: str) -> Joiner:
        """Return a joiner that starts its output with ``prefix``."""
        return replace(self, prefix=check_not_null(prefix, "prefix"))

    def with_suffix(self, suffix: str) -> Joiner:
        """Return a joiner that ends its output with ``suffix``."""
        return replace(self, suffix=check_not_null(suffix, "suffix"))

    def join(self, parts: Iterable[object]) -> str:
        """Join ``parts`` according to this joiner's policy.

        ``parts`` is iterated exactly once, so generators are accepted.

        Raises:
            InvalidArgumentError: If ``parts`` is ``None``.
        """
        items = check_not_null(parts, "parts")
        texts = [text for text in map(self._format, items) if text is not None]
        return f"{self.prefix}{self.separator.join(texts)}{self.suffix}"

    def join_args(self, *parts: object) -> str:
        """Join positional ``parts``; same as ``join(parts)``."""
        return self.join(parts)

    def _format(self, part: object) -> str | None:
        if part is None:
            if self.skip_nulls:
                return None
            text = self.null_text
        else:
            text = to_string(part, self.null_text)
        if self.trim:
            text = text.strip()
        if text:
            return text
        return None if self.skip_empty else self.empty_text


__all__ = ["Joiner"]
