# SPDX-License-Identifier: MIT
"""Version parts.

Every version string is broken down into a sequence of parts when parsed:

- Number: a run of digits, compared by value ("10" > "9")
- Text: a run of letters, compared by code point

Part sequences are compared position by position, padding the shorter one
with zeros.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import zip_longest
from typing import Union

from .cmp import Ordering


@dataclass(frozen=True, slots=True)
class Number:
    """Numeric version part.

    Attributes:
        value: The parsed integer value (unbounded, never negative)
    """

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Text:
    """Textual version part, such as a pre-release tag.

    Attributes:
        value: The text exactly as it appeared in the version string
    """

    value: str

    def __str__(self) -> str:
        return self.value


VersionPart = Union[Number, Text]

# Implicit part used in place of a missing position
ZERO = Number(0)


def is_zero(part: VersionPart) -> bool:
    """Return True if the part is a numeric zero."""
    return isinstance(part, Number) and part.value == 0


def compare_parts(a: VersionPart, b: VersionPart) -> Ordering:
    """Compare two parts sitting at the same position.

    Numbers compare by value and text compares by code point. When the kinds
    differ, the number is greater: release segments outrank qualifiers such
    as ``alpha`` or ``dev``.

    Examples:
        >>> compare_parts(Number(9), Number(10))
        <Ordering.LESS: -1>
        >>> compare_parts(Number(0), Text("alpha"))
        <Ordering.GREATER: 1>
    """
    if isinstance(a, Number) and isinstance(b, Number):
        return Ordering.of(a.value, b.value)
    if isinstance(a, Text) and isinstance(b, Text):
        return Ordering.of(a.value, b.value)
    if isinstance(a, Number):
        return Ordering.GREATER
    return Ordering.LESS


def compare_sequences(a: Sequence[VersionPart], b: Sequence[VersionPart]) -> Ordering:
    """Compare two part sequences position by position.

    The first position where the parts differ decides the result. A sequence
    that runs out of parts is padded with an implicit ``Number(0)``, so
    "1.2" equals "1.2.0", "1.2.1" is greater than "1.2" and "1.2.alpha" is
    less than "1.2".

    Examples:
        >>> compare_sequences([Number(1), Number(2)], [Number(1), Number(2), Number(0)])
        <Ordering.EQUAL: 0>
        >>> compare_sequences([Number(1), Number(9)], [Number(1), Number(10)])
        <Ordering.LESS: -1>
    """
    for left, right in zip_longest(a, b, fillvalue=ZERO):
        ordering = compare_parts(left, right)
        if ordering is not Ordering.EQUAL:
            return ordering
    return Ordering.EQUAL


def strip_trailing_zeros(parts: Sequence[VersionPart]) -> tuple[VersionPart, ...]:
    """Drop trailing numeric zeros, which never affect ordering."""
    end = len(parts)
    while end and is_zero(parts[end - 1]):
        end -= 1
    return tuple(parts[:end])
