# SPDX-License-Identifier: MIT
"""Tolerant version string parsing.

Any string is accepted. Runs of digits become numeric parts, runs of other
letters become text parts, and everything else acts as a separator:

- "1.2.3" -> 1, 2, 3
- "1.2.alpha" -> 1, 2, alpha
- "1.0rc2" -> 1, 0, rc, 2
- " .   -32 . 1" -> 32, 1
- "" -> no parts
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional, Union

from .cmp import Cmp, Ordering
from .manifest import DEFAULT_MANIFEST, Manifest
from .part import Number, Text, VersionPart, compare_sequences, strip_trailing_zeros

logger = logging.getLogger(__name__)

# A part is a run of ASCII digits or a run of letters; anything else separates parts.
# [^\W_0-9] is a word character that is neither an underscore nor an ASCII digit.
PART_PATTERN = re.compile(r"(?P<number>[0-9]+)|(?P<text>[^\W_0-9]+)")


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """A parsed version string.

    Versions compare with the regular operators. Equality follows the
    comparison rules rather than the source text, so ``"1.2"`` and
    ``"1.2.0"`` are equal and hash alike.

    Attributes:
        source: The original version string, unmodified
        parts: The parts in the order they appear in the source
        manifest: The settings the source was parsed with, also used to parse
            raw string operands of compare and compare_to
    """

    source: str
    parts: tuple[VersionPart, ...]
    manifest: Manifest = field(default=DEFAULT_MANIFEST, repr=False)

    @classmethod
    def from_string(cls, version: str, manifest: Optional[Manifest] = None) -> Version:
        """Parse a version string, same as :func:`parse`."""
        return parse(version, manifest)

    def as_string(self) -> str:
        """Return the original version string."""
        return self.source

    def part(self, index: int) -> VersionPart:
        """Return the part at ``index``.

        Raises:
            IndexError: If the version has no part at that position
        """
        return self.parts[index]

    @property
    def part_count(self) -> int:
        return len(self.parts)

    @property
    def is_empty(self) -> bool:
        """Return True if no parts were found in the source."""
        return not self.parts

    def compare(self, other: Union[Version, str]) -> Ordering:
        """Compare this version to another version or version string.

        A string operand is parsed with this version's manifest.

        Examples:
            >>> parse("1.2").compare("1.3.2")
            <Ordering.LESS: -1>
            >>> parse("0.3.0.0").compare("0.3")
            <Ordering.EQUAL: 0>
            >>> parse("2").compare("1.7.3")
            <Ordering.GREATER: 1>
        """
        return compare_sequences(self.parts, as_version(other, self.manifest).parts)

    def compare_to(self, other: Union[Version, str], operator: Union[Cmp, str]) -> bool:
        """Compare to another version and test the result against ``operator``.

        Examples:
            >>> parse("1.2").compare_to("1.3.2", Cmp.LT)
            True
            >>> parse("1.2").compare_to("1.2", "<=")
            True
        """
        return Cmp.coerce(operator).matches(self.compare(other))

    def __str__(self) -> str:
        return self.source

    def __len__(self) -> int:
        return len(self.parts)

    def __iter__(self) -> Iterator[VersionPart]:
        return iter(self.parts)

    def __hash__(self) -> int:
        return hash(strip_trailing_zeros(self.parts))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is Ordering.EQUAL

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is not Ordering.EQUAL

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is not Ordering.LESS


def tokenize(version: str) -> list[VersionPart]:
    """Split a version string into its parts.

    Examples:
        >>> tokenize("1.2.dev4")
        [Number(value=1), Number(value=2), Text(value='dev'), Number(value=4)]
        >>> tokenize("-_- ")
        []
    """
    parts: list[VersionPart] = []
    for match in PART_PATTERN.finditer(version):
        number = match.group("number")
        if number is not None:
            parts.append(Number(_digits_to_int(number)))
        else:
            parts.append(Text(match.group("text")))
    return parts


def parse(version: str, manifest: Optional[Manifest] = None) -> Version:
    """Parse a version string into a Version object.

    Parsing never fails for a string: empty, separator-only or oddly formatted
    input gives a best-effort result, possibly with no parts at all.

    Args:
        version: The version string, in any format
        manifest: Optional settings to drop text parts or limit the depth

    Returns:
        A Version holding the source string and its parts

    Raises:
        TypeError: If ``version`` is not a string

    Examples:
        >>> parse("1.2.3").parts
        (Number(value=1), Number(value=2), Number(value=3))

        >>> parse(" .   -32 . 1").parts
        (Number(value=32), Number(value=1))

        >>> parse("1.2.alpha", Manifest(ignore_text=True)).parts
        (Number(value=1), Number(value=2))
    """
    if not isinstance(version, str):
        raise TypeError(f"Version must be a string, got {type(version).__name__}")

    parts = tokenize(version)
    manifest = manifest or DEFAULT_MANIFEST

    if manifest.ignore_text:
        numbers = [part for part in parts if isinstance(part, Number)]
        if len(numbers) != len(parts):
            logger.debug("Ignoring %d text part(s) in version %r", len(parts) - len(numbers), version)
        parts = numbers

    if manifest.has_max_depth() and len(parts) > manifest.max_depth:
        logger.debug(
            "Truncating version %r from %d to %d part(s)", version, len(parts), manifest.max_depth
        )
        parts = parts[: manifest.max_depth]

    return Version(source=version, parts=tuple(parts), manifest=manifest)


def as_version(version: Union[Version, str], manifest: Optional[Manifest] = None) -> Version:
    """Return ``version`` unchanged if already parsed, otherwise parse it.

    Raises:
        TypeError: If ``version`` is neither a Version nor a string
    """
    if isinstance(version, Version):
        return version
    return parse(version, manifest)


# Below the int() string length limit (4300 digits by default on Python 3.11+)
_DIGIT_CHUNK = 4000


def _digits_to_int(digits: str) -> int:
    """Convert a run of ASCII digits of any length to an integer."""
    if len(digits) <= _DIGIT_CHUNK:
        return int(digits)
    value = 0
    for start in range(0, len(digits), _DIGIT_CHUNK):
        chunk = digits[start : start + _DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value
