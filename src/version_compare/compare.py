# SPDX-License-Identifier: MIT
"""Version comparison for arbitrary version strings.

Versions are compared part by part from the left:

- Numbers compare by value: 1.9 < 1.10
- Text compares by code point: 1.2.alpha < 1.2.dev
- A number outranks text at the same position: 1.0.alpha < 1.0.1
- Missing parts count as zero: 1.2 == 1.2.0, 1.2.alpha < 1.2
"""

from __future__ import annotations

from typing import Union

from .cmp import Cmp, Ordering
from .part import compare_sequences
from .version import Version, as_version


def compare(version1: Union[str, Version], version2: Union[str, Version]) -> Ordering:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        Ordering.LESS (-1) if version1 < version2
        Ordering.EQUAL (0) if version1 == version2
        Ordering.GREATER (1) if version1 > version2

    Raises:
        TypeError: If either version is neither a string nor a Version

    Note:
        Any string parses, so this never fails for string input. Strings are
        parsed with the default manifest.

    Examples:
        >>> compare("1.2", "1.5.1")
        <Ordering.LESS: -1>
        >>> compare("1", "1.0.0.0")
        <Ordering.EQUAL: 0>
        >>> compare("123", "1.2.3")
        <Ordering.GREATER: 1>
    """
    v1 = as_version(version1)
    v2 = as_version(version2)
    return compare_sequences(v1.parts, v2.parts)


def compare_to(
    version1: Union[str, Version],
    version2: Union[str, Version],
    operator: Union[Cmp, str],
) -> bool:
    """Compare two versions and test the result against ``operator``.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)
        operator: A Cmp member or its sign, such as "<="

    Returns:
        True if ``version1 <operator> version2`` holds

    Raises:
        InvalidOperatorError: If ``operator`` is an unknown sign
        TypeError: If either version is neither a string nor a Version

    Examples:
        >>> compare_to("1.2", "1.5.1", Cmp.LE)
        True
        >>> compare_to("1.2", "1.5.1", ">")
        False
    """
    return Cmp.coerce(operator).matches(compare(version1, version2))


def version_key(version: Union[str, Version]) -> Version:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or Version object

    Returns:
        The parsed Version, which orders like the comparison rules

    Examples:
        >>> sorted(["1.10", "1.2.alpha", "1.9", "1.2"], key=version_key)
        ['1.2.alpha', '1.2', '1.9', '1.10']
    """
    return as_version(version)
