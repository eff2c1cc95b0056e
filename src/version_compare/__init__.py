# SPDX-License-Identifier: MIT
"""Compare version numbers in any format.

This package parses free-form version strings into comparable parts and
orders them, without requiring semver or any other fixed format.

Example:
    >>> from version_compare import Cmp, compare, compare_to, parse
    >>>
    >>> compare("1.2", "1.5.1")
    <Ordering.LESS: -1>
    >>> compare_to("1.2", "1.5.1", Cmp.LE)
    True
    >>>
    >>> version = parse("1.2.alpha")
    >>> [str(part) for part in version.parts]
    ['1', '2', 'alpha']
    >>> version < parse("1.2")
    True
"""

__version__ = "0.1.0"

from .cmp import (
    Cmp,
    Ordering,
    InvalidOperatorError,
)
from .manifest import (
    Manifest,
    ManifestError,
)
from .part import (
    Number,
    Text,
    VersionPart,
    compare_parts,
    compare_sequences,
)
from .version import (
    Version,
    as_version,
    parse,
    tokenize,
)
from .compare import (
    compare,
    compare_to,
    version_key,
)

__all__ = [
    # Ordering and operators
    "Cmp",
    "Ordering",
    "InvalidOperatorError",
    # Parse configuration
    "Manifest",
    "ManifestError",
    # Version parts
    "Number",
    "Text",
    "VersionPart",
    "compare_parts",
    "compare_sequences",
    # Version parsing
    "Version",
    "as_version",
    "parse",
    "tokenize",
    # Version comparison
    "compare",
    "compare_to",
    "version_key",
]
