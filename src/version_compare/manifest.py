# SPDX-License-Identifier: MIT
"""Parse configuration for versions.

A manifest tweaks how version strings are broken into parts, for example to
limit how many parts are significant or to ignore text qualifiers entirely.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class ManifestError(ValueError):
    """Raised when a manifest holds an invalid setting."""

    def __init__(self, field: str, message: str = ""):
        self.field = field
        self.message = message or f"Invalid manifest setting: {field}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Manifest:
    """Settings applied when parsing a version string.

    Attributes:
        max_depth: Maximum number of parts kept, None (or 0) for no limit
        ignore_text: Drop text parts such as "alpha" or "dev"
    """

    max_depth: Optional[int] = None
    ignore_text: bool = False

    def __post_init__(self) -> None:
        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
                raise ManifestError(
                    "max_depth", f"max_depth must be an integer, got {type(self.max_depth).__name__}"
                )
            if self.max_depth < 0:
                raise ManifestError("max_depth", f"max_depth cannot be negative: {self.max_depth}")

    def has_max_depth(self) -> bool:
        """Return True if a positive maximum depth is configured.

        Examples:
            >>> Manifest().has_max_depth()
            False
            >>> Manifest(max_depth=3).has_max_depth()
            True
        """
        return self.max_depth is not None and self.max_depth > 0


DEFAULT_MANIFEST = Manifest()
