# SPDX-License-Identifier: MIT
"""Ordering results and comparison operators.

Comparing two versions always yields an :class:`Ordering`. A :class:`Cmp`
operator is only used to test such a result against what the caller expects:

- Cmp.EQ -> Equal (==)
- Cmp.NE -> Not equal (!=)
- Cmp.LT -> Less than (<)
- Cmp.LE -> Less than or equal (<=)
- Cmp.GE -> Greater than or equal (>=)
- Cmp.GT -> Greater than (>)
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, Optional, Union


class InvalidOperatorError(ValueError):
    """Raised when a comparison operator sign or name is not recognized."""

    def __init__(self, operator: str, message: str = ""):
        self.operator = operator
        self.message = message or f"Invalid comparison operator: {operator!r}"
        super().__init__(self.message)


class Ordering(IntEnum):
    """Three-way result of comparing two versions.

    The integer values follow the ``-1 / 0 / 1`` convention so results can be
    used wherever a classic ``cmp``-style integer is expected.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, a: Any, b: Any) -> Ordering:
        """Order two mutually comparable values."""
        if a < b:
            return cls.LESS
        if a > b:
            return cls.GREATER
        return cls.EQUAL

    def reverse(self) -> Ordering:
        """Return the ordering seen from the other side."""
        return Ordering(-self.value)

    @property
    def sign(self) -> str:
        return _ORDERING_SIGNS[self]


_ORDERING_SIGNS = {
    Ordering.LESS: "<",
    Ordering.EQUAL: "==",
    Ordering.GREATER: ">",
}


class Cmp(Enum):
    """Comparison operator, valued by its sign."""

    EQ = "=="
    NE = "!="
    LT = "<"
    LE = "<="
    GE = ">="
    GT = ">"

    @classmethod
    def from_sign(cls, sign: str) -> Cmp:
        """Look up an operator by its sign.

        Surrounding whitespace is ignored, and ``=`` and ``<>`` are accepted as
        aliases for ``==`` and ``!=``.

        Raises:
            InvalidOperatorError: If the sign is unknown

        Examples:
            >>> Cmp.from_sign("<=")
            <Cmp.LE: '<='>
            >>> Cmp.from_sign("=")
            <Cmp.EQ: '=='>
        """
        sign = sign.strip()
        sign = _SIGN_ALIASES.get(sign, sign)
        try:
            return cls(sign)
        except ValueError:
            raise InvalidOperatorError(sign) from None

    @classmethod
    def from_name(cls, name: str) -> Cmp:
        """Look up an operator by its short name, case-insensitively.

        Raises:
            InvalidOperatorError: If the name is unknown

        Examples:
            >>> Cmp.from_name("le")
            <Cmp.LE: '<='>
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise InvalidOperatorError(name) from None

    @classmethod
    def from_ordering(cls, ordering: Ordering) -> Cmp:
        """Return the operator that holds exactly for the given ordering."""
        return _ORDERING_TO_CMP[Ordering(ordering)]

    @classmethod
    def coerce(cls, operator: Union[Cmp, str]) -> Cmp:
        """Accept either a ``Cmp`` or its sign."""
        if isinstance(operator, cls):
            return operator
        if isinstance(operator, str):
            return cls.from_sign(operator)
        raise TypeError(f"Operator must be a Cmp or a sign string, got {type(operator).__name__}")

    @property
    def sign(self) -> str:
        return self.value

    @property
    def ordering(self) -> Optional[Ordering]:
        """The single ordering this operator stands for, if there is one."""
        return _CMP_TO_ORDERING.get(self)

    @property
    def factor(self) -> int:
        """Return -1, 0 or 1 for LT, EQ and GT.

        Raises:
            ValueError: For operators that do not map to a single ordering
        """
        ordering = self.ordering
        if ordering is None:
            raise ValueError(f"Operator {self.sign} has no single ordering")
        return int(ordering)

    def matches(self, ordering: Ordering) -> bool:
        """Test an ordering result against this operator.

        Examples:
            >>> Cmp.LE.matches(Ordering.EQUAL)
            True
            >>> Cmp.NE.matches(Ordering.EQUAL)
            False
        """
        return Ordering(ordering) in _TRUTH_TABLE[self]

    def invert(self) -> Cmp:
        """Return the negated operator (EQ <-> NE, LT <-> GE, LE <-> GT)."""
        return _INVERTED[self]

    def opposite(self) -> Cmp:
        """Return the opposite operator (EQ <-> NE, LT <-> GT, LE <-> GE)."""
        return _OPPOSITE[self]

    def flip(self) -> Cmp:
        """Return the operator with its operands swapped (LT <-> GT, LE <-> GE)."""
        return _FLIPPED.get(self, self)

    def __str__(self) -> str:
        return self.value


_SIGN_ALIASES = {"=": "==", "<>": "!="}

_TRUTH_TABLE: dict[Cmp, frozenset[Ordering]] = {
    Cmp.EQ: frozenset({Ordering.EQUAL}),
    Cmp.NE: frozenset({Ordering.LESS, Ordering.GREATER}),
    Cmp.LT: frozenset({Ordering.LESS}),
    Cmp.LE: frozenset({Ordering.LESS, Ordering.EQUAL}),
    Cmp.GE: frozenset({Ordering.GREATER, Ordering.EQUAL}),
    Cmp.GT: frozenset({Ordering.GREATER}),
}

_CMP_TO_ORDERING = {
    Cmp.LT: Ordering.LESS,
    Cmp.EQ: Ordering.EQUAL,
    Cmp.GT: Ordering.GREATER,
}
_ORDERING_TO_CMP = {ordering: cmp for cmp, ordering in _CMP_TO_ORDERING.items()}

_INVERTED = {
    Cmp.EQ: Cmp.NE,
    Cmp.NE: Cmp.EQ,
    Cmp.LT: Cmp.GE,
    Cmp.LE: Cmp.GT,
    Cmp.GE: Cmp.LT,
    Cmp.GT: Cmp.LE,
}

_OPPOSITE = {
    Cmp.EQ: Cmp.NE,
    Cmp.NE: Cmp.EQ,
    Cmp.LT: Cmp.GT,
    Cmp.LE: Cmp.GE,
    Cmp.GE: Cmp.LE,
    Cmp.GT: Cmp.LT,
}

_FLIPPED = {
    Cmp.LT: Cmp.GT,
    Cmp.LE: Cmp.GE,
    Cmp.GE: Cmp.LE,
    Cmp.GT: Cmp.LT,
}
