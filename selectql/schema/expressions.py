"""Constants and helpers for predicate operators.

``LogicalOp`` is the enumeration the predicate factory dispatches on.  The
symbol tables below map each operator to the exact SQL keyword emitted in the
rendered text; casing is fixed (``like``, ``in`` and ``is null`` stay lower
case, ``BETWEEN``, ``AND`` and ``OR`` upper case).
"""

from __future__ import annotations

from enum import Enum

# ---------------------------------------------------------------------------
# Operator enums
# ---------------------------------------------------------------------------


class LogicalOp(str, Enum):
    """Leaf operations understood by the predicate factory."""

    EQ = "EQ"
    NE = "NE"
    GT = "GT"
    GTE = "GTE"
    LT = "LT"
    LTE = "LTE"
    LIKE = "LIKE"
    IN = "IN"
    BETWEEN = "BETWEEN"
    IS_NULL = "IS_NULL"
    IS_NOT_NULL = "IS_NOT_NULL"


class Junction(str, Enum):
    """Connectives joining a group of child predicates."""

    AND = "AND"
    OR = "OR"


# ---------------------------------------------------------------------------
# SQL symbols
# ---------------------------------------------------------------------------

#: Single-operand comparison operators and the symbol each renders as.
COMPARISON_SYMBOLS: dict[LogicalOp, str] = {
    LogicalOp.EQ: "=",
    LogicalOp.NE: "<>",
    LogicalOp.GT: ">",
    LogicalOp.GTE: ">=",
    LogicalOp.LT: "<",
    LogicalOp.LTE: "<=",
    LogicalOp.LIKE: "like",
}

#: Symbols accepted by ``ComparisonPredicate.op``.
COMPARISON_OPERATORS: frozenset[str] = frozenset(COMPARISON_SYMBOLS.values())

PLACEHOLDER = "?"

