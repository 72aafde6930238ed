"""Predicate constructors.

These are the functions callers compose conditions with::

    from selectql.predicates import and_, eq, gt, in_, like, or_

    cond = or_(and_(like("name", "Bob%"), gt("age", 37)), in_("dept", [1, 2]))
    cond.to_sql()
    # '((name like ? AND age > ?) OR dept in (?, ?))'

Every function returns an immutable predicate model from
:mod:`selectql.schema.predicates`.  The module also registers the built-in
``LogicalOp`` handlers with :class:`~selectql.compile.registry.PredicateFactory`,
which backs :func:`predicate`.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from selectql.compile.registry import PredicateFactory
from selectql.errors import InvalidArgumentError
from selectql.schema.expressions import COMPARISON_SYMBOLS, Junction, LogicalOp
from selectql.schema.predicates import (
    PREDICATE_TYPES,
    BetweenPredicate,
    ComparisonPredicate,
    InPredicate,
    JunctionPredicate,
    NotPredicate,
    NullCheckPredicate,
    Predicate,
    to_predicate,
)

# ---------------------------------------------------------------------------
# Comparisons
# ---------------------------------------------------------------------------


def eq(expr: str, value: Any) -> ComparisonPredicate:
    """``expr = ?``."""
    return ComparisonPredicate(op="=", expr=expr, value=value)


def neq(expr: str, value: Any) -> ComparisonPredicate:
    """``expr <> ?``."""
    return ComparisonPredicate(op="<>", expr=expr, value=value)


def gt(expr: str, value: Any) -> ComparisonPredicate:
    return ComparisonPredicate(op=">", expr=expr, value=value)


def gte(expr: str, value: Any) -> ComparisonPredicate:
    return ComparisonPredicate(op=">=", expr=expr, value=value)


def lt(expr: str, value: Any) -> ComparisonPredicate:
    return ComparisonPredicate(op="<", expr=expr, value=value)


def lte(expr: str, value: Any) -> ComparisonPredicate:
    return ComparisonPredicate(op="<=", expr=expr, value=value)


def like(expr: str, value: Any) -> ComparisonPredicate:
    """``expr like ?``.  Wildcards belong in ``value`` (e.g. ``"Bob%"``)."""
    return ComparisonPredicate(op="like", expr=expr, value=value)


# ---------------------------------------------------------------------------
# Ranges, membership, null checks
# ---------------------------------------------------------------------------


def between(expr: str, start: Any, end: Any) -> BetweenPredicate:
    """``expr BETWEEN ? AND ?``.

    Args:
        expr: SQL expression to range-check.
        start: Lower bound.
        end: Upper bound.

    Raises:
        InvalidArgumentError: If either bound is ``None``.
    """
    if start is None:
        raise InvalidArgumentError("start must not be None!", argument="start")
    if end is None:
        raise InvalidArgumentError("end must not be None!", argument="end")
    return BetweenPredicate(expr=expr, start=start, end=end)


def in_(expr: str, values: Iterable[Any]) -> InPredicate:
    """``expr in (?, ?, ...)`` with one placeholder per value.

    Args:
        expr: SQL expression to test for inclusion.
        values: Values for the IN list.  Any iterable except a string; it is
            consumed once, here.

    Raises:
        InvalidArgumentError: If ``values`` is a string or not iterable.
    """
    if not _is_value_list(values):
        raise InvalidArgumentError(
            f"IN values must be a non-string iterable, got {type(values).__name__}.",
            argument="values",
        )
    return InPredicate(expr=expr, values=tuple(values))


def is_null(expr: str) -> NullCheckPredicate:
    return NullCheckPredicate(expr=expr)


def is_not_null(expr: str) -> NullCheckPredicate:
    return NullCheckPredicate(expr=expr, negated=True)


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


def not_(child: Predicate | dict) -> NotPredicate:
    """Invert ``child``: renders ``not (<child>)``."""
    return NotPredicate(child=to_predicate(child))


def and_(*predicates: Predicate | dict | Iterable[Predicate]) -> JunctionPredicate:
    """Join predicates with AND.

    Accepts either several predicates or a single iterable of them
    (list, tuple, generator, ...).
    """
    return _junction(Junction.AND, predicates)


def or_(*predicates: Predicate | dict | Iterable[Predicate]) -> JunctionPredicate:
    """Join predicates with OR.

    Accepts either several predicates or a single iterable of them
    (list, tuple, generator, ...).
    """
    return _junction(Junction.OR, predicates)


def _junction(joiner: Junction, predicates: tuple) -> JunctionPredicate:
    if len(predicates) == 1 and _is_predicate_iterable(predicates[0]):
        predicates = tuple(predicates[0])
    if not predicates:
        raise InvalidArgumentError(
            f"{joiner.value} requires at least one predicate.", argument="predicates"
        )
    return JunctionPredicate(
        joiner=joiner, children=tuple(to_predicate(p) for p in predicates)
    )


# ---------------------------------------------------------------------------
# Factory entry point
# ---------------------------------------------------------------------------


def predicate(op: LogicalOp | str, expr: str, *values: Any) -> Predicate:
    """Build a leaf predicate from a logical operation.

    Example::

        predicate(LogicalOp.IN, "name", ["Larry", "Curly", "Moe"])
        predicate("between", "Price", 10, 20)
        predicate(LogicalOp.IS_NULL, "manager_id")

    Raises:
        InvalidArgumentError: For an unsupported operation or the wrong
            number of values.
    """
    return PredicateFactory.create(op, expr, *values)


def _is_value_list(v: Any) -> bool:
    return isinstance(v, Iterable) and not isinstance(v, (str, bytes, bytearray, Mapping))


def _is_predicate_iterable(v: Any) -> bool:
    return isinstance(v, Iterable) and not isinstance(v, (*PREDICATE_TYPES, Mapping, str))


def _expect(op: LogicalOp, values: tuple[Any, ...], count: int) -> None:
    if len(values) != count:
        raise InvalidArgumentError(
            f"{op.value} expects {count} value(s), got {len(values)}.", argument="values"
        )


def _comparison_handler(op: LogicalOp):
    symbol = COMPARISON_SYMBOLS[op]

    def handler(expr: str, values: tuple[Any, ...]) -> Predicate:
        _expect(op, values, 1)
        return ComparisonPredicate(op=symbol, expr=expr, value=values[0])

    return handler


for _op in COMPARISON_SYMBOLS:
    PredicateFactory.register_handler(_op, _comparison_handler(_op))


@PredicateFactory.register(LogicalOp.IN)
def _in_handler(expr: str, values: tuple[Any, ...]) -> Predicate:
    if len(values) == 1 and _is_value_list(values[0]):
        return in_(expr, values[0])
    if 1 <= len(values) <= 2 and not any(_is_value_list(v) for v in values):
        return in_(expr, values)
    raise InvalidArgumentError(
        "IN expects a single list of values or one to two scalar values, "
        f"got {len(values)} argument(s).",
        argument="values",
    )


@PredicateFactory.register(LogicalOp.BETWEEN)
def _between_handler(expr: str, values: tuple[Any, ...]) -> Predicate:
    _expect(LogicalOp.BETWEEN, values, 2)
    return between(expr, values[0], values[1])


@PredicateFactory.register(LogicalOp.IS_NULL)
def _is_null_handler(expr: str, values: tuple[Any, ...]) -> Predicate:
    _expect(LogicalOp.IS_NULL, values, 0)
    return is_null(expr)


@PredicateFactory.register(LogicalOp.IS_NOT_NULL)
def _is_not_null_handler(expr: str, values: tuple[Any, ...]) -> Predicate:
    _expect(LogicalOp.IS_NOT_NULL, values, 0)
    return is_not_null(expr)
