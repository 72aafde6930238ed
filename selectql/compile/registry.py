"""Predicate factory registry (Open/Closed Principle).

``PredicateFactory`` maps a logical operation name to a handler that builds
the matching predicate variant.  The built-in operations (``LogicalOp``) are
registered by :mod:`selectql.predicates`; callers can add their own without
touching the factory.

Usage::

    from selectql.compile.registry import PredicateFactory
    from selectql.schema.predicates import ComparisonPredicate

    @PredicateFactory.register("STARTS_WITH")
    def _starts_with(expr, values):
        (prefix,) = values
        return ComparisonPredicate(op="like", expr=expr, value=f"{prefix}%")

    pred = PredicateFactory.create("STARTS_WITH", "name", "Bo")
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, ClassVar

from selectql.errors import InvalidArgumentError
from selectql.schema.expressions import LogicalOp
from selectql.schema.predicates import Predicate

logger = logging.getLogger(__name__)

#: Type alias for a predicate construction handler.
#: ``(expr, values) -> Predicate``
PredicateHandler = Callable[[str, tuple[Any, ...]], Predicate]


def _key(op: LogicalOp | str) -> str:
    if isinstance(op, LogicalOp):
        return op.value
    if isinstance(op, str):
        return op.upper()
    raise InvalidArgumentError(
        f"Logical operation must be a LogicalOp or str, got {type(op).__name__}.",
        argument="op",
    )


class PredicateFactory:
    """Registry mapping logical operation names to predicate handlers.

    Example::

        pred = PredicateFactory.create(LogicalOp.BETWEEN, "Price", 10, 20)
        assert pred.to_sql() == "Price BETWEEN ? AND ?"
    """

    _handlers: ClassVar[dict[str, PredicateHandler]] = {}

    @classmethod
    def register(cls, name: LogicalOp | str) -> Callable[[PredicateHandler], PredicateHandler]:
        """Decorator that registers a handler under ``name``.

        Args:
            name: The operation (e.g. ``LogicalOp.IN`` or ``"STARTS_WITH"``).

        Returns:
            A decorator that registers and returns the handler.
        """

        def decorator(handler: PredicateHandler) -> PredicateHandler:
            cls._handlers[_key(name)] = handler
            return handler

        return decorator

    @classmethod
    def register_handler(cls, name: LogicalOp | str, handler: PredicateHandler) -> None:
        """Register a handler without using the decorator form."""
        cls._handlers[_key(name)] = handler

    @classmethod
    def unregister(cls, name: LogicalOp | str) -> None:
        """Remove the handler for ``name`` if one is registered."""
        cls._handlers.pop(_key(name), None)

    @classmethod
    def create(cls, op: LogicalOp | str, expr: str, *values: Any) -> Predicate:
        """Build the predicate registered for ``op``.

        Args:
            op: The logical operation.
            expr: SQL expression the predicate applies to.
            *values: Operand values; how many are accepted depends on ``op``.

        Returns:
            A typed predicate.

        Raises:
            InvalidArgumentError: If ``op`` is not registered or the handler
                rejects ``values``.
        """
        key = _key(op)
        handler = cls._handlers.get(key)
        if handler is None:
            raise InvalidArgumentError(
                f"Unsupported logical operation: '{op}'. "
                f"Registered operations: {cls.registered_operations()}.",
                argument="op",
            )
        logger.debug("Building %s predicate on %r with %d value(s)", key, expr, len(values))
        return handler(expr, values)

    @classmethod
    def get(cls, name: LogicalOp | str) -> PredicateHandler | None:
        """Return the handler for ``name``, or ``None`` if not registered."""
        return cls._handlers.get(_key(name))

    @classmethod
    def registered_operations(cls) -> list[str]:
        """Return the sorted list of registered operation names."""
        return sorted(cls._handlers)
