"""Compilation abstractions: the ParameterSink protocol and CompiledSelect.

Predicates never hold a reference to the statement they are attached to.
Instead they are handed a ``ParameterSink`` during attachment and push their
bound values into it; ``SelectBuilder`` is the production sink and
``ParameterCollector`` is a free-standing one for inspecting a predicate on
its own.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from selectql.config import DEFAULT_CONFIG, SelectConfig


@runtime_checkable
class ParameterSink(Protocol):
    """Receives bound values from a predicate, in placeholder order."""

    config: SelectConfig

    def parameters(self, value: Any) -> Any:
        """Append one bound value.

        Args:
            value: The value for the next ``?`` placeholder.
        """
        ...


@dataclass
class ParameterCollector:
    """A ``ParameterSink`` that simply records what it is given.

    Example::

        collector = ParameterCollector()
        pred.contribute(collector)
        assert pred.to_sql().count("?") == len(collector.values)
    """

    values: list[Any] = field(default_factory=list)
    config: SelectConfig = DEFAULT_CONFIG

    def parameters(self, value: Any) -> ParameterCollector:
        self.values.append(value)
        return self


@dataclass
class CompiledSelect:
    """A rendered statement ready to hand to a DB-API ``qmark`` cursor.

    Attributes:
        sql: The SELECT text with ``?`` placeholders.
        params: One value per placeholder.
    """

    sql: str
    params: list[Any]

    def as_tuple(self) -> tuple[str, tuple[Any, ...]]:
        """Return ``(sql, params)`` for ``cursor.execute(*compiled.as_tuple())``."""
        return self.sql, tuple(self.params)
