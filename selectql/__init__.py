"""selectQL – fluent, parameterized SQL SELECT assembly.

Compose conditions as values, attach them to a builder, get SQL text with
``?`` placeholders and the matching list of bind parameters.

Public API
----------
``SelectBuilder`` / ``SubSelectBuilder``
    Accumulate columns, sources, joins, conditions, grouping, ordering,
    paging and unions; render with ``str()`` / ``render()`` or ``build()``.

Predicate constructors
    ``eq``, ``neq``, ``gt``, ``gte``, ``lt``, ``lte``, ``like``, ``between``,
    ``in_``, ``is_null``, ``is_not_null``, ``not_``, ``and_``, ``or_`` and
    the factory entry point ``predicate(op, expr, *values)``.

Re-exported types
-----------------
``SelectConfig``, ``CompiledSelect``, ``LogicalOp``, the predicate models,
and all error classes.

Example::

    import sqlite3
    from selectql import SelectBuilder, in_

    sb = SelectBuilder().column("*").from_("Emp").where(
        in_("name", ["Larry", "Curly", "Moe"])
    )
    str(sb)              # 'SELECT * FROM Emp WHERE name in (?, ?, ?)'
    sb.get_parameters()  # ['Larry', 'Curly', 'Moe']

    conn = sqlite3.connect("app.db")
    compiled = sb.build()
    conn.execute(compiled.sql, compiled.params)

Extensibility
-------------
New factory operations can be registered via::

    from selectql.compile.registry import PredicateFactory

    @PredicateFactory.register("STARTS_WITH")
    def _starts_with(expr, values):
        ...

After registration ``predicate("STARTS_WITH", ...)`` picks it up.
"""

from __future__ import annotations

from selectql.compile.base import CompiledSelect, ParameterCollector, ParameterSink
from selectql.compile.builder import SelectBuilder, SubSelectBuilder
from selectql.compile.fragments import ClauseFragment
from selectql.compile.registry import PredicateFactory
from selectql.config import SelectConfig
from selectql.errors import ConfigError, InvalidArgumentError, SelectQLError
from selectql.predicates import (
    and_,
    between,
    eq,
    gt,
    gte,
    in_,
    is_not_null,
    is_null,
    like,
    lt,
    lte,
    neq,
    not_,
    or_,
    predicate,
)
from selectql.schema.expressions import Junction, LogicalOp
from selectql.schema.predicates import (
    BetweenPredicate,
    ComparisonPredicate,
    InPredicate,
    JunctionPredicate,
    NotPredicate,
    NullCheckPredicate,
    Predicate,
    to_predicate,
)

__all__ = [
    # Builders
    "SelectBuilder",
    "SubSelectBuilder",
    "CompiledSelect",
    "ClauseFragment",
    # Configuration
    "SelectConfig",
    # Predicate constructors
    "eq",
    "neq",
    "gt",
    "gte",
    "lt",
    "lte",
    "like",
    "between",
    "in_",
    "is_null",
    "is_not_null",
    "not_",
    "and_",
    "or_",
    "predicate",
    # Predicate models
    "Predicate",
    "ComparisonPredicate",
    "BetweenPredicate",
    "InPredicate",
    "NullCheckPredicate",
    "NotPredicate",
    "JunctionPredicate",
    "to_predicate",
    "LogicalOp",
    "Junction",
    # Contribution protocol
    "ParameterSink",
    "ParameterCollector",
    "PredicateFactory",
    # Errors
    "SelectQLError",
    "InvalidArgumentError",
    "ConfigError",
]
