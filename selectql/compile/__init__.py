"""selectQL compilation layer: fluent builder → SQL text + bind parameters."""
from selectql.compile.base import CompiledSelect, ParameterCollector, ParameterSink
from selectql.compile.builder import SelectBuilder, SubSelectBuilder
from selectql.compile.fragments import ClauseFragment
from selectql.compile.registry import PredicateFactory

__all__ = [
    "CompiledSelect",
    "ParameterCollector",
    "ParameterSink",
    "SelectBuilder",
    "SubSelectBuilder",
    "ClauseFragment",
    "PredicateFactory",
]
