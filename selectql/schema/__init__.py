"""selectQL schema models: logical operators and typed predicates."""
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
    "Junction",
    "LogicalOp",
    "BetweenPredicate",
    "ComparisonPredicate",
    "InPredicate",
    "JunctionPredicate",
    "NotPredicate",
    "NullCheckPredicate",
    "Predicate",
    "to_predicate",
]
