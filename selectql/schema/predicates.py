"""Typed predicate models for WHERE / HAVING conditions.

Every predicate is an immutable Pydantic model tagged by a ``kind`` field,
so a tree of predicates is a plain value: it can be shared, reused across
builders, compared for equality and round-tripped through JSON.  Each variant
implements the same two-step protocol:

``contribute(sink)``
    Append the bound values this predicate needs to ``sink`` (normally a
    :class:`~selectql.compile.builder.SelectBuilder`) in exactly the order
    their ``?`` placeholders appear in the rendered text.

``to_sql()``
    Return the SQL text.  The text depends only on the model's fields, so it
    is fixed at construction and identical on every call.

Usage::

    from selectql.schema.predicates import to_predicate

    pred = to_predicate({"kind": "between", "expr": "Price", "start": 10, "end": 20})
    assert pred.to_sql() == "Price BETWEEN ? AND ?"
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)

from selectql.errors import InvalidArgumentError
from selectql.schema.expressions import COMPARISON_OPERATORS, PLACEHOLDER, Junction

if TYPE_CHECKING:
    from selectql.compile.base import ParameterSink

logger = logging.getLogger(__name__)

_FROZEN = ConfigDict(extra="forbid", frozen=True)


# ---------------------------------------------------------------------------
# Leaf predicates
# ---------------------------------------------------------------------------


class ComparisonPredicate(BaseModel):
    """``<expr> <op> ?`` for ``=``, ``<>``, ``>``, ``>=``, ``<``, ``<=``, ``like``."""

    model_config = _FROZEN

    kind: Literal["comparison"] = "comparison"
    op: str
    expr: str
    value: Any

    @field_validator("op")
    @classmethod
    def _known_operator(cls, v: str) -> str:
        if v not in COMPARISON_OPERATORS:
            raise ValueError(
                f"Unsupported comparison operator '{v}'. "
                f"Expected one of {sorted(COMPARISON_OPERATORS)}."
            )
        return v

    def contribute(self, sink: ParameterSink) -> None:
        sink.parameters(self.value)

    def to_sql(self) -> str:
        return f"{self.expr} {self.op} {PLACEHOLDER}"


class BetweenPredicate(BaseModel):
    """``<expr> BETWEEN ? AND ?``.  Both bounds are required and non-null.

    Building the model directly reports a null bound as a pydantic
    ``ValidationError``.  :func:`selectql.predicates.between` and
    :func:`to_predicate` are the public ways in; both raise
    :class:`~selectql.errors.InvalidArgumentError` instead.
    """

    model_config = _FROZEN

    kind: Literal["between"] = "between"
    expr: str
    start: Any
    end: Any

    @model_validator(mode="after")
    def _bounds_present(self) -> BetweenPredicate:
        if self.start is None:
            raise ValueError("start must not be None")
        if self.end is None:
            raise ValueError("end must not be None")
        return self

    def contribute(self, sink: ParameterSink) -> None:
        sink.parameters(self.start)
        sink.parameters(self.end)

    def to_sql(self) -> str:
        return f"{self.expr} BETWEEN {PLACEHOLDER} AND {PLACEHOLDER}"


class InPredicate(BaseModel):
    """``<expr> in (?, ?, ...)`` with one placeholder per value.

    ``values`` is stored as a tuple, so the placeholder count is fixed when
    the model is built.  An empty tuple renders ``<expr> in ()``; the
    attaching builder decides whether that is acceptable through
    :attr:`~selectql.config.SelectConfig.empty_in`.
    """

    model_config = _FROZEN

    kind: Literal["in"] = "in"
    expr: str
    values: tuple[Any, ...] = ()

    def contribute(self, sink: ParameterSink) -> None:
        if not self.values:
            if sink.config.empty_in == "reject":
                raise InvalidArgumentError(
                    f"IN predicate on '{self.expr}' has no values.", argument="values"
                )
            logger.warning("IN predicate on %r has no values; rendering 'in ()'", self.expr)
        for value in self.values:
            sink.parameters(value)

    def to_sql(self) -> str:
        placeholders = ", ".join(PLACEHOLDER for _ in self.values)
        return f"{self.expr} in ({placeholders})"


class NullCheckPredicate(BaseModel):
    """``<expr> is null`` or, when ``negated``, ``<expr> is not null``."""

    model_config = _FROZEN

    kind: Literal["null_check"] = "null_check"
    expr: str
    negated: bool = False

    def contribute(self, sink: ParameterSink) -> None:
        # Nothing to bind.
        return None

    def to_sql(self) -> str:
        if self.negated:
            return f"{self.expr} is not null"
        return f"{self.expr} is null"


# ---------------------------------------------------------------------------
# Composite predicates
# ---------------------------------------------------------------------------


class NotPredicate(BaseModel):
    """``not (<child>)``."""

    model_config = _FROZEN

    kind: Literal["not"] = "not"
    child: Predicate

    def contribute(self, sink: ParameterSink) -> None:
        self.child.contribute(sink)

    def to_sql(self) -> str:
        return f"not ({self.child.to_sql()})"


class JunctionPredicate(BaseModel):
    """``(<a> AND <b> ...)`` or ``(<a> OR <b> ...)``.

    The whole group is always parenthesised, including a group holding a
    single child.
    """

    model_config = _FROZEN

    kind: Literal["junction"] = "junction"
    joiner: Junction
    children: tuple[Predicate, ...] = Field(min_length=1)

    def contribute(self, sink: ParameterSink) -> None:
        for child in self.children:
            child.contribute(sink)

    def to_sql(self) -> str:
        separator = f" {self.joiner.value} "
        return "(" + separator.join(child.to_sql() for child in self.children) + ")"


# ---------------------------------------------------------------------------
# Discriminated union
# ---------------------------------------------------------------------------

_KINDS: frozenset[str] = frozenset(
    {"comparison", "between", "in", "null_check", "not", "junction"}
)


def _predicate_discriminator(v: Any) -> str | None:
    """Return the tag for the Pydantic discriminated union."""
    if isinstance(v, dict):
        kind = v.get("kind")
    else:
        kind = getattr(v, "kind", None)
    return kind if kind in _KINDS else None


Predicate = Annotated[
    Annotated[ComparisonPredicate, Tag("comparison")]
    | Annotated[BetweenPredicate, Tag("between")]
    | Annotated[InPredicate, Tag("in")]
    | Annotated[NullCheckPredicate, Tag("null_check")]
    | Annotated[NotPredicate, Tag("not")]
    | Annotated[JunctionPredicate, Tag("junction")],
    Discriminator(_predicate_discriminator),
]

# Resolve forward references in recursive types.
NotPredicate.model_rebuild()
JunctionPredicate.model_rebuild()

#: Concrete predicate classes, for ``isinstance`` checks.
PREDICATE_TYPES: tuple[type[BaseModel], ...] = (
    ComparisonPredicate,
    BetweenPredicate,
    InPredicate,
    NullCheckPredicate,
    NotPredicate,
    JunctionPredicate,
)

#: Parse a raw dict into a typed Predicate at any call site.
PREDICATE_ADAPTER: TypeAdapter[Predicate] = TypeAdapter(Predicate)


def to_predicate(v: dict | Predicate) -> Predicate:
    """Convert a raw predicate dict to a typed ``Predicate``, or return as-is.

    Args:
        v: A raw ``{"kind": ..., ...}`` dict (e.g. decoded JSON), or an
           already-typed predicate instance.

    Returns:
        A typed ``Predicate`` instance.

    Raises:
        InvalidArgumentError: If ``v`` does not describe a valid predicate.
    """
    if isinstance(v, PREDICATE_TYPES):
        return v
    try:
        return PREDICATE_ADAPTER.validate_python(v)
    except ValidationError as exc:
        raise InvalidArgumentError(f"Invalid predicate: {exc}", argument="predicate") from exc
