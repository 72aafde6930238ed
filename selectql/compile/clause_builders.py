"""Clause-level SQL renderers.

Each function renders exactly one section of a SELECT statement from the
builder's accumulated state and returns ``""`` when the section is empty, so
:meth:`~selectql.compile.builder.SelectBuilder.render` can concatenate them
unconditionally in the fixed section order.

Functions
---------
build_select_clause    ``SELECT [distinct] <columns | *>``
build_list_clause      ``FROM …`` / ``GROUP BY …`` / ``ORDER BY …``
build_fragment_clause  ``WHERE …`` / ``HAVING …`` / joins
build_limit_clause     ``LIMIT n[, offset]``
build_union_clause     ``UNION <branch> UNION <branch> …``
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence

from selectql.compile.fragments import ClauseFragment


def build_select_clause(columns: Sequence[object], distinct: bool) -> str:
    """``SELECT`` keyword, optional ``distinct`` and the column list.

    Columns are rendered with ``str()`` so sub-select builders render
    themselves.  No columns means ``*``.
    """
    prefix = "SELECT distinct " if distinct else "SELECT "
    if not columns:
        return prefix + "*"
    return prefix + ", ".join(str(column) for column in columns)


def build_list_clause(items: Sequence[str], init: str, sep: str = ", ") -> str:
    """``init`` followed by ``items`` joined with ``sep``."""
    if not items:
        return ""
    return init + sep.join(items)


def build_fragment_clause(fragments: Sequence[ClauseFragment], init: str | None = None) -> str:
    """Render fragments, each after the first preceded by its own separator.

    Args:
        fragments: The section's fragments in attachment order.
        init: Section-leading text.  ``None`` uses the first fragment's own
            separator, which is how the join section is introduced.
    """
    if not fragments:
        return ""
    lead = fragments[0].separator if init is None else init
    parts = [lead, fragments[0].expression]
    for fragment in fragments[1:]:
        parts.append(fragment.separator)
        parts.append(fragment.expression)
    return "".join(parts)


def build_limit_clause(limit: int, offset: int) -> str:
    """``LIMIT n`` plus ``, offset`` when both are positive."""
    if limit <= 0:
        return ""
    if offset > 0:
        return f" LIMIT {limit}, {offset}"
    return f" LIMIT {limit}"


def build_union_clause(unions: Iterable[object]) -> str:
    return "".join(f" UNION {union}" for union in unions)
