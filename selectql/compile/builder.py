"""Fluent SELECT statement builder.

``SelectBuilder`` accumulates clause pieces in ordered lists and renders them
in a fixed section order::

    SELECT [distinct] <columns | *>
      FROM <tables>
      <joins>
      WHERE <conditions>
      GROUP BY <expressions>
      HAVING <conditions>
      ORDER BY <expressions>
      LIMIT <n>[, <offset>]
      UNION <branch> ...

Parameter sharing
-----------------
A builder owns a single ordered parameter list.  Attaching a predicate with
``where`` / ``having`` runs two steps: the predicate first contributes its
bound values to that list (through :meth:`SelectBuilder.parameters`), then
renders its text, which is stored as an immutable
:class:`~selectql.compile.fragments.ClauseFragment`.  Rendering the builder
never touches the parameter list, so it can be repeated freely and
interleaved with further mutation.

Thread safety
-------------
Builders are plain mutable containers.  To fork a statement across threads,
:meth:`SelectBuilder.clone` it and give each thread its own copy.
"""

from __future__ import annotations

import logging
from typing import Any, Union

from selectql.compile.base import CompiledSelect
from selectql.compile.clause_builders import (
    build_fragment_clause,
    build_limit_clause,
    build_list_clause,
    build_select_clause,
    build_union_clause,
)
from selectql.compile.fragments import (
    AND,
    FULL_OUTER_JOIN,
    JOIN,
    LEFT_JOIN,
    OR,
    RIGHT_JOIN,
    ClauseFragment,
)
from selectql.config import DEFAULT_CONFIG, SelectConfig
from selectql.schema.predicates import Predicate, to_predicate

logger = logging.getLogger(__name__)

# Sections a bound value can belong to, in the order their text is rendered.
# Values passed straight to ``parameters()`` count as column/source text.
_TEXT = "text"
_WHERE = "where"
_HAVING = "having"
_SECTION_ORDER = {_TEXT: 0, _WHERE: 1, _HAVING: 2}

#: A column entry: raw SQL text or a nested sub-select.
Column = Union[str, "SubSelectBuilder"]


class SelectBuilder:
    """Builds a parameterized SELECT statement.

    Every mutator returns the builder itself so calls can be chained::

        sb = (
            SelectBuilder()
            .column("a", "b")
            .from_("Foo")
            .where(gt("a", 10))
            .order_by("1")
        )
        str(sb)              # 'SELECT a, b FROM Foo WHERE a > ? ORDER BY 1'
        sb.get_parameters()  # [10]

    Args:
        table: Optional first FROM source.
        config: Builder settings; defaults to ``SelectConfig()``.
    """

    def __init__(self, table: str | None = None, *, config: SelectConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._distinct = False
        self._columns: list[Column] = []
        self._tables: list[str] = []
        self._joins: list[ClauseFragment] = []
        self._wheres: list[ClauseFragment] = []
        self._group_bys: list[str] = []
        self._havings: list[ClauseFragment] = []
        self._unions: list[SelectBuilder] = []
        self._order_bys: list[str] = []
        self._limit = 0
        self._offset = 0
        self._parameters: list[Any] = []
        self._parameter_sections: list[str] = []
        self._section = _TEXT
        if table is not None:
            self._tables.append(table)

    # ------------------------------------------------------------------
    # Columns
    # ------------------------------------------------------------------

    def column(self, *names: Column | bool, group_by: bool = False) -> SelectBuilder:
        """Add one or more columns.

        Args:
            *names: Column expressions or :class:`SubSelectBuilder` instances.
                ``column("Country", True)`` is accepted as shorthand for
                ``column("Country", group_by=True)``.
            group_by: Also append each text column to GROUP BY.
        """
        if names and isinstance(names[-1], bool):
            *names, group_by = names
        for name in names:
            self._columns.append(name)
            if group_by and isinstance(name, str):
                self._group_bys.append(name)
        return self

    add_column = column

    def distinct(self) -> SelectBuilder:
        self._distinct = True
        return self

    # ------------------------------------------------------------------
    # Sources
    # ------------------------------------------------------------------

    def from_(self, table: str) -> SelectBuilder:
        """Add a FROM source; repeated calls are comma-joined."""
        self._tables.append(table)
        return self

    def join(self, join: str) -> SelectBuilder:
        self._joins.append(ClauseFragment(join, JOIN))
        return self

    def left_join(self, join: str) -> SelectBuilder:
        self._joins.append(ClauseFragment(join, LEFT_JOIN))
        return self

    def right_join(self, join: str) -> SelectBuilder:
        self._joins.append(ClauseFragment(join, RIGHT_JOIN))
        return self

    def full_outer_join(self, join: str) -> SelectBuilder:
        self._joins.append(ClauseFragment(join, FULL_OUTER_JOIN))
        return self

    # ------------------------------------------------------------------
    # Conditions
    # ------------------------------------------------------------------

    def where(self, predicate: Predicate | dict) -> SelectBuilder:
        """Alias for :meth:`and_where`."""
        return self.and_where(predicate)

    def and_where(self, predicate: Predicate | dict) -> SelectBuilder:
        self._wheres.append(self._attach(predicate, AND, _WHERE))
        return self

    def or_where(self, predicate: Predicate | dict) -> SelectBuilder:
        self._wheres.append(self._attach(predicate, OR, _WHERE))
        return self

    def having(self, predicate: Predicate | dict) -> SelectBuilder:
        """Alias for :meth:`and_having`."""
        return self.and_having(predicate)

    def and_having(self, predicate: Predicate | dict) -> SelectBuilder:
        self._havings.append(self._attach(predicate, AND, _HAVING))
        return self

    def or_having(self, predicate: Predicate | dict) -> SelectBuilder:
        self._havings.append(self._attach(predicate, OR, _HAVING))
        return self

    def parameters(self, value: Any) -> SelectBuilder:
        """Append one bound value to the shared parameter list.

        This is the only way values enter the list; predicates call it while
        being attached.
        """
        self._parameters.append(value)
        self._parameter_sections.append(self._section)
        return self

    def get_parameters(self) -> list[Any]:
        """Return the bound values in the order they were contributed."""
        return list(self._parameters)

    def _attach(self, predicate: Predicate | dict, separator: str, section: str) -> ClauseFragment:
        """Run the contribute-then-render protocol for one predicate.

        Contributed values are tagged with ``section`` so :meth:`build` can
        put them in text order.  If contribution fails part way, values it
        already appended are removed before the error propagates.
        """
        pred = to_predicate(predicate)
        mark = len(self._parameters)
        self._section = section
        try:
            pred.contribute(self)
        except Exception:
            del self._parameters[mark:]
            del self._parameter_sections[mark:]
            raise
        finally:
            self._section = _TEXT
        fragment = ClauseFragment(pred.to_sql(), separator)
        if self.config.log_predicates:
            logger.debug(
                "Attached %r (%d parameter(s))",
                fragment.expression,
                len(self._parameters) - mark,
            )
        return fragment

    # ------------------------------------------------------------------
    # Grouping, ordering, paging
    # ------------------------------------------------------------------

    def group_by(self, expr: str) -> SelectBuilder:
        self._group_bys.append(expr)
        return self

    def order_by(self, expr: str, ascending: bool | None = None) -> SelectBuilder:
        """Add an ORDER BY item.

        Args:
            expr: Expression to sort by, used verbatim.
            ascending: ``True`` appends ``ASC``, ``False`` appends ``DESC``,
                ``None`` leaves ``expr`` as given.
        """
        if ascending is None:
            self._order_bys.append(expr)
        elif ascending:
            self._order_bys.append(f"{expr} ASC")
        else:
            self._order_bys.append(f"{expr} DESC")
        return self

    def limit(self, limit: int, offset: int = 0) -> SelectBuilder:
        """Set LIMIT and OFFSET, replacing any earlier values.

        The offset is only rendered when ``limit`` is positive.
        """
        self._limit = limit
        self._offset = offset
        return self

    # ------------------------------------------------------------------
    # Unions
    # ------------------------------------------------------------------

    def union(self, union_builder: SelectBuilder) -> SelectBuilder:
        """Add a branch whose text is appended as ``UNION <branch>``.

        The branch must select the same columns as this builder and must not
        use ORDER BY or LIMIT itself; neither is checked.
        """
        self._unions.append(union_builder)
        return self

    def get_unions(self) -> list[SelectBuilder]:
        return list(self._unions)

    # ------------------------------------------------------------------
    # Copying
    # ------------------------------------------------------------------

    def clone(self) -> SelectBuilder:
        """Return an independent copy of this builder.

        Sub-select columns and union branches are cloned recursively; every
        other list holds immutable items and is copied shallowly.  Parameters
        are copied into a new list.
        """
        twin = self._blank()
        twin._distinct = self._distinct
        twin._columns = [
            column.clone() if isinstance(column, SubSelectBuilder) else column
            for column in self._columns
        ]
        twin._tables = list(self._tables)
        twin._joins = list(self._joins)
        twin._wheres = list(self._wheres)
        twin._group_bys = list(self._group_bys)
        twin._havings = list(self._havings)
        twin._unions = [union.clone() for union in self._unions]
        twin._order_bys = list(self._order_bys)
        twin._limit = self._limit
        twin._offset = self._offset
        twin._parameters = list(self._parameters)
        twin._parameter_sections = list(self._parameter_sections)
        logger.debug("Cloned %s with %d parameter(s)", type(self).__name__, len(self._parameters))
        return twin

    def __copy__(self) -> SelectBuilder:
        return self.clone()

    def _blank(self) -> SelectBuilder:
        return SelectBuilder(config=self.config)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> str:
        """Render the statement.  Pure: calling it never changes the builder."""
        return "".join(
            (
                build_select_clause(self._columns, self._distinct),
                build_list_clause(self._tables, " FROM "),
                build_fragment_clause(self._joins),
                build_fragment_clause(self._wheres, " WHERE "),
                build_list_clause(self._group_bys, " GROUP BY "),
                build_fragment_clause(self._havings, " HAVING "),
                build_list_clause(self._order_bys, " ORDER BY "),
                build_limit_clause(self._limit, self._offset),
                build_union_clause(self._unions),
            )
        )

    def build(self) -> CompiledSelect:
        """Render the statement together with every value it needs bound.

        Parameters follow the order of their placeholders in the text: each
        sub-select column's parameters (in column order), values passed
        directly to :meth:`parameters`, WHERE values, HAVING values, then
        each union branch's parameters.  Within a section attachment order
        is kept, so HAVING attached before WHERE still binds correctly.
        """
        params: list[Any] = []
        for column in self._columns:
            if isinstance(column, SubSelectBuilder):
                params.extend(column.build().params)
        ordered = sorted(
            zip(self._parameter_sections, self._parameters),
            key=lambda pair: _SECTION_ORDER[pair[0]],
        )
        params.extend(value for _, value in ordered)
        for union in self._unions:
            params.extend(union.build().params)
        return CompiledSelect(sql=self.render(), params=params)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.render()!r})"


class SubSelectBuilder(SelectBuilder):
    """A SELECT usable as a column expression: ``(<select>) as <alias>``.

    Args:
        alias: Name the sub-select's value is exposed under.
        config: Builder settings; defaults to ``SelectConfig()``.
    """

    def __init__(self, alias: str, *, config: SelectConfig | None = None) -> None:
        super().__init__(config=config)
        self.alias = alias

    def _blank(self) -> SubSelectBuilder:
        return SubSelectBuilder(self.alias, config=self.config)

    def render(self) -> str:
        return f"({super().render()}) as {self.alias}"
