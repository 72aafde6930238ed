"""Clause fragment value object.

A fragment is one already-rendered piece of SQL plus the separator placed
in front of it when it follows another fragment of the same section
(``" AND "``, ``" OR "``, ``" LEFT JOIN "`` ...).
"""
from __future__ import annotations

from dataclasses import dataclass

AND = " AND "
OR = " OR "

JOIN = " JOIN "
LEFT_JOIN = " LEFT JOIN "
RIGHT_JOIN = " RIGHT JOIN "
FULL_OUTER_JOIN = " FULL OUTER JOIN "


@dataclass(frozen=True)
class ClauseFragment:
    """Immutable rendered clause piece.

    Attributes:
        expression: The SQL text of this piece.
        separator: Text prepended when this piece is not the first of its
            section.
    """

    expression: str
    separator: str
