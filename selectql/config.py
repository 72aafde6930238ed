"""Pydantic settings model controlling builder behaviour.

A ``SelectConfig`` is handed to :class:`~selectql.compile.builder.SelectBuilder`
at construction and is visible to every predicate attached to it (through
the builder's ``config`` attribute)::

    from selectql import SelectBuilder, SelectConfig, in_

    strict = SelectConfig(empty_in="reject")
    SelectBuilder("Emp", config=strict).where(in_("name", []))  # raises

Settings
--------
``empty_in``
    What to do with an ``IN`` predicate whose value list is empty.
    ``"render"`` (default) emits ``expr in ()`` and logs a warning;
    ``"reject"`` raises :class:`~selectql.errors.InvalidArgumentError` when the
    predicate is attached.
``log_predicates``
    Log every attached fragment and its parameter count at DEBUG level.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, ValidationError

from selectql.errors import ConfigError

#: Accepted ``empty_in`` policies.
EmptyInPolicy = Literal["render", "reject"]


class SelectConfig(BaseModel):
    """Immutable builder settings.

    Attributes:
        empty_in: Handling of ``IN`` predicates with no values.
        log_predicates: Emit a DEBUG record per attached predicate.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    empty_in: EmptyInPolicy = "render"
    log_predicates: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SelectConfig:
        """Build a config from a plain mapping (e.g. a parsed settings file).

        Args:
            data: Setting names mapped to values.

        Returns:
            A validated ``SelectConfig``.

        Raises:
            ConfigError: If ``data`` contains unknown keys or invalid values.
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise ConfigError(f"Invalid selectQL config: {exc}", errors=exc.errors()) from exc


#: Shared default settings.
DEFAULT_CONFIG = SelectConfig()
