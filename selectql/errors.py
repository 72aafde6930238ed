"""Custom exception hierarchy for selectQL.

All public errors inherit from SelectQLError so callers can catch the base
class for any selectQL-specific failure.
"""
from __future__ import annotations


class SelectQLError(Exception):
    """Base exception for all selectQL errors."""


class InvalidArgumentError(SelectQLError, ValueError):
    """Raised when a predicate or builder call receives an unusable argument.

    Covers unsupported factory operations, wrong operand counts, BETWEEN
    with a missing bound, empty AND/OR groups and malformed predicate dicts.
    These are precondition violations: the builder being populated should
    be discarded, not repaired.

    Args:
        message: Human-readable description.
        argument: Name of the offending argument, when there is one.
    """

    def __init__(self, message: str, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument


class ConfigError(SelectQLError):
    """Raised when a SelectConfig cannot be built from the supplied data.

    Args:
        message: Human-readable description.
        errors: Structured error list as reported by pydantic.
    """

    def __init__(self, message: str, errors: list[dict] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []
