"""
Type definitions for valor.

Provides the two-variant Result type (Ok/Error) and type aliases.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_error(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Error:
    """
    Failure result.

    Carries nothing: every Error is equal to every other Error.
    """

    def is_ok(self) -> bool:
        return False

    def is_error(self) -> bool:
        return True


# Type aliases
Result = Union[Ok[Any], Error]
ValidateFn = Callable[[Any], Result]
