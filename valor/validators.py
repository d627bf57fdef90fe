"""
Built-in validators for valor.

Provides factory functions that return V instances, composed only from
the public core algebra.
"""

from __future__ import annotations

from collections.abc import Sized
from enum import Enum
from typing import Any, Iterable

from .core import V, and_then, any_, invert, or_else, predicate, return_


def required(v: Any) -> V:
    """
    Value must not be None and must satisfy `v`.

    Usage:
        required(string())
        required(equals("a"))(None)    # Error()
    """
    return and_then(is_not_nil(), v)


def optional(v: Any) -> V:
    """
    Allow None, validate if present.

    Usage:
        optional(string())     # None or valid string
    """
    return or_else(is_nil(), v)


def default(v: Any, value: Any) -> V:
    """
    Replace None with `value`, validate anything else with `v`.

    Unlike optional(), None does not pass through as None.

    Usage:
        default(integer(), 0)(None)    # Ok(0)
        default(integer(), 0)(5)       # Ok(5)
    """
    return or_else(and_then(is_nil(), return_(value)), v)


# Equality


def equals(constant: Any) -> V:
    """Validate exact equality."""
    return predicate(lambda x: x == constant)


def not_equals(constant: Any) -> V:
    return invert(equals(constant))


def one_of(values: Iterable[Any]) -> V:
    """
    Validate value equals one of `values`.

    Usage:
        one_of(["active", "inactive", "pending"])

    Raises:
        ValueError: If `values` is empty
    """
    return any_([equals(v) for v in values])


def is_nil() -> V:
    return equals(None)


def is_not_nil() -> V:
    return not_equals(None)


# Categories


def boolean() -> V:
    return predicate(lambda x: isinstance(x, bool))


def atom() -> V:
    """
    Validate a symbolic constant: None, True/False or an Enum member.
    """
    return predicate(lambda x: x is None or isinstance(x, (bool, Enum)))


def integer() -> V:
    """Validate an int. Booleans are rejected."""
    return predicate(lambda x: isinstance(x, int) and not isinstance(x, bool))


def float_() -> V:
    return predicate(lambda x: isinstance(x, float))


def number() -> V:
    """Validate an int or a float. Booleans are rejected."""
    return predicate(
        lambda x: isinstance(x, (int, float)) and not isinstance(x, bool)
    )


def string() -> V:
    return predicate(lambda x: isinstance(x, str))


# Ordering


def less_than(constant: Any) -> V:
    """Validate less than."""
    return predicate(lambda x: x < constant)


def less_or_equal(constant: Any) -> V:
    """Validate less than or equal."""
    return or_else(less_than(constant), equals(constant))


def greater_than(constant: Any) -> V:
    """Validate greater than."""
    return predicate(lambda x: x > constant)


def greater_or_equal(constant: Any) -> V:
    """Validate greater than or equal."""
    return or_else(greater_than(constant), equals(constant))


def between(lower: Any, upper: Any) -> V:
    """
    Validate value is between bounds (inclusive).

    Usage:
        between(0, 10)
        between("a", "z")
    """
    return and_then(greater_or_equal(lower), less_or_equal(upper))


def positive() -> V:
    return greater_than(0)


def negative() -> V:
    return less_than(0)


def non_negative() -> V:
    return invert(negative())


def non_positive() -> V:
    return invert(positive())


# Size


def _size(value: Any) -> int:
    """
    Count characters of a string, or elements of any other collection.

    Raises:
        TypeError: If `value` has no length. Iterators are rejected rather
            than consumed, since counting them would exhaust the value
            handed to the next validator.
    """
    if isinstance(value, str):
        # code points, not bytes
        return len(value)
    if isinstance(value, Sized):
        return len(value)
    raise TypeError(f"Cannot take the size of {type(value).__name__}")


def min_size(n: int) -> V:
    """
    Validate minimum size.

    Usage:
        min_size(3)("abc")        # Ok("abc")
        min_size(3)([1])          # Error()
    """
    return predicate(lambda x: _size(x) >= n)


def max_size(n: int) -> V:
    """Validate maximum size."""
    return predicate(lambda x: _size(x) <= n)


def non_empty() -> V:
    return min_size(1)


def size_between(lower: int, upper: int) -> V:
    """
    Validate size is within range (inclusive).

    Usage:
        size_between(1, 10)      # 1 to 10 characters or items
    """
    return and_then(min_size(lower), max_size(upper))
