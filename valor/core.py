"""
Core validator algebra for valor.

Provides the V node, the primitive constructors and the composition
operators. A validator is any callable taking a value and returning
Ok(value) or Error(); every combinator here returns a new V.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, Iterable

from .types import Error, Ok, Result, ValidateFn


@dataclass(frozen=True, slots=True)
class V:
    """
    Immutable validator node.

    Wraps a validate function. Composition operators build new nodes that
    close over their operands; a node is never changed after construction.

    Usage:
        integer() & positive()      # and_then
        integer() | string()        # or_else
        ~equals(None)               # invert
    """

    fn: ValidateFn

    def __call__(self, value: Any) -> Result:
        return self.fn(value)

    def __and__(self, other: Any) -> V:
        """
        Chain with AND logic: other runs on this node's output.

        Usage:
            int & positive()
            try_map(int) & between(0, 10)
        """
        return and_then(self, other)

    def __rand__(self, other: Any) -> V:
        """Support `int & positive()` where the type comes first."""
        return and_then(other, self)

    def __or__(self, other: Any) -> V:
        """
        Combine with OR logic: first success wins.

        Usage:
            int | str
            integer() | string()
        """
        return or_else(self, other)

    def __ror__(self, other: Any) -> V:
        """Support `int | string()` where the type comes first."""
        return or_else(other, self)

    def __invert__(self) -> V:
        return invert(self)


def to_validator(v: Any) -> V:
    """
    Coerce a value to a validator.

    Conversion rules:
        V -> pass through
        type -> V with isinstance check
        Callable -> V wrapping the callable, which must return Ok/Error

    Raises:
        TypeError: If `v` is not convertible, or when a wrapped callable
            returns something other than Ok/Error (e.g. a bare bool
            predicate; wrap those with predicate())
    """
    if isinstance(v, V):
        return v

    if isinstance(v, type):

        def type_check(x: Any, t: type = v) -> Result:
            return Ok(x) if isinstance(x, t) else Error()

        return V(fn=type_check)

    if callable(v):

        def checked(x: Any, fn: ValidateFn = v) -> Result:
            result = fn(x)
            if not isinstance(result, (Ok, Error)):
                raise TypeError(
                    f"Validator returned {type(result).__name__}, expected Ok or Error"
                )
            return result

        return V(fn=checked)

    raise TypeError(f"Cannot convert {type(v).__name__} to validator")


def _require_callable(fn: Any, name: str) -> None:
    if not callable(fn):
        raise TypeError(f"{name}() expects a callable, got {type(fn).__name__}")


# Results


def pass_(value: Any) -> Ok[Any]:
    """Build a success result: pass_(1) -> Ok(1)."""
    return Ok(value)


def fail() -> Error:
    """Build a failure result."""
    return Error()


# Primitive validators


def success() -> V:
    """Validator that always succeeds with its input unchanged."""
    return V(fn=pass_)


def failure() -> V:
    """Validator that always fails."""

    def check(_: Any) -> Result:
        return fail()

    return V(fn=check)


def return_(constant: Any) -> V:
    """
    Validator that ignores its input and succeeds with `constant`.

    Usage:
        return_(0)(None)     # Ok(0)
        return_(0)("a")      # Ok(0)
    """

    def check(_: Any) -> Result:
        return pass_(constant)

    return V(fn=check)


def predicate(fn: Callable[[Any], Any]) -> V:
    """
    Create validator from a predicate function.

    Passes the input through unchanged when `fn(value)` is truthy.
    Exceptions raised by `fn` are not caught.

    Usage:
        predicate(lambda x: x > 0)
        predicate(str.isalpha)
    """
    _require_callable(fn, "predicate")

    def check(value: Any) -> Result:
        return pass_(value) if fn(value) else fail()

    return V(fn=check)


def map_(fn: Callable[[Any], Any]) -> V:
    """
    Validator that always succeeds with `fn(value)`.

    Use for transforms that cannot fail: an exception raised by `fn`
    propagates out of the validator call. See try_map() otherwise.

    Usage:
        map_(str.lower)("ABC")   # Ok("abc")
    """
    _require_callable(fn, "map_")

    def check(value: Any) -> Result:
        return pass_(fn(value))

    return V(fn=check)


def try_map(fn: Callable[[Any], Any]) -> V:
    """
    Like map_(), but an exception raised by `fn` becomes Error().

    Never raises to its caller; use map_() to see the exception.

    Usage:
        try_map(int)("1")    # Ok(1)
        try_map(int)("x")    # Error()
    """
    _require_callable(fn, "try_map")

    def check(value: Any) -> Result:
        try:
            return pass_(fn(value))
        except Exception:
            return fail()

    return V(fn=check)


# Composition


def and_then(left: Any, right: Any) -> V:
    """
    Sequential AND: run `right` on the output of `left`.

    Short-circuits to Error() without running `right` when `left` fails.

    Usage:
        and_then(try_map(int), positive())
    """
    left_v = to_validator(left)
    right_v = to_validator(right)

    def check(value: Any) -> Result:
        result = left_v(value)
        if isinstance(result, Ok):
            return right_v(result.value)
        return fail()

    return V(fn=check)


def or_else(left: Any, right: Any) -> V:
    """
    Alternation: the first of `left`, `right` to succeed wins.

    `right` only runs when `left` fails, and receives the original input.
    """
    left_v = to_validator(left)
    right_v = to_validator(right)

    def check(value: Any) -> Result:
        result = left_v(value)
        if isinstance(result, Ok):
            return result
        return right_v(value)

    return V(fn=check)


def invert(validator: Any) -> V:
    """
    Negate the outcome of `validator`.

    On failure, succeeds with the original input; whatever `validator`
    would have produced on success is discarded. invert(invert(v)) keeps
    v's status but not its transform.
    """
    inner = to_validator(validator)

    def check(value: Any) -> Result:
        return fail() if is_valid(inner, value) else pass_(value)

    return V(fn=check)


def all_(validators: Iterable[Any]) -> V:
    """
    All must pass, in order, each receiving the previous output.

    all_([a, b, c]) == and_then(and_then(a, b), c)

    Raises:
        ValueError: If `validators` is empty
    """
    items = list(validators)
    if len(items) == 0:
        raise ValueError("all_() requires at least one validator")
    return reduce(and_then, items[1:], to_validator(items[0]))


def any_(validators: Iterable[Any]) -> V:
    """
    First validator (in order) to pass wins; Error() if none does.

    any_([a, b, c]) == or_else(or_else(a, b), c)

    Raises:
        ValueError: If `validators` is empty
    """
    items = list(validators)
    if len(items) == 0:
        raise ValueError("any_() requires at least one validator")
    return reduce(or_else, items[1:], to_validator(items[0]))


# Entry points


def validate(validator: Any, value: Any) -> Result:
    """
    Run a validator against a value.

    Returns:
        Ok(value) if validation passes, possibly transformed
        Error() if validation fails
    """
    return to_validator(validator)(value)


def is_valid(validator: Any, value: Any) -> bool:
    """Return True if `validator` accepts `value`."""
    return isinstance(validate(validator, value), Ok)
