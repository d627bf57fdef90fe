"""
Valor - composable value validators.

Usage:
    from valor import integer, positive, required, try_map, validate

    age = required(try_map(int) & integer() & positive())

    validate(age, "42")    # Ok(42)
    validate(age, "-1")    # Error()
    validate(age, None)    # Error()
"""

from .core import (
    V,
    all_,
    and_then,
    any_,
    fail,
    failure,
    invert,
    is_valid,
    map_,
    or_else,
    pass_,
    predicate,
    return_,
    success,
    to_validator,
    try_map,
    validate,
)
from .schema import to_annotated, to_pydantic
from .types import Error, Ok, Result
from .validators import (
    atom,
    between,
    boolean,
    default,
    equals,
    float_,
    greater_or_equal,
    greater_than,
    integer,
    is_nil,
    is_not_nil,
    less_or_equal,
    less_than,
    max_size,
    min_size,
    negative,
    non_empty,
    non_negative,
    non_positive,
    not_equals,
    number,
    one_of,
    optional,
    positive,
    required,
    size_between,
    string,
)

__all__ = [
    # Result types
    "Ok",
    "Error",
    "Result",
    # Core
    "V",
    "to_validator",
    "pass_",
    "fail",
    "success",
    "failure",
    "return_",
    "predicate",
    "map_",
    "try_map",
    "and_then",
    "or_else",
    "invert",
    "all_",
    "any_",
    "validate",
    "is_valid",
    # Validators
    "required",
    "optional",
    "default",
    "equals",
    "not_equals",
    "one_of",
    "is_nil",
    "is_not_nil",
    "boolean",
    "atom",
    "integer",
    "float_",
    "number",
    "string",
    "less_than",
    "less_or_equal",
    "greater_than",
    "greater_or_equal",
    "between",
    "positive",
    "negative",
    "non_negative",
    "non_positive",
    "min_size",
    "max_size",
    "non_empty",
    "size_between",
    # Pydantic
    "to_annotated",
    "to_pydantic",
]
