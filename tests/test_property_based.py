"""Property-based tests for the valor combinator algebra."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from valor import (
    Ok,
    all_,
    and_then,
    any_,
    equals,
    failure,
    integer,
    invert,
    is_nil,
    is_valid,
    map_,
    non_empty,
    or_else,
    positive,
    return_,
    string,
    success,
    try_map,
    validate,
)

# Inputs that every validator in VALIDATORS accepts without raising
values = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.text(max_size=10),
    st.lists(st.integers(), max_size=5),
)

VALIDATORS = [
    success(),
    failure(),
    return_("c"),
    equals(1),
    is_nil(),
    integer(),
    string(),
    integer() & positive(),
    string() & non_empty(),
    map_(repr),
    try_map(int),
    integer() | string(),
    ~string(),
]

validators = st.sampled_from(VALIDATORS)


def exploding(_):
    raise AssertionError("should not be evaluated")


@given(validators, values)
def test_is_valid_matches_validate(v, x):
    assert is_valid(v, x) == isinstance(validate(v, x), Ok)


@given(validators, values)
def test_and_then_success_identity(v, x):
    assert validate(and_then(success(), v), x) == validate(v, x)


@given(validators, values)
def test_or_else_failure_identity(v, x):
    assert validate(or_else(failure(), v), x) == validate(v, x)


@given(values)
def test_and_then_failure_short_circuits(x):
    assert not is_valid(and_then(failure(), exploding), x)


@given(values)
def test_or_else_success_short_circuits(x):
    assert validate(or_else(success(), exploding), x) == Ok(x)


@given(validators, values)
def test_single_element_folds(v, x):
    assert validate(all_([v]), x) == validate(v, x)
    assert validate(any_([v]), x) == validate(v, x)


@given(validators, values)
def test_double_negation_preserves_status(v, x):
    assert is_valid(invert(invert(v)), x) == is_valid(v, x)


@given(validators, values)
def test_invert_keeps_input(v, x):
    result = validate(invert(v), x)
    if isinstance(result, Ok):
        assert result.value == x


def parse_fraction(x):
    return 1 // int(x)


@given(values)
def test_try_map_never_raises(x):
    validate(try_map(parse_fraction), x)


@given(values)
def test_map_raises_exactly_when_fn_raises(x):
    try:
        expected = parse_fraction(x)
    except Exception as e:
        with pytest.raises(type(e)):
            validate(map_(parse_fraction), x)
    else:
        assert validate(map_(parse_fraction), x) == Ok(expected)
