"""
Tests for valor.schema pydantic interop.
"""

import pytest
from pydantic import BaseModel, ValidationError

from valor import (
    between,
    default,
    integer,
    map_,
    optional,
    required,
    string,
    to_annotated,
    to_pydantic,
    try_map,
)


class TestToAnnotated:
    def test_field_validation(self):
        class Service(BaseModel):
            port: to_annotated(try_map(int) & between(1, 65535))

        assert Service(port="8080").port == 8080
        with pytest.raises(ValidationError):
            Service(port="x")
        with pytest.raises(ValidationError):
            Service(port=70000)

    def test_transform_applies(self):
        class Tag(BaseModel):
            name: to_annotated(string() & map_(str.lower), str)

        assert Tag(name="ABC").name == "abc"

    def test_type_hint_runs_first(self):
        class Counter(BaseModel):
            count: to_annotated(between(0, 10), int)

        assert Counter(count="3").count == 3
        with pytest.raises(ValidationError):
            Counter(count="a")


class TestToPydantic:
    def test_simple_model(self):
        User = to_pydantic(
            "User",
            {
                "name": required(string()),
                "age": integer(),
            },
        )
        user = User(name="Alice", age=30)
        assert user.name == "Alice"
        assert user.age == 30

    def test_optional_fields(self):
        User = to_pydantic(
            "User",
            {
                "name": required(string()),
                "email": optional(string()),
            },
        )
        user = User(name="Alice")
        assert user.name == "Alice"
        assert user.email is None

    def test_default_fields(self):
        User = to_pydantic("User", {"age": default(integer(), 0)})
        assert User().age == 0
        assert User(age=5).age == 5

    def test_pydantic_validation(self):
        User = to_pydantic("User", {"name": required(string())})

        with pytest.raises(ValidationError):
            User()  # Missing required field
        with pytest.raises(ValidationError):
            User(name=1)

    def test_bare_validator_rejects_missing(self):
        User = to_pydantic("User", {"age": integer()})
        with pytest.raises(ValidationError):
            User()
