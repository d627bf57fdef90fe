"""
Pydantic interop for valor.

Provides to_annotated() and to_pydantic() functions.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import AfterValidator, Field, create_model

from .core import to_validator
from .types import Ok


def to_annotated(validator: Any, type_hint: Any = Any) -> Any:
    """
    Wrap a validator as a Pydantic annotated type.

    The validator runs after Pydantic's own validation of `type_hint`.
    Ok(value) replaces the field value, so transforms apply; Error() is
    reported by Pydantic as a ValidationError.

    Usage:
        Port = to_annotated(try_map(int) & between(1, 65535))

        class Service(BaseModel):
            port: Port
    """
    v = to_validator(validator)

    def check(value: Any) -> Any:
        result = v(value)
        if isinstance(result, Ok):
            return result.value
        raise ValueError("Validation failed")

    return Annotated[type_hint, AfterValidator(check)]


def to_pydantic(name: str, fields: dict[str, Any]) -> type:
    """
    Compile a mapping of field validators to a Pydantic model.

    Missing fields reach their validator as None, so required(),
    optional() and default() decide how absence is handled.

    Args:
        name: Name of the generated model class
        fields: Field name -> validator

    Returns:
        A Pydantic BaseModel subclass

    Usage:
        User = to_pydantic("User", {
            "name": required(string()),
            "email": optional(string()),
            "age": default(integer(), 0),
        })
        user = User(name="Alice")
        user.age  # 0
    """
    model_fields: dict[str, Any] = {
        key: (to_annotated(v), Field(default=None, validate_default=True))
        for key, v in fields.items()
    }
    return create_model(name, **model_fields)
