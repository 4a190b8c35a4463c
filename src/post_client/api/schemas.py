"""
Schema Module

Pydantic models describing the data sent to and received from the API,
plus the validator seam the client uses to check untyped data against them.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Optional, Protocol

import pydantic
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Post(BaseModel):
    """Input for creating a post."""

    model_config = ConfigDict(strict=True)

    user_id: int = Field(alias="userId", ge=1, description="Author user id")
    title: str = Field(min_length=5, description="Post title")
    body: str = Field(min_length=10, description="Post body")


class PostDTO(BaseModel):
    """A post as returned by the service."""

    model_config = ConfigDict(strict=True)

    user_id: int = Field(alias="userId", description="Author user id")
    id: int = Field(description="Post id")
    title: str = Field(description="Post title")


class UserDTO(BaseModel):
    """A user as returned by the service."""

    model_config = ConfigDict(strict=True)

    id: int = Field(description="User id")
    name: str = Field(description="Display name")


# The service answers `null` for unknown user ids
NullableUserDTO = Optional[UserDTO]


@dataclass(frozen=True)
class Validation:
    """Outcome of validating a value against a schema."""
    success: bool
    data: Any = None
    diagnostics: Optional[Exception] = None


class SchemaValidator(Protocol):
    """Anything that can check a value against a schema."""

    def validate(self, value: Any, schema: Any) -> Validation:
        ...


@lru_cache(maxsize=None)
def _adapter(schema: Any) -> TypeAdapter:
    return TypeAdapter(schema)


class PydanticValidator:
    """
    Default validator backed by pydantic.

    Never raises for invalid data; the pydantic error is returned as
    ``diagnostics`` instead.
    """

    def validate(self, value: Any, schema: Any) -> Validation:
        try:
            data = _adapter(schema).validate_python(value)
        except pydantic.ValidationError as e:
            return Validation(success=False, diagnostics=e)
        return Validation(success=True, data=data)
