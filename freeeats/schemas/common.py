"""
Base schema classes with common fields and configurations.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

__all__ = [
    "BaseSchema",
    "BaseCreateSchema",
    "BaseUpdateSchema",
    "BaseResponseSchema",
    "SuccessResponse",
]


class BaseSchema(BaseModel):
    """
    Base schema with common Pydantic configuration.

    Fields are declared in snake_case and exchanged in camelCase, the
    field names the web client already uses.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
        use_enum_values=False,
        str_strip_whitespace=True,
        validate_assignment=True,
    )


class BaseCreateSchema(BaseSchema):
    """Base schema for create operations."""
    pass


class BaseUpdateSchema(BaseSchema):
    """
    Base schema for partial updates.

    Subclasses declare every field Optional; services read
    ``model_dump(exclude_unset=True)`` so that omitted fields stay untouched
    while an explicit null clears a value.
    """
    pass


class BaseResponseSchema(BaseSchema):
    """Base schema for persisted entities."""

    id: str = Field(..., description="Unique identifier")
    creation_time: int = Field(..., description="Creation time (epoch ms)")


class SuccessResponse(BaseSchema):
    success: bool = True
