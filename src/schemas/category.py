"""Pydantic schemas for category endpoints."""
from datetime import datetime
from typing import Any

from pydantic import ValidationInfo, field_validator

from models.category import DEFAULT_CATEGORY_COLOR, DEFAULT_CATEGORY_ICON
from schemas.base import CamelModel
from schemas.validators import reject_null, validate_required_text


class CategoryCreate(CamelModel):
    """Schema for creating a new category."""

    name: str
    description: str | None = None
    icon: str = DEFAULT_CATEGORY_ICON
    color: str = DEFAULT_CATEGORY_COLOR
    parent_id: str | None = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        """Category name must not be blank."""
        return validate_required_text(v, "name")


class CategoryUpdate(CamelModel):
    """Schema for partially updating a category."""

    name: str | None = None
    description: str | None = None
    icon: str | None = None
    color: str | None = None
    parent_id: str | None = None

    @field_validator("name", "icon", "color")
    @classmethod
    def check_not_null(cls, v: Any, info: ValidationInfo) -> Any:
        """These fields can be omitted but not cleared."""
        return reject_null(v, info.field_name)

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        """Category name must not be blank when provided."""
        return validate_required_text(v, "name")


class CategoryResponse(CamelModel):
    """Schema for category responses."""

    id: str
    name: str
    description: str | None
    icon: str
    color: str
    parent_id: str | None
    created_at: datetime
