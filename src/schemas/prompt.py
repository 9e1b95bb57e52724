"""Pydantic schemas for prompt endpoints."""
from datetime import datetime
from typing import Any, Literal

from pydantic import Field, ValidationInfo, field_validator

from schemas.base import CamelModel
from schemas.validators import normalize_tags, reject_null, validate_required_text

PromptSortKey = Literal["usage", "power", "recent", "title"]


class PromptCreate(CamelModel):
    """
    Schema for creating a new prompt.

    Server-owned fields (id, timestamps, usageCount, lastUsedAt) are not accepted;
    unknown keys are ignored.
    """

    title: str
    content: str
    description: str | None = None
    category_id: str | None = None
    tags: list[str] = Field(default_factory=list)
    is_favorite: bool = False
    is_archived: bool = False

    @field_validator("title", "content")
    @classmethod
    def check_not_blank(cls, v: str, info: ValidationInfo) -> str:
        """Title and content must contain non-whitespace text."""
        return validate_required_text(v, info.field_name)

    @field_validator("tags", mode="before")
    @classmethod
    def default_null_tags(cls, v: Any) -> Any:
        """Treat an explicit null tag list as empty."""
        return [] if v is None else v

    @field_validator("tags")
    @classmethod
    def clean_tags(cls, v: list[str]) -> list[str]:
        """Trim, drop blanks, and de-duplicate tags."""
        return normalize_tags(v)


class PromptUpdate(CamelModel):
    """
    Schema for partially updating a prompt.

    Only fields present in the request body are applied; omitted fields keep
    their stored values. description and categoryId may be set to null to clear them.
    """

    title: str | None = None
    content: str | None = None
    description: str | None = None
    category_id: str | None = None
    tags: list[str] | None = None
    is_favorite: bool | None = None
    is_archived: bool | None = None

    @field_validator("title", "content", "tags", "is_favorite", "is_archived")
    @classmethod
    def check_not_null(cls, v: Any, info: ValidationInfo) -> Any:
        """These fields can be omitted but not cleared."""
        return reject_null(v, info.field_name)

    @field_validator("title", "content")
    @classmethod
    def check_not_blank(cls, v: str, info: ValidationInfo) -> str:
        """Title and content must contain non-whitespace text when provided."""
        return validate_required_text(v, info.field_name)

    @field_validator("tags")
    @classmethod
    def clean_tags(cls, v: list[str]) -> list[str]:
        """Trim, drop blanks, and de-duplicate tags."""
        return normalize_tags(v)


class PromptResponse(CamelModel):
    """Schema for prompt responses."""

    id: str
    title: str
    content: str
    description: str | None
    category_id: str | None
    tags: list[str]
    is_favorite: bool
    is_archived: bool
    usage_count: int
    created_at: datetime
    updated_at: datetime
    last_used_at: datetime | None


class RankedPromptResponse(PromptResponse):
    """Prompt with its derived power score (never stored)."""

    power_score: int
