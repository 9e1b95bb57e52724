"""Pydantic schemas for usage history endpoints."""
from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from schemas.base import CamelModel
from schemas.validators import validate_required_text


class UsageHistoryCreate(CamelModel):
    """
    Schema for recording a prompt usage.

    The timestamp is assigned by the server. promptId is not required to
    reference an existing prompt.
    """

    prompt_id: str
    target: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("prompt_id")
    @classmethod
    def check_prompt_id(cls, v: str) -> str:
        """promptId must not be blank."""
        return validate_required_text(v, "promptId")

    @field_validator("metadata", mode="before")
    @classmethod
    def default_null_metadata(cls, v: Any) -> Any:
        """Treat explicit null metadata as an empty map."""
        return {} if v is None else v


class UsageHistoryResponse(CamelModel):
    """Schema for usage history responses."""

    id: str
    prompt_id: str
    target: str | None
    timestamp: datetime
    metadata: dict[str, Any]


class UsageStatsResponse(CamelModel):
    """Aggregate statistics over the usage history."""

    total_usages: int
    unique_prompts: int
    targets: list[str]  # Distinct targets, most recent first
    most_used_target: str | None
