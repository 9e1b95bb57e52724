"""Pydantic schemas for AI prompt generation."""
from pydantic import field_validator

from schemas.base import CamelModel


class GeneratePromptRequest(CamelModel):
    """Request body for /api/generate-prompt."""

    user_input: str

    @field_validator("user_input")
    @classmethod
    def check_not_blank(cls, v: str) -> str:
        """The request text must contain non-whitespace characters."""
        if not v.strip():
            raise ValueError("userInput is required and must be a non-empty string")
        return v


class GeneratePromptResponse(CamelModel):
    """Generated prompt together with the input it was generated from."""

    generated_prompt: str
    original_input: str
