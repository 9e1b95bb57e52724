"""
Shared validation functions for Pydantic schemas.

Used by the prompt, category, usage history and settings schemas.
"""
from typing import Any


def validate_required_text(value: str, field_name: str) -> str:
    """
    Ensure a required text field is not blank.

    The value is returned unchanged (whitespace inside prompt content is meaningful).

    Raises:
        ValueError: If the value is empty or whitespace only.
    """
    if not value.strip():
        raise ValueError(f"{field_name} cannot be empty")
    return value


def reject_null(value: Any, field_name: str) -> Any:
    """
    Reject an explicit null for a field that is optional but not nullable.

    Partial-update schemas default such fields to None to mean "not provided";
    validators only run on values the client actually sent, so a None reaching
    this function was sent explicitly.
    """
    if value is None:
        raise ValueError(f"{field_name} cannot be null")
    return value


def normalize_tags(tags: list[str]) -> list[str]:
    """
    Normalize a list of tags.

    Tags are trimmed, blank tags are dropped and duplicates removed, keeping
    the first occurrence. Order is otherwise preserved.
    """
    normalized = []
    seen: set[str] = set()
    for tag in tags:
        trimmed = tag.strip()
        if not trimmed:
            continue
        if trimmed not in seen:
            seen.add(trimmed)
            normalized.append(trimmed)
    return normalized
