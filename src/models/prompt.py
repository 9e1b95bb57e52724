"""Prompt record - a reusable text template ("spell")."""
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Prompt:
    """
    A stored prompt.

    usage_count and last_used_at are owned by the store: they change only when
    a usage event is recorded against the prompt.
    """

    id: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    category_id: str | None = None  # Not checked against existing categories
    tags: list[str] = field(default_factory=list)
    is_favorite: bool = False
    is_archived: bool = False
    usage_count: int = 0
    last_used_at: datetime | None = None
