"""Category record - a named grouping for prompts."""
from dataclasses import dataclass
from datetime import datetime

DEFAULT_CATEGORY_ICON = "fas fa-folder"
DEFAULT_CATEGORY_COLOR = "#8B5CF6"


@dataclass
class Category:
    """A prompt category. parent_id allows one level of nesting."""

    id: str
    name: str
    created_at: datetime
    description: str | None = None
    icon: str = DEFAULT_CATEGORY_ICON
    color: str = DEFAULT_CATEGORY_COLOR
    parent_id: str | None = None
