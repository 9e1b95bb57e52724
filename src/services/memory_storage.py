"""In-memory implementation of the storage interface."""
import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime

from models.app_settings import AppSettings
from models.base import generate_id, utc_now
from models.category import Category
from models.prompt import Prompt
from models.usage_history import UsageHistory
from schemas.app_settings import SettingsUpdate
from schemas.category import CategoryCreate, CategoryUpdate
from schemas.prompt import PromptCreate, PromptUpdate
from schemas.usage_history import UsageHistoryCreate
from services import prompt_query
from services.exceptions import NotFoundError
from services.storage import Storage

logger = logging.getLogger(__name__)

# (name, description, icon, color)
DEFAULT_CATEGORIES: list[tuple[str, str, str, str]] = [
    (
        "Coding & Development",
        "Spells for software creation and debugging",
        "fas fa-code",
        "#00FFFF",
    ),
    (
        "Creative Writing",
        "Incantations for literary creation",
        "fas fa-feather-alt",
        "#FF6B9D",
    ),
    (
        "Research & Analysis",
        "Divination tools for knowledge gathering",
        "fas fa-search",
        "#8B5CF6",
    ),
    (
        "Business & Marketing",
        "Commercial alchemy and persuasion magic",
        "fas fa-chart-line",
        "#22C55E",
    ),
    (
        "Education & Learning",
        "Wisdom transmission and knowledge spells",
        "fas fa-graduation-cap",
        "#FFB347",
    ),
]


class MemoryStorage(Storage):
    """
    Storage backed by dicts keyed by record id.

    State lives for the lifetime of the instance. None of the methods await,
    so on a single event loop each operation (record_usage included) runs to
    completion before another request is served.

    Args:
        seed_defaults: Populate the default categories on construction.
        clock: Returns the current time; injectable for tests.
    """

    def __init__(
        self,
        seed_defaults: bool = True,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._clock = clock
        self._prompts: dict[str, Prompt] = {}
        self._categories: dict[str, Category] = {}
        self._usage_history: dict[str, UsageHistory] = {}
        self._settings = AppSettings(updated_at=self._clock())
        if seed_defaults:
            self._seed_default_categories()

    def _seed_default_categories(self) -> None:
        now = self._clock()
        for name, description, icon, color in DEFAULT_CATEGORIES:
            category = Category(
                id=generate_id(),
                name=name,
                description=description,
                icon=icon,
                color=color,
                created_at=now,
            )
            self._categories[category.id] = category
        logger.info("Seeded %d default categories", len(DEFAULT_CATEGORIES))

    # --- Prompts ---

    async def list_prompts(self) -> list[Prompt]:
        """All prompts, most recently updated first."""
        return sorted(self._prompts.values(), key=lambda p: p.updated_at, reverse=True)

    async def get_prompt(self, prompt_id: str) -> Prompt | None:
        """Get a prompt by id (archived prompts included)."""
        return self._prompts.get(prompt_id)

    async def create_prompt(self, data: PromptCreate) -> Prompt:
        """Create a prompt with usage_count=0 and last_used_at=None."""
        now = self._clock()
        prompt = Prompt(
            id=generate_id(),
            title=data.title,
            content=data.content,
            description=data.description,
            category_id=data.category_id,
            tags=list(data.tags),
            is_favorite=data.is_favorite,
            is_archived=data.is_archived,
            usage_count=0,
            created_at=now,
            updated_at=now,
            last_used_at=None,
        )
        self._prompts[prompt.id] = prompt
        return prompt

    async def update_prompt(self, prompt_id: str, data: PromptUpdate) -> Prompt:
        """Apply a partial update and refresh updated_at."""
        existing = self._prompts.get(prompt_id)
        if existing is None:
            raise NotFoundError("Prompt", prompt_id)
        changes = data.model_dump(exclude_unset=True)
        updated = replace(existing, **changes, updated_at=self._clock())
        self._prompts[prompt_id] = updated
        return updated

    async def delete_prompt(self, prompt_id: str) -> bool:
        """Permanently delete a prompt."""
        return self._prompts.pop(prompt_id, None) is not None

    async def search_prompts(self, query: str) -> list[Prompt]:
        """Case-insensitive substring search over title, content, description and tags."""
        return prompt_query.search_prompts(await self.list_prompts(), query)

    # --- Categories ---

    async def list_categories(self) -> list[Category]:
        """All categories, ordered by name (case-insensitive)."""
        return sorted(self._categories.values(), key=lambda c: (c.name.casefold(), c.name))

    async def get_category(self, category_id: str) -> Category | None:
        """Get a category by id."""
        return self._categories.get(category_id)

    async def create_category(self, data: CategoryCreate) -> Category:
        """Create a category. Duplicate names are allowed."""
        category = Category(
            id=generate_id(),
            name=data.name,
            description=data.description,
            icon=data.icon,
            color=data.color,
            parent_id=data.parent_id,
            created_at=self._clock(),
        )
        self._categories[category.id] = category
        return category

    async def update_category(self, category_id: str, data: CategoryUpdate) -> Category:
        """Apply a partial update to a category."""
        existing = self._categories.get(category_id)
        if existing is None:
            raise NotFoundError("Category", category_id)
        updated = replace(existing, **data.model_dump(exclude_unset=True))
        self._categories[category_id] = updated
        return updated

    async def delete_category(self, category_id: str) -> bool:
        """Delete a category. Prompts referencing it are left untouched."""
        return self._categories.pop(category_id, None) is not None

    # --- Usage history ---

    async def list_usage_history(self) -> list[UsageHistory]:
        """All usage events, newest first."""
        return sorted(self._usage_history.values(), key=lambda u: u.timestamp, reverse=True)

    async def record_usage(self, data: UsageHistoryCreate) -> UsageHistory:
        """Append a usage event and bump the referenced prompt's counter."""
        now = self._clock()
        usage = UsageHistory(
            id=generate_id(),
            prompt_id=data.prompt_id,
            target=data.target,
            timestamp=now,
            metadata=dict(data.metadata),
        )
        self._usage_history[usage.id] = usage

        prompt = self._prompts.get(data.prompt_id)
        if prompt is None:
            logger.info("Recorded usage for unknown prompt %s", data.prompt_id)
            return usage
        self._prompts[prompt.id] = replace(
            prompt,
            usage_count=prompt.usage_count + 1,
            last_used_at=now,
            updated_at=now,
        )
        return usage

    # --- Settings ---

    async def get_settings(self) -> AppSettings:
        """Get the settings singleton."""
        return self._settings

    async def update_settings(self, data: SettingsUpdate) -> AppSettings:
        """Apply a partial update to the settings singleton."""
        self._settings = replace(
            self._settings,
            **data.model_dump(exclude_unset=True),
            updated_at=self._clock(),
        )
        return self._settings
