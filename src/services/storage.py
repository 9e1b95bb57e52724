"""
Abstract storage interface.

Routers depend only on this interface. MemoryStorage is the current
implementation; a durable (e.g. relational) implementation can be swapped in
without touching callers, provided record_usage stays a single transaction.
"""
from abc import ABC, abstractmethod

from models.app_settings import AppSettings
from models.category import Category
from models.prompt import Prompt
from models.usage_history import UsageHistory
from schemas.app_settings import SettingsUpdate
from schemas.category import CategoryCreate, CategoryUpdate
from schemas.prompt import PromptCreate, PromptUpdate
from schemas.usage_history import UsageHistoryCreate


class Storage(ABC):
    """
    Capability set for prompts, categories, usage history and settings.

    Conventions shared by all entity kinds:
    - get_* returns None when the id is absent.
    - update_* raises NotFoundError when the id is absent and merges only the
      fields present in the update payload.
    - delete_* returns False when the id is absent (idempotent, never raises).
    - Identifiers and timestamps are assigned by the store, never by callers.
    """

    # --- Prompts ---

    @abstractmethod
    async def list_prompts(self) -> list[Prompt]:
        """All prompts, most recently updated first."""
        ...

    @abstractmethod
    async def get_prompt(self, prompt_id: str) -> Prompt | None:
        """Get a prompt by id (archived prompts included)."""
        ...

    @abstractmethod
    async def create_prompt(self, data: PromptCreate) -> Prompt:
        """Create a prompt with usage_count=0 and last_used_at=None."""
        ...

    @abstractmethod
    async def update_prompt(self, prompt_id: str, data: PromptUpdate) -> Prompt:
        """Apply a partial update and refresh updated_at."""
        ...

    @abstractmethod
    async def delete_prompt(self, prompt_id: str) -> bool:
        """Permanently delete a prompt."""
        ...

    @abstractmethod
    async def search_prompts(self, query: str) -> list[Prompt]:
        """Case-insensitive substring search over title, content, description and tags."""
        ...

    # --- Categories ---

    @abstractmethod
    async def list_categories(self) -> list[Category]:
        """All categories, ordered by name."""
        ...

    @abstractmethod
    async def get_category(self, category_id: str) -> Category | None:
        """Get a category by id."""
        ...

    @abstractmethod
    async def create_category(self, data: CategoryCreate) -> Category:
        """Create a category."""
        ...

    @abstractmethod
    async def update_category(self, category_id: str, data: CategoryUpdate) -> Category:
        """Apply a partial update to a category."""
        ...

    @abstractmethod
    async def delete_category(self, category_id: str) -> bool:
        """Delete a category. Prompts referencing it are left untouched."""
        ...

    # --- Usage history ---

    @abstractmethod
    async def list_usage_history(self) -> list[UsageHistory]:
        """All usage events, newest first."""
        ...

    @abstractmethod
    async def record_usage(self, data: UsageHistoryCreate) -> UsageHistory:
        """
        Append a usage event and bump the referenced prompt's counter.

        The event is always stored. If the prompt exists, its usage_count is
        incremented and last_used_at set to the event timestamp as one atomic
        step; if it does not, no prompt is modified.
        """
        ...

    # --- Settings ---

    @abstractmethod
    async def get_settings(self) -> AppSettings:
        """Get the settings singleton."""
        ...

    @abstractmethod
    async def update_settings(self, data: SettingsUpdate) -> AppSettings:
        """Apply a partial update to the settings singleton."""
        ...
