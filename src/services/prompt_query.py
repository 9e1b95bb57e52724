"""
Derived read views over prompts and usage history.

Pure functions: callers pass a snapshot fetched from the store for each
request, nothing here is cached or mutated.
"""
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta

from models.category import Category
from models.prompt import Prompt
from models.usage_history import UsageHistory
from schemas.prompt import PromptSortKey

# Usage events within this window count extra toward a prompt's power score
RECENT_USAGE_WINDOW = timedelta(days=7)
RECENT_USAGE_WEIGHT = 2


def matches_query(prompt: Prompt, query: str) -> bool:
    """
    Check whether a prompt contains the query (case-insensitive substring).

    Matches on title, content, description, or any tag. An empty query
    matches nothing; callers that want "no filter" should skip the search.
    """
    if not query:
        return False
    needle = query.casefold()
    if needle in prompt.title.casefold() or needle in prompt.content.casefold():
        return True
    if prompt.description and needle in prompt.description.casefold():
        return True
    return any(needle in tag.casefold() for tag in prompt.tags)


def search_prompts(prompts: Iterable[Prompt], query: str) -> list[Prompt]:
    """Prompts matching the query, archived ones included, in input order."""
    return [p for p in prompts if matches_query(p, query)]


def count_prompts_in_category(prompts: Iterable[Prompt], category_id: str) -> int:
    """Number of non-archived prompts assigned to the category."""
    return sum(1 for p in prompts if p.category_id == category_id and not p.is_archived)


def count_prompts_by_category(
    prompts: Iterable[Prompt],
    categories: Iterable[Category],
) -> dict[str, int]:
    """
    Non-archived prompt counts for every category.

    Prompts whose category_id matches no category (uncategorized or dangling)
    are not counted anywhere.
    """
    prompts = list(prompts)
    return {
        category.id: count_prompts_in_category(prompts, category.id)
        for category in categories
    }


def favorite_prompts(prompts: Iterable[Prompt]) -> list[Prompt]:
    """Favorited prompts that are not archived."""
    return [p for p in prompts if p.is_favorite and not p.is_archived]


def recent_usage_counts(history: Iterable[UsageHistory], now: datetime) -> Counter[str]:
    """Usage events per prompt id within the trailing window ending at `now`."""
    cutoff = now - RECENT_USAGE_WINDOW
    return Counter(event.prompt_id for event in history if event.timestamp > cutoff)


def _score(prompt: Prompt, recent: Counter[str]) -> int:
    return prompt.usage_count + RECENT_USAGE_WEIGHT * recent[prompt.id]


def power_score(prompt: Prompt, history: Iterable[UsageHistory], now: datetime) -> int:
    """
    Ranking score for a prompt.

    Lifetime usage count plus double weight for each use in the last 7 days.
    """
    return _score(prompt, recent_usage_counts(history, now))


def power_scores(
    prompts: Iterable[Prompt],
    history: Iterable[UsageHistory],
    now: datetime,
) -> dict[str, int]:
    """Power score for each prompt, keyed by prompt id (history scanned once)."""
    recent = recent_usage_counts(history, now)
    return {p.id: _score(p, recent) for p in prompts}


def sort_prompts(
    prompts: Iterable[Prompt],
    sort_by: PromptSortKey,
    history: Iterable[UsageHistory] = (),
    now: datetime | None = None,
) -> list[Prompt]:
    """
    Sort prompts by a single key.

    - usage: lifetime usage count, highest first
    - power: power score, highest first (requires history and now)
    - recent: last updated, newest first
    - title: case-insensitive alphabetical
    """
    prompts = list(prompts)
    if sort_by == "usage":
        return sorted(prompts, key=lambda p: p.usage_count, reverse=True)
    if sort_by == "power":
        if now is None:
            raise ValueError("Sorting by power requires the current time")
        scores = power_scores(prompts, history, now)
        return sorted(prompts, key=lambda p: scores[p.id], reverse=True)
    if sort_by == "recent":
        return sorted(prompts, key=lambda p: p.updated_at, reverse=True)
    if sort_by == "title":
        return sorted(prompts, key=lambda p: p.title.casefold())
    raise ValueError(f"Unknown sort key: {sort_by}")


@dataclass
class UsageStats:
    """Aggregates shown on the usage history screen."""

    total_usages: int
    unique_prompts: int
    targets: list[str]
    most_used_target: str | None


def usage_statistics(history: list[UsageHistory]) -> UsageStats:
    """
    Summarize usage history (expected newest first).

    Ties for the most used target go to the target seen first in the given order.
    """
    target_counts = Counter(event.target for event in history if event.target)
    most_common = target_counts.most_common(1)
    return UsageStats(
        total_usages=len(history),
        unique_prompts=len({event.prompt_id for event in history}),
        targets=list(target_counts),
        most_used_target=most_common[0][0] if most_common else None,
    )
