"""Usage history endpoints."""
from fastapi import APIRouter, Depends, status

from api.dependencies import get_storage
from schemas.usage_history import (
    UsageHistoryCreate,
    UsageHistoryResponse,
    UsageStatsResponse,
)
from services import prompt_query
from services.storage import Storage

router = APIRouter(prefix="/api/usage-history", tags=["usage-history"])


@router.get("", response_model=list[UsageHistoryResponse])
async def list_usage_history(
    storage: Storage = Depends(get_storage),
) -> list[UsageHistoryResponse]:
    """List all usage events, newest first."""
    history = await storage.list_usage_history()
    return [UsageHistoryResponse.model_validate(u) for u in history]


@router.get("/stats", response_model=UsageStatsResponse)
async def get_usage_stats(storage: Storage = Depends(get_storage)) -> UsageStatsResponse:
    """Totals, distinct prompts and targets, and the most used target."""
    stats = prompt_query.usage_statistics(await storage.list_usage_history())
    return UsageStatsResponse.model_validate(stats)


@router.post("", response_model=UsageHistoryResponse, status_code=status.HTTP_201_CREATED)
async def record_usage(
    data: UsageHistoryCreate,
    storage: Storage = Depends(get_storage),
) -> UsageHistoryResponse:
    """
    Record that a prompt was used.

    Increments the prompt's usageCount and sets lastUsedAt. The event is
    recorded even when promptId matches no prompt; nothing else changes then.
    """
    usage = await storage.record_usage(data)
    return UsageHistoryResponse.model_validate(usage)
