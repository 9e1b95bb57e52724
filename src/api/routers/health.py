"""Health check endpoints."""
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.dependencies import get_storage
from services.storage import Storage

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    prompts: int
    categories: int


@router.get("/health", response_model=HealthResponse)
async def health_check(storage: Storage = Depends(get_storage)) -> HealthResponse:
    """Check application health and report record counts."""
    return HealthResponse(
        status="healthy",
        prompts=len(await storage.list_prompts()),
        categories=len(await storage.list_categories()),
    )
