"""Prompts CRUD, search, and ranking endpoints."""
from fastapi import APIRouter, Depends, HTTPException, Query, status

from api.dependencies import get_storage
from models.base import utc_now
from schemas.prompt import (
    PromptCreate,
    PromptResponse,
    PromptSortKey,
    PromptUpdate,
    RankedPromptResponse,
)
from services import prompt_query
from services.exceptions import NotFoundError
from services.storage import Storage

router = APIRouter(prefix="/api/prompts", tags=["prompts"])


@router.get("", response_model=list[PromptResponse])
async def list_prompts(storage: Storage = Depends(get_storage)) -> list[PromptResponse]:
    """
    List all prompts, most recently updated first.

    Archived prompts are included; clients filter them out of default views.
    """
    prompts = await storage.list_prompts()
    return [PromptResponse.model_validate(p) for p in prompts]


@router.get("/search", response_model=list[PromptResponse])
async def search_prompts(
    q: str | None = Query(
        default=None,
        description="Case-insensitive text matched against title, content, description and tags",
    ),
    storage: Storage = Depends(get_storage),
) -> list[PromptResponse]:
    """Search prompts (archived included). Returns 400 if `q` is missing or empty."""
    if not q:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Query parameter 'q' is required",
        )
    prompts = await storage.search_prompts(q)
    return [PromptResponse.model_validate(p) for p in prompts]


@router.get("/favorites", response_model=list[RankedPromptResponse])
async def list_favorites(
    sort_by: PromptSortKey = Query(
        default="usage",
        alias="sortBy",
        description="usage, power, recent, or title",
    ),
    storage: Storage = Depends(get_storage),
) -> list[RankedPromptResponse]:
    """
    List favorite, non-archived prompts with their power score.

    Power score = usage count + 2 x uses in the last 7 days.
    """
    prompts = prompt_query.favorite_prompts(await storage.list_prompts())
    history = await storage.list_usage_history()
    now = utc_now()
    scores = prompt_query.power_scores(prompts, history, now)
    ranked = prompt_query.sort_prompts(prompts, sort_by, history, now)
    return [
        RankedPromptResponse(
            **PromptResponse.model_validate(p).model_dump(),
            power_score=scores[p.id],
        )
        for p in ranked
    ]


@router.get("/{prompt_id}", response_model=PromptResponse)
async def get_prompt(
    prompt_id: str,
    storage: Storage = Depends(get_storage),
) -> PromptResponse:
    """Get a prompt by id, archived or not."""
    prompt = await storage.get_prompt(prompt_id)
    if prompt is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Prompt not found")
    return PromptResponse.model_validate(prompt)


@router.post("", response_model=PromptResponse, status_code=status.HTTP_201_CREATED)
async def create_prompt(
    data: PromptCreate,
    storage: Storage = Depends(get_storage),
) -> PromptResponse:
    """Create a new prompt."""
    prompt = await storage.create_prompt(data)
    return PromptResponse.model_validate(prompt)


@router.patch("/{prompt_id}", response_model=PromptResponse)
async def update_prompt(
    prompt_id: str,
    data: PromptUpdate,
    storage: Storage = Depends(get_storage),
) -> PromptResponse:
    """Update a prompt. Only fields present in the body are changed."""
    try:
        prompt = await storage.update_prompt(prompt_id, data)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return PromptResponse.model_validate(prompt)


@router.delete("/{prompt_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_prompt(
    prompt_id: str,
    storage: Storage = Depends(get_storage),
) -> None:
    """Permanently delete a prompt."""
    if not await storage.delete_prompt(prompt_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Prompt not found")
