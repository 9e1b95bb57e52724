"""Category endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_storage
from schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from services import prompt_query
from services.exceptions import NotFoundError
from services.storage import Storage

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=list[CategoryResponse])
async def list_categories(storage: Storage = Depends(get_storage)) -> list[CategoryResponse]:
    """List all categories ordered by name."""
    categories = await storage.list_categories()
    return [CategoryResponse.model_validate(c) for c in categories]


@router.get("/prompt-counts", response_model=dict[str, int])
async def get_prompt_counts(storage: Storage = Depends(get_storage)) -> dict[str, int]:
    """
    Count non-archived prompts per category.

    Returns a map of category id to count. Every category is present (possibly 0);
    prompts pointing at a deleted or unknown category are not counted.
    """
    categories = await storage.list_categories()
    prompts = await storage.list_prompts()
    return prompt_query.count_prompts_by_category(prompts, categories)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: str,
    storage: Storage = Depends(get_storage),
) -> CategoryResponse:
    """Get a category by id."""
    category = await storage.get_category(category_id)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return CategoryResponse.model_validate(category)


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    data: CategoryCreate,
    storage: Storage = Depends(get_storage),
) -> CategoryResponse:
    """Create a new category. icon and color fall back to defaults."""
    category = await storage.create_category(data)
    return CategoryResponse.model_validate(category)


@router.patch("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: str,
    data: CategoryUpdate,
    storage: Storage = Depends(get_storage),
) -> CategoryResponse:
    """Update a category. Only fields present in the body are changed."""
    try:
        category = await storage.update_category(category_id, data)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return CategoryResponse.model_validate(category)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: str,
    storage: Storage = Depends(get_storage),
) -> None:
    """
    Delete a category.

    Prompts in the category are not modified; they keep the stale categoryId
    and are shown as uncategorized.
    """
    if not await storage.delete_category(category_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
