"""Application settings endpoints."""
from fastapi import APIRouter, Depends

from api.dependencies import get_storage
from schemas.app_settings import SettingsResponse, SettingsUpdate
from services.storage import Storage

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("", response_model=SettingsResponse)
async def get_settings(storage: Storage = Depends(get_storage)) -> SettingsResponse:
    """Get the settings singleton."""
    return SettingsResponse.model_validate(await storage.get_settings())


@router.patch("", response_model=SettingsResponse)
async def update_settings(
    data: SettingsUpdate,
    storage: Storage = Depends(get_storage),
) -> SettingsResponse:
    """Update any subset of settings."""
    return SettingsResponse.model_validate(await storage.update_settings(data))
