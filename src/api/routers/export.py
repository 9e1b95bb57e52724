"""Collection export endpoint."""
from fastapi import APIRouter, Depends, Query, Response

from api.dependencies import get_storage
from models.app_settings import ExportFormat
from models.base import utc_now
from services.export_service import export_collection
from services.storage import Storage

router = APIRouter(prefix="/api", tags=["export"])


@router.get("/export")
async def export_prompts(
    export_format: ExportFormat | None = Query(
        default=None,
        alias="format",
        description="json, yaml, or markdown. Defaults to the exportFormat setting.",
    ),
    storage: Storage = Depends(get_storage),
) -> Response:
    """Download all prompts, categories and settings as a single file."""
    settings = await storage.get_settings()
    export_file = export_collection(
        prompts=await storage.list_prompts(),
        categories=await storage.list_categories(),
        settings=settings,
        export_format=export_format or settings.export_format,
        exported_at=utc_now(),
    )
    return Response(
        content=export_file.content,
        media_type=export_file.media_type,
        headers={"Content-Disposition": f'attachment; filename="{export_file.filename}"'},
    )
