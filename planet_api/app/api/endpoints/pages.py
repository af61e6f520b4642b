"""Landing page."""

from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from planet_api.app.api.deps import get_settings
from planet_api.app.core.config import Settings

router = APIRouter()


@router.get("/", include_in_schema=False)
async def index(settings: Settings = Depends(get_settings)) -> FileResponse:
    return FileResponse(Path(settings.static_dir) / "index.html")
