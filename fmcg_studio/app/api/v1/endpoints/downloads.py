from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

from fmcg_studio.app.utils.exceptions import NotFoundError
from fmcg_studio.core.config import settings

router = APIRouter()


@router.get("/download")
async def download_app():
    """
    Serve the prebuilt mobile app artifact.
    """
    path = Path(settings.DOWNLOAD_DIR) / settings.DOWNLOAD_FILENAME
    if not path.is_file():
        raise NotFoundError("Download is not available")
    return FileResponse(
        path,
        media_type="application/vnd.android.package-archive",
        filename=settings.DOWNLOAD_AS,
    )
