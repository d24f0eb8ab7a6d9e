import logging
from typing import List
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.api.dependencies import get_short_service
from app.core.files import export_filename, serialize_for_download
from app.schemas import ShortContent, ShortGenerateRequest, ThemeOption
from app.services.errors import RemoteGenerationError, ShortRequestError
from app.services.script import THEME_OPTIONS
from app.services.short_generator import ShortScriptService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/shorts", tags=["shorts"])


@router.post("/generate", response_model=ShortContent)
def generate_short(
    payload: ShortGenerateRequest,
    service: ShortScriptService = Depends(get_short_service),
):
    try:
        return service.generate(payload.topic, payload.duration)
    except ShortRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except RemoteGenerationError as e:
        logger.error("Error generating content: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate content",
        )


@router.get("/themes", response_model=List[ThemeOption])
def list_themes():
    return THEME_OPTIONS


@router.post("/download")
def download_short(content: ShortContent):
    filename = export_filename(content.title)
    return Response(
        content=serialize_for_download(content),
        media_type="application/json",
        headers={
            "Content-Disposition": f"attachment; filename*=utf-8''{quote(filename)}"
        },
    )
