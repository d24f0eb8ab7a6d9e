from fastapi import APIRouter, Depends

from app.api.dependencies import get_short_service
from app.schemas import HealthResponse
from app.services.short_generator import ShortScriptService

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health(service: ShortScriptService = Depends(get_short_service)):
    return HealthResponse(status="ok", generator=service.generator_name)
