from functools import lru_cache

from app.core.config import settings
from app.services.short_generator import ShortScriptService, build_short_service


@lru_cache
def get_short_service() -> ShortScriptService:
    # Built once per process; the generator strategy never changes at runtime
    return build_short_service(settings)
