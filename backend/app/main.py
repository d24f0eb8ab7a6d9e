from fastapi import FastAPI

from app.core.config import settings
from app.core.logging import setup_logging
from app.api.routes import health, shorts

setup_logging(settings.LOG_LEVEL)

app = FastAPI(title=settings.PROJECT_NAME)


app.include_router(health.router, prefix=settings.API_V1_PREFIX)
app.include_router(shorts.router, prefix=settings.API_V1_PREFIX)
