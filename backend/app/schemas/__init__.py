from .short import (
    HealthResponse,
    Scene,
    ShortContent,
    ShortGenerateRequest,
    ThemeOption,
)

__all__ = [
    "HealthResponse",
    "Scene",
    "ShortContent",
    "ShortGenerateRequest",
    "ThemeOption",
]
