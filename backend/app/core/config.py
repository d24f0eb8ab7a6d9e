from typing import Optional

from pydantic_settings import BaseSettings

from dotenv import load_dotenv
load_dotenv()


class Settings(BaseSettings):
    PROJECT_NAME: str = "Kids Shorts Generator API"
    API_V1_PREFIX: str = "/api/v1"

    # "openai" or "gemini"; the provider's credential decides remote vs template
    LLM_PROVIDER: str = "openai"

    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o-mini"
    LLM_TEMPERATURE: float = 0.8

    GOOGLE_CLOUD_PROJECT_ID: Optional[str] = None
    GOOGLE_CLOUD_LOCATION: str = "us-central1"
    GEMINI_MODEL: str = "gemini-2.0-flash-exp"

    EXPORT_ROOT: str = "exports"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

    def remote_credential(self) -> Optional[str]:
        """Credential for the selected provider, or None when unset."""
        if self.LLM_PROVIDER == "gemini":
            return self.GOOGLE_CLOUD_PROJECT_ID or None
        return self.OPENAI_API_KEY or None


settings = Settings()
