# app/services/short_generator.py

from __future__ import annotations

import logging
from typing import Any

from app.core.config import Settings
from app.schemas.short import ShortContent
from app.services.script import (
    BaseScriptGenerator,
    GeminiScriptGenerator,
    OpenAIScriptGenerator,
    TemplateScriptGenerator,
)
from app.services.errors import DurationOutOfRange
from app.services.validation import validate_request

logger = logging.getLogger(__name__)


class ShortScriptService:
    """
    Validate a (topic, duration) request and hand it to one generator.

    The generator is fixed at construction. A failing remote generator is
    reported as a failure and never swapped for the template generator.
    """

    def __init__(self, generator: BaseScriptGenerator):
        self.generator = generator

    @property
    def generator_name(self) -> str:
        return self.generator.name

    def generate(self, topic: Any, duration: Any) -> ShortContent:
        request = validate_request(topic, duration)
        # Applies to every generator, remote ones included
        if request.duration < 1:
            raise DurationOutOfRange(request.duration)

        logger.info(
            "Generating short: topic=%r duration=%ss generator=%s",
            request.topic,
            request.duration,
            self.generator_name,
        )
        return self.generator.generate(request.topic, request.duration)


def build_script_generator(settings: Settings) -> BaseScriptGenerator:
    """Remote generator when the selected provider has a credential, else templates."""
    if settings.LLM_PROVIDER not in ("openai", "gemini"):
        raise ValueError(f"Unknown LLM_PROVIDER: {settings.LLM_PROVIDER!r}")

    credential = settings.remote_credential()
    if credential is None:
        return TemplateScriptGenerator()

    if settings.LLM_PROVIDER == "gemini":
        return GeminiScriptGenerator(
            credential,
            location=settings.GOOGLE_CLOUD_LOCATION,
            model_name=settings.GEMINI_MODEL,
            temperature=settings.LLM_TEMPERATURE,
        )

    return OpenAIScriptGenerator(
        credential,
        model=settings.OPENAI_MODEL,
        temperature=settings.LLM_TEMPERATURE,
    )


def build_short_service(settings: Settings) -> ShortScriptService:
    generator = build_script_generator(settings)
    logger.info("Short script generator: %s", generator.name)
    return ShortScriptService(generator)
