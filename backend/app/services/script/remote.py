# app/services/script/remote.py

from __future__ import annotations

import logging
from typing import Any, Optional

from openai import OpenAI, OpenAIError

from app.schemas.short import ShortContent
from app.services.errors import RemoteGenerationError
from app.services.prompt_builder import PromptBuilder
from app.services.script.base import BaseScriptGenerator
from app.services.script.parsing import parse_short_content

logger = logging.getLogger(__name__)


class OpenAIScriptGenerator(BaseScriptGenerator):
    """
    Generate a script with one OpenAI chat completion in JSON object mode.
    No retries: the SDK client is built with max_retries=0.
    """

    name = "openai"

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        model: str = "gpt-4o-mini",
        temperature: float = 0.8,
        client: Optional[Any] = None,
    ):
        if client is None:
            if not api_key:
                raise ValueError("OpenAI API key not provided. Set OPENAI_API_KEY.")
            client = OpenAI(api_key=api_key, max_retries=0)

        self.client = client
        self.model = model
        self.temperature = temperature

    def generate(self, topic: str, duration: int) -> ShortContent:
        prompt = PromptBuilder.build_short_prompt(topic, duration)

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": PromptBuilder.system_prompt()},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
                response_format={"type": "json_object"},
            )
            raw = response.choices[0].message.content
        except OpenAIError as e:
            logger.error("OpenAI request failed for topic %r: %s", topic, e)
            raise RemoteGenerationError(f"OpenAI API error: {e}") from e
        except (IndexError, AttributeError) as e:
            logger.error("Malformed OpenAI response for topic %r: %s", topic, e)
            raise RemoteGenerationError(f"Malformed OpenAI response: {e}") from e

        return parse_short_content(raw, duration)


class GeminiScriptGenerator(BaseScriptGenerator):
    """Generate a script with Vertex AI Gemini in JSON response mode."""

    name = "gemini"

    def __init__(
        self,
        project_id: Optional[str] = None,
        *,
        location: str = "us-central1",
        model_name: str = "gemini-2.0-flash-exp",
        temperature: float = 0.8,
        model: Optional[Any] = None,
    ):
        if model is None:
            if not project_id:
                raise ValueError(
                    "Google Cloud project not provided. Set GOOGLE_CLOUD_PROJECT_ID."
                )
            import vertexai
            from vertexai.generative_models import GenerativeModel

            vertexai.init(project=project_id, location=location)
            model = GenerativeModel(
                model_name, system_instruction=PromptBuilder.system_prompt()
            )

        self.model = model
        self.temperature = temperature

    def generate(self, topic: str, duration: int) -> ShortContent:
        prompt = PromptBuilder.build_short_prompt(topic, duration)

        try:
            response = self.model.generate_content(
                contents=[prompt],
                generation_config={
                    "temperature": self.temperature,
                    "response_mime_type": "application/json",
                },
            )
            # .text raises ValueError when the candidate was blocked or empty
            raw = response.text
        except Exception as e:
            logger.error("Gemini request failed for topic %r: %s", topic, e)
            raise RemoteGenerationError(f"Gemini API error: {e}") from e

        return parse_short_content(raw, duration)
