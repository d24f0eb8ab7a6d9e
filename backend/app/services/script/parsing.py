import json
import logging
from typing import Optional

from pydantic import ValidationError

from app.schemas.short import ShortContent
from app.services.errors import RemoteGenerationError

logger = logging.getLogger(__name__)


def parse_short_content(raw: Optional[str], requested_duration: int) -> ShortContent:
    """
    Parse a model reply into ShortContent.

    Empty replies, invalid JSON and shape mismatches all become
    RemoteGenerationError. Durations are taken as the model returned them;
    a mismatch with the requested duration is only logged.
    """
    if not raw or not raw.strip():
        raise RemoteGenerationError("Empty response from model")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise RemoteGenerationError(f"Invalid JSON from model: {e}") from e

    if not isinstance(data, dict):
        raise RemoteGenerationError(
            f"Expected a JSON object from model, got {type(data).__name__}"
        )

    try:
        content = ShortContent.model_validate(data)
    except ValidationError as e:
        raise RemoteGenerationError(
            f"Model output does not match the script schema: {e.error_count()} error(s)"
        ) from e

    if (
        content.total_duration != requested_duration
        or content.scene_duration_sum != requested_duration
    ):
        logger.warning(
            "Remote script durations disagree with request: requested=%ss "
            "totalDuration=%ss scene sum=%ss",
            requested_duration,
            content.total_duration,
            content.scene_duration_sum,
        )

    return content
