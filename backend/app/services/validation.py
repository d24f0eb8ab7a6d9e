from dataclasses import dataclass
from typing import Any

from app.services.errors import InvalidDuration, InvalidTopic, MissingInput


@dataclass(frozen=True)
class ShortRequest:
    topic: str
    duration: int


def validate_request(topic: Any, duration: Any) -> ShortRequest:
    """
    Reject absent or malformed input before any generation work happens.

    Empty means None, "" or a zero duration. Integral strings such as "30"
    and whole floats such as 30.0 are accepted. No bounds are enforced on the
    duration here.
    """
    if not topic or duration is None or duration == "" or duration == 0:
        raise MissingInput()

    if not isinstance(topic, str):
        raise InvalidTopic(topic)

    return ShortRequest(topic=topic, duration=_as_seconds(duration))


def _as_seconds(value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidDuration(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidDuration(value)
        return int(value)
    if not isinstance(value, str):
        raise InvalidDuration(value)
    try:
        seconds = int(value.strip())
    except ValueError as e:
        raise InvalidDuration(value) from e
    if seconds == 0:
        raise MissingInput()
    return seconds
