class ShortGenerationError(Exception):
    """Base class for everything the script engine raises."""


class ShortRequestError(ShortGenerationError, ValueError):
    """The caller sent input the engine cannot work with (HTTP 400)."""


class MissingInput(ShortRequestError):
    def __init__(self, message: str = "Topic and duration are required"):
        super().__init__(message)


class InvalidTopic(ShortRequestError):
    def __init__(self, value):
        super().__init__(f"Topic must be text, got {type(value).__name__}")


class InvalidDuration(ShortRequestError):
    def __init__(self, value):
        super().__init__(f"Duration must be a whole number of seconds, got {value!r}")


class DurationOutOfRange(ShortRequestError):
    def __init__(self, duration: int):
        super().__init__(f"Duration must be at least 1 second, got {duration}")


class RemoteGenerationError(ShortGenerationError):
    """The remote model failed, was unreachable, or returned an unusable script."""
