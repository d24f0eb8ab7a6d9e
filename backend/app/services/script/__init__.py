from .base import BaseScriptGenerator
from .remote import GeminiScriptGenerator, OpenAIScriptGenerator
from .templates import (
    THEME_CATALOG,
    THEME_OPTIONS,
    CustomTopic,
    KnownTheme,
    TemplateScriptGenerator,
    partition_duration,
    resolve_topic,
)

__all__ = [
    "BaseScriptGenerator",
    "GeminiScriptGenerator",
    "OpenAIScriptGenerator",
    "TemplateScriptGenerator",
    "THEME_CATALOG",
    "THEME_OPTIONS",
    "CustomTopic",
    "KnownTheme",
    "partition_duration",
    "resolve_topic",
]
