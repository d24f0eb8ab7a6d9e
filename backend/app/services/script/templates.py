# app/services/script/templates.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple, Union

from app.schemas.short import Scene, ShortContent, ThemeOption
from app.services.errors import DurationOutOfRange
from app.services.script.base import BaseScriptGenerator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SceneTemplate:
    visual_description: str
    narration: str
    text_overlay: str


@dataclass(frozen=True)
class ThemeTemplate:
    title: str
    description: str
    scenes: Tuple[SceneTemplate, SceneTemplate, SceneTemplate]


@dataclass(frozen=True)
class KnownTheme:
    theme_id: str


@dataclass(frozen=True)
class CustomTopic:
    text: str


ResolvedTopic = Union[KnownTheme, CustomTopic]


THEME_CATALOG: Dict[str, ThemeTemplate] = {
    "animals": ThemeTemplate(
        title="🐘 Amazing Animal Facts!",
        description=(
            "Learn fun facts about animals! Perfect for kids. "
            "#KidsEducation #Animals #LearnWithFun #YouTubeShorts"
        ),
        scenes=(
            SceneTemplate(
                visual_description="Animated elephant with big eyes in a colorful jungle setting",
                narration="Did you know elephants are the biggest land animals?",
                text_overlay="🐘 ELEPHANTS!",
            ),
            SceneTemplate(
                visual_description="Close-up of elephant trunk picking up a peanut, sparkles around",
                narration="They can pick up tiny things with their long trunk!",
                text_overlay="SUPER TRUNK! 💪",
            ),
            SceneTemplate(
                visual_description="Happy elephant spraying water, rainbow in background",
                narration="And they love to play in water! So cool!",
                text_overlay="SPLASH! 💦",
            ),
        ),
    ),
    "space": ThemeTemplate(
        title="🚀 Journey to Space!",
        description=(
            "Blast off to space and learn amazing facts! "
            "#Space #KidsLearning #Science #Education"
        ),
        scenes=(
            SceneTemplate(
                visual_description="Cartoon rocket launching with colorful flames and stars",
                narration="5, 4, 3, 2, 1... Blast off to space!",
                text_overlay="🚀 BLAST OFF!",
            ),
            SceneTemplate(
                visual_description="Planets spinning around the sun with happy faces",
                narration="There are 8 planets that go around the sun!",
                text_overlay="8 PLANETS! ☀️",
            ),
            SceneTemplate(
                visual_description="Smiling moon and twinkling stars",
                narration="The moon lights up our night sky!",
                text_overlay="✨ GOODNIGHT! 🌙",
            ),
        ),
    ),
}

# Everything the theme picker offers. Only catalog entries have authored scenes.
THEME_OPTIONS: List[ThemeOption] = [
    ThemeOption(id=theme_id, name=name, emoji=emoji, has_template=theme_id in THEME_CATALOG)
    for theme_id, name, emoji in [
        ("animals", "Animals", "🐾"),
        ("space", "Space", "🚀"),
        ("dinosaurs", "Dinosaurs", "🦕"),
        ("ocean", "Ocean", "🌊"),
        ("alphabet", "ABC Learning", "🔤"),
        ("numbers", "Numbers", "🔢"),
        ("colors", "Colors", "🎨"),
        ("shapes", "Shapes", "⭐"),
    ]
]


def resolve_topic(topic: str) -> ResolvedTopic:
    """Exact, case-sensitive catalog lookup. No trimming or normalisation."""
    if topic in THEME_CATALOG:
        return KnownTheme(theme_id=topic)
    return CustomTopic(text=topic)


def custom_topic_template(topic: str) -> ThemeTemplate:
    """Generic intro -> surprising fact -> conclusion script for any topic."""
    return ThemeTemplate(
        title=f"🎉 Fun Facts About {topic}!",
        description=(
            f"Learn amazing things about {topic}! Educational and fun for kids. "
            "#KidsEducation #Learning #Fun #YouTubeShorts"
        ),
        scenes=(
            SceneTemplate(
                visual_description=f"Bright, colorful introduction scene with fun animations about {topic}",
                narration=f"Let's learn something amazing about {topic}!",
                text_overlay=f"{topic.upper()}!",
            ),
            SceneTemplate(
                visual_description=f"Detailed visual showing interesting aspects of {topic} with vibrant colors",
                narration="Here's a fun fact that will surprise you!",
                text_overlay="WOW! 🤩",
            ),
            SceneTemplate(
                visual_description="Exciting conclusion scene with celebration animations",
                narration="Now you know something new! See you next time!",
                text_overlay="BYE! 👋",
            ),
        ),
    )


def partition_duration(duration: int) -> Tuple[int, int, int]:
    """
    Split ``duration`` across three scenes.

    Scenes 1 and 2 get ``duration // 3``; scene 3 takes the remainder so the
    parts always sum to ``duration``. Durations below 3 leave the first two
    scenes at zero seconds.
    """
    if duration < 1:
        raise DurationOutOfRange(duration)

    scene_duration = duration // 3
    return scene_duration, scene_duration, duration - 2 * scene_duration


class TemplateScriptGenerator(BaseScriptGenerator):
    """
    Deterministic, offline script generator.

    Used whenever no remote model is configured. Identical input always gives
    an identical script.
    """

    name = "template"

    def generate(self, topic: str, duration: int) -> ShortContent:
        durations = partition_duration(duration)

        resolved = resolve_topic(topic)
        if isinstance(resolved, KnownTheme):
            template = THEME_CATALOG[resolved.theme_id]
            logger.debug("Using catalog theme %r", resolved.theme_id)
        else:
            template = custom_topic_template(resolved.text)
            logger.debug("Using generic template for custom topic %r", resolved.text)

        scenes = [
            Scene(
                scene_number=index,
                duration=seconds,
                visual_description=scene.visual_description,
                narration=scene.narration,
                text_overlay=scene.text_overlay,
            )
            for index, (scene, seconds) in enumerate(
                zip(template.scenes, durations), start=1
            )
        ]

        return ShortContent(
            title=template.title,
            description=template.description,
            scenes=scenes,
            total_duration=duration,
        )
