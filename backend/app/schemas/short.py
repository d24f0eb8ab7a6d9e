# app/schemas/short.py

from typing import Any, Optional, Tuple

from pydantic import AliasChoices, BaseModel, Field, model_validator


class Scene(BaseModel):
    scene_number: int = Field(..., alias="sceneNumber", ge=1)
    duration: int = Field(..., ge=0, description="Scene length in seconds")
    visual_description: str = Field(..., alias="visualDescription", min_length=1)
    narration: str = Field(..., min_length=1)
    text_overlay: str = Field("", alias="textOverlay")

    class Config:
        populate_by_name = True
        frozen = True


class ShortContent(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    scenes: Tuple[Scene, ...] = Field(..., min_length=3, max_length=5)
    total_duration: int = Field(..., alias="totalDuration", gt=0)

    class Config:
        populate_by_name = True
        frozen = True

    @model_validator(mode="after")
    def check_scene_numbers(self):
        numbers = [scene.scene_number for scene in self.scenes]
        expected = list(range(1, len(self.scenes) + 1))
        if numbers != expected:
            raise ValueError(
                f"sceneNumber must run 1..{len(self.scenes)} in order, got {numbers}"
            )
        return self

    @property
    def scene_duration_sum(self) -> int:
        return sum(scene.duration for scene in self.scenes)


class ShortGenerateRequest(BaseModel):
    # Older clients post the topic as "theme". Types and emptiness are
    # checked by the request validator so they surface as 400s.
    topic: Optional[Any] = Field(
        None, validation_alias=AliasChoices("topic", "theme")
    )
    duration: Optional[Any] = None


class ThemeOption(BaseModel):
    id: str
    name: str
    emoji: str
    has_template: bool = False


class HealthResponse(BaseModel):
    status: str
    generator: str
