"""Scene models"""

from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Scene(BaseModel):
    """A story scene as supplied by the caller"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int = Field(default=0, description="Externally assigned scene ID (opaque)")
    title: str = Field(default="", description="Scene title")
    description: str = Field(default="", description="Scene description")
    characters: List[str] = Field(default_factory=list, description="Characters in scene")
    duration: Optional[Union[int, float]] = Field(default=None, description="Explicit duration override in seconds")

    # Presentation metadata, carried through untouched
    setting: Optional[str] = Field(default=None, description="Where the scene takes place")
    mood: Optional[str] = Field(default=None, description="Scene mood")
    image_url: Optional[str] = Field(default=None, description="Generated scene image")
    video_url: Optional[str] = Field(default=None, description="Generated scene video")

    position: int = Field(default=0, ge=0, description="Zero-based position in the story")
