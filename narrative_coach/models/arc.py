"""Story arc models"""

from enum import Enum
from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BeatType(str, Enum):
    """Narrative beat a scene plays in the story"""
    HOOK = "hook"
    INCITING_INCIDENT = "inciting_incident"
    SETUP = "setup"
    RISING_ACTION = "rising_action"
    MIDPOINT = "midpoint"
    CRISIS = "crisis"
    CLIMAX = "climax"
    RESOLUTION = "resolution"
    SCENE = "scene"


class ArcModel(BaseModel):
    """Base for arc models, serialised with camelCase keys"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ActRange(ArcModel):
    """One act: half-open position range and the scene IDs in it"""
    start: int = Field(..., ge=0, description="First position (inclusive)")
    end: int = Field(..., ge=0, description="Last position (exclusive)")
    scenes: List[int] = Field(default_factory=list, description="Scene IDs in this act")
    description: str = Field(..., description="Act label")


class StoryActs(ArcModel):
    """Three-act partition of the scene sequence"""
    act1: ActRange
    act2: ActRange
    act3: ActRange


class StoryBeats(ArcModel):
    """Scene IDs mapped onto the canonical beats"""
    hook: Optional[int] = None
    inciting_incident: Optional[int] = None
    rising_action: List[int] = Field(default_factory=list)
    midpoint: Optional[int] = None
    crisis: Optional[int] = None
    climax: Optional[int] = None
    resolution: Optional[int] = None


class SceneDuration(ArcModel):
    """Suggested on-screen duration for a scene"""
    scene_id: int
    suggested_duration: Union[int, float] = Field(..., ge=0)
    beat_type: BeatType = Field(default=BeatType.SCENE)


class PacingSummary(ArcModel):
    """Duration totals for the story"""
    total_duration: Union[int, float] = 0
    scene_distribution: List[SceneDuration] = Field(default_factory=list)


class StoryArc(ArcModel):
    """Acts, beats and pacing derived from a scene list"""
    acts: StoryActs
    beats: StoryBeats
    pacing: PacingSummary
