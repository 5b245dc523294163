"""Coaching suggestion models"""

from enum import Enum
from typing import Optional
from pydantic import Field

from .arc import ArcModel


class SuggestionType(str, Enum):
    """Area of the story a suggestion addresses"""
    PACING = "pacing"
    TENSION = "tension"
    CHARACTER = "character"
    STRUCTURE = "structure"
    EMOTION = "emotion"


class Severity(str, Enum):
    """How urgently a suggestion should be addressed"""
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


class CoachingSuggestion(ArcModel):
    """A single improvement suggestion for the story"""
    type: SuggestionType
    severity: Severity
    scene_id: Optional[int] = Field(default=None, description="Scene the suggestion targets, if any")
    message: str = Field(..., description="Short finding")
    suggestion: str = Field(..., description="What the author can do about it")
    actionable: bool = True
