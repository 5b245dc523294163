"""Tension, completeness and combined analysis models"""

from enum import Enum
from typing import List
from pydantic import Field

from .arc import ArcModel, StoryArc
from .coaching import CoachingSuggestion


class TensionCurvePoint(ArcModel):
    """Dramatic intensity of one scene"""
    scene_id: int
    tension_level: int = Field(..., ge=0, le=10, description="Tension level 0-10")
    emotional_peak: bool = False


class CharacterDevelopment(str, Enum):
    """Rating of how much screen time characters get"""
    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"


class CompletenessReport(ArcModel):
    """Structural and character markers of a finished story"""
    has_hook: bool = False
    has_conflict: bool = False
    has_resolution: bool = False
    character_development: CharacterDevelopment = CharacterDevelopment.WEAK
    overall_score: int = Field(default=0, ge=0, le=100)


class NarrativeAnalysis(ArcModel):
    """Every view of the story computed in one pass"""
    arc: StoryArc
    tension_curve: List[TensionCurvePoint] = Field(default_factory=list)
    suggestions: List[CoachingSuggestion] = Field(default_factory=list)
    emotional_peaks: List[int] = Field(default_factory=list)
    completeness: CompletenessReport
