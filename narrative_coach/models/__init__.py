"""Pydantic schemas for narrative analysis data structures"""

from .scene import Scene
from .arc import (
    BeatType,
    ActRange,
    StoryActs,
    StoryBeats,
    SceneDuration,
    PacingSummary,
    StoryArc,
)
from .coaching import CoachingSuggestion, SuggestionType, Severity
from .analysis import (
    TensionCurvePoint,
    CharacterDevelopment,
    CompletenessReport,
    NarrativeAnalysis,
)

__all__ = [
    # Input
    "Scene",
    # Arc
    "BeatType",
    "ActRange",
    "StoryActs",
    "StoryBeats",
    "SceneDuration",
    "PacingSummary",
    "StoryArc",
    # Coaching
    "CoachingSuggestion",
    "SuggestionType",
    "Severity",
    # Tension / completeness
    "TensionCurvePoint",
    "CharacterDevelopment",
    "CompletenessReport",
    "NarrativeAnalysis",
]
