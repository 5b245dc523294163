"""Narrative structure analysis components"""

from .positions import BeatPositions, compute_beat_positions, classify_beat_position
from .durations import SceneDurationAdvisor
from .story_arc import StoryArcAnalyzer
from .tension import TensionCurveCalculator, tension_at
from .coaching import CoachingSuggestionGenerator, count_character_appearances
from .completeness import CompletenessScorer, rate_character_development
from .engine import NarrativeEngine

__all__ = [
    "BeatPositions",
    "compute_beat_positions",
    "classify_beat_position",
    "SceneDurationAdvisor",
    "StoryArcAnalyzer",
    "TensionCurveCalculator",
    "tension_at",
    "CoachingSuggestionGenerator",
    "count_character_appearances",
    "CompletenessScorer",
    "rate_character_development",
    "NarrativeEngine",
]
