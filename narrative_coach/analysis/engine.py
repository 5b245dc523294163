"""
Narrative engine - single facade over the analysis components.

Every method accepts raw scene records (dicts or Scene models) and runs
them through the scene indexer first. The engine keeps no state between
calls, so one instance can serve any number of concurrent requests.
"""

import logging
from typing import Any, List, Optional

from narrative_coach.models import (
    StoryArc,
    SceneDuration,
    TensionCurvePoint,
    CoachingSuggestion,
    CompletenessReport,
    NarrativeAnalysis,
)
from narrative_coach.validation import index_scenes
from .durations import SceneDurationAdvisor
from .story_arc import StoryArcAnalyzer
from .tension import TensionCurveCalculator
from .coaching import CoachingSuggestionGenerator
from .completeness import CompletenessScorer

logger = logging.getLogger(__name__)


class NarrativeEngine:
    """Analyzes story structure, pacing and tension"""

    def __init__(self):
        self.duration_advisor = SceneDurationAdvisor()
        self.arc_analyzer = StoryArcAnalyzer(duration_advisor=self.duration_advisor)
        self.tension_calculator = TensionCurveCalculator()
        self.coach = CoachingSuggestionGenerator(tension_calculator=self.tension_calculator)
        self.completeness_scorer = CompletenessScorer(arc_analyzer=self.arc_analyzer)

    def analyze_story_arc(self, scenes: Any) -> StoryArc:
        """Identify the three-act structure and key beats"""
        return self.arc_analyzer.analyze(index_scenes(scenes))

    def calculate_tension_curve(self, scenes: Any) -> List[TensionCurvePoint]:
        """Tension level for every scene"""
        return self.tension_calculator.calculate(index_scenes(scenes))

    def suggest_scene_durations(self, scenes: Any) -> List[SceneDuration]:
        """Suggested duration for every scene"""
        return self.duration_advisor.suggest(index_scenes(scenes))

    def detect_emotional_peaks(self, scenes: Any) -> List[int]:
        """IDs of the scenes at an emotional peak, e.g. for thumbnail generation"""
        return self.tension_calculator.detect_emotional_peaks(index_scenes(scenes))

    def generate_coaching_suggestions(self, scenes: Any, arc: Optional[StoryArc] = None) -> List[CoachingSuggestion]:
        """Coaching suggestions, computing the arc when it is not supplied"""
        indexed = index_scenes(scenes)
        arc = arc or self.arc_analyzer.analyze(indexed)
        return self.coach.generate(indexed, arc)

    def analyze_story_completeness(self, scenes: Any) -> CompletenessReport:
        """Check whether the story has the markers of a finished narrative"""
        return self.completeness_scorer.score(index_scenes(scenes))

    def full_analysis(self, scenes: Any) -> NarrativeAnalysis:
        """
        Run every analysis over the story

        The arc and tension curve are computed once and shared by the
        later stages of this call only.

        Args:
            scenes: Raw scene records

        Returns:
            NarrativeAnalysis combining arc, tension curve, suggestions,
            emotional peaks and completeness
        """
        indexed = index_scenes(scenes)
        logger.info(f"[NarrativeEngine] Full analysis of {len(indexed)} scenes")

        arc = self.arc_analyzer.analyze(indexed)
        tension_curve = self.tension_calculator.calculate(indexed)

        return NarrativeAnalysis(
            arc=arc,
            tension_curve=tension_curve,
            suggestions=self.coach.generate(indexed, arc),
            emotional_peaks=[point.scene_id for point in tension_curve if point.emotional_peak],
            completeness=self.completeness_scorer.score(indexed, arc=arc)
        )
