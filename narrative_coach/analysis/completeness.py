"""Completeness Scorer - 0-100 score for how finished a story looks"""

import logging
from typing import List, Optional

from narrative_coach.models import (
    Scene,
    StoryArc,
    CharacterDevelopment,
    CompletenessReport,
)
from .coaching import count_character_appearances
from .story_arc import StoryArcAnalyzer

logger = logging.getLogger(__name__)

HOOK_POINTS = 20
CONFLICT_POINTS = 30
RESOLUTION_POINTS = 20
DEVELOPMENT_POINTS = {
    CharacterDevelopment.WEAK: 0,
    CharacterDevelopment.MODERATE: 15,
    CharacterDevelopment.STRONG: 30,
}


def rate_character_development(scenes: List[Scene]) -> CharacterDevelopment:
    """Rate development by the mean number of scenes per character"""
    appearances = count_character_appearances(scenes)
    average = sum(appearances.values()) / len(appearances) if appearances else 0

    if average < 2:
        return CharacterDevelopment.WEAK
    if average < 4:
        return CharacterDevelopment.MODERATE
    return CharacterDevelopment.STRONG


class CompletenessScorer:
    """Aggregates arc and character signals into a completeness report"""

    def __init__(self, arc_analyzer: Optional[StoryArcAnalyzer] = None):
        self.arc_analyzer = arc_analyzer or StoryArcAnalyzer()

    def score(self, scenes: List[Scene], arc: Optional[StoryArc] = None) -> CompletenessReport:
        """
        Score story completeness

        Args:
            scenes: Indexed scenes in story order
            arc: Arc for the same scenes; computed when not given

        Returns:
            CompletenessReport
        """
        arc = arc or self.arc_analyzer.analyze(scenes)

        has_hook = arc.beats.hook is not None
        has_conflict = len(arc.beats.rising_action) > 0
        has_resolution = arc.beats.resolution is not None
        development = rate_character_development(scenes)

        score = 0
        if has_hook:
            score += HOOK_POINTS
        if has_conflict:
            score += CONFLICT_POINTS
        if has_resolution:
            score += RESOLUTION_POINTS
        score += DEVELOPMENT_POINTS[development]

        logger.debug(f"[Completeness] score={score} development={development.value}")

        return CompletenessReport(
            has_hook=has_hook,
            has_conflict=has_conflict,
            has_resolution=has_resolution,
            character_development=development,
            overall_score=score
        )
