"""Coaching Suggestion Generator - rule-based story improvement hints"""

import logging
from collections import Counter
from typing import Dict, List, Optional

from narrative_coach.models import (
    Scene,
    StoryArc,
    CoachingSuggestion,
    SuggestionType,
    Severity,
)
from .tension import TensionCurveCalculator

logger = logging.getLogger(__name__)

MIN_SCENES = 3
MAX_SCENES = 30
ACT2_MIN_SHARE = 0.35
ACT2_MAX_SHARE = 0.65
# Character and duration rules need enough scenes to be meaningful
DETAILED_RULES_MIN_SCENES = 5
DURATION_SPREAD = 2


def count_character_appearances(scenes: List[Scene]) -> Dict[str, int]:
    """Number of scenes each character appears in, in order of first appearance"""
    appearances = Counter()
    for scene in scenes:
        appearances.update(set(scene.characters))

    ordered = {}
    for scene in scenes:
        for character in scene.characters:
            if character not in ordered:
                ordered[character] = appearances[character]
    return ordered


class CoachingSuggestionGenerator:
    """Applies the coaching rules to a story and its arc"""

    def __init__(self, tension_calculator: Optional[TensionCurveCalculator] = None):
        self.tension_calculator = tension_calculator or TensionCurveCalculator()

    def generate(self, scenes: List[Scene], arc: StoryArc) -> List[CoachingSuggestion]:
        """
        Generate coaching suggestions

        Args:
            scenes: Indexed scenes in story order
            arc: Story arc computed for the same scenes

        Returns:
            Every suggestion whose rule fired
        """
        suggestions = []
        suggestions.extend(self._check_length(scenes))
        suggestions.extend(self._check_act2(scenes, arc))
        suggestions.extend(self._check_characters(scenes))
        suggestions.extend(self._check_emotional_peaks(scenes))
        suggestions.extend(self._check_duration_variety(scenes, arc))

        logger.info(f"[Coaching] {len(suggestions)} suggestions for {len(scenes)} scenes")
        return suggestions

    def _check_length(self, scenes: List[Scene]) -> List[CoachingSuggestion]:
        suggestions = []
        total = len(scenes)

        if total < MIN_SCENES:
            suggestions.append(CoachingSuggestion(
                type=SuggestionType.STRUCTURE,
                severity=Severity.WARNING,
                message="Story is very short",
                suggestion="Consider adding more scenes to develop your narrative arc. Aim for at least 5-7 scenes for a complete story."
            ))

        if total > MAX_SCENES:
            suggestions.append(CoachingSuggestion(
                type=SuggestionType.PACING,
                severity=Severity.INFO,
                message="Story has many scenes",
                suggestion="Consider breaking this into multiple episodes or tightening the narrative by combining similar scenes."
            ))

        return suggestions

    def _check_act2(self, scenes: List[Scene], arc: StoryArc) -> List[CoachingSuggestion]:
        """Act 2 should hold roughly half of the story"""
        if not scenes:
            return []

        act2_share = len(arc.acts.act2.scenes) / len(scenes)

        if act2_share < ACT2_MIN_SHARE:
            return [CoachingSuggestion(
                type=SuggestionType.STRUCTURE,
                severity=Severity.WARNING,
                message="Act 2 is too short",
                suggestion="Your confrontation/development section needs more depth. Add scenes that build tension and develop character relationships."
            )]

        if act2_share > ACT2_MAX_SHARE:
            return [CoachingSuggestion(
                type=SuggestionType.PACING,
                severity=Severity.WARNING,
                message="Act 2 is too long",
                suggestion="Tighten Act 2 by removing redundant scenes or combining similar moments. The middle section is dragging."
            )]

        return []

    def _check_characters(self, scenes: List[Scene]) -> List[CoachingSuggestion]:
        """Flag characters that only show up once"""
        if len(scenes) <= DETAILED_RULES_MIN_SCENES:
            return []

        return [
            CoachingSuggestion(
                type=SuggestionType.CHARACTER,
                severity=Severity.INFO,
                message=f'Character "{character}" appears in only one scene',
                suggestion=f"Consider developing {character}'s role or removing them if they're not essential to the story."
            )
            for character, count in count_character_appearances(scenes).items()
            if count == 1
        ]

    def _check_emotional_peaks(self, scenes: List[Scene]) -> List[CoachingSuggestion]:
        peaks = self.tension_calculator.detect_emotional_peaks(scenes)
        if peaks:
            return []

        return [CoachingSuggestion(
            type=SuggestionType.EMOTION,
            severity=Severity.CRITICAL,
            message="No emotional peaks detected",
            suggestion="Your story needs moments of high tension or emotion. Add conflict, stakes, or dramatic reveals."
        )]

    def _check_duration_variety(self, scenes: List[Scene], arc: StoryArc) -> List[CoachingSuggestion]:
        if len(scenes) <= DETAILED_RULES_MIN_SCENES:
            return []

        durations = [item.suggested_duration for item in arc.pacing.scene_distribution]
        if not durations:
            return []

        average = sum(durations) / len(durations)
        if not all(abs(d - average) < DURATION_SPREAD for d in durations):
            return []

        return [CoachingSuggestion(
            type=SuggestionType.PACING,
            severity=Severity.INFO,
            message="All scenes have similar duration",
            suggestion="Vary scene lengths for better pacing. Use shorter scenes for action/tension, longer scenes for emotional moments."
        )]
