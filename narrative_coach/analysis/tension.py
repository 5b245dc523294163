"""Tension Curve Calculator - dramatic intensity per scene"""

import logging
import math
from typing import List

from narrative_coach.models import Scene, TensionCurvePoint

logger = logging.getLogger(__name__)

MIN_TENSION = 0
MAX_TENSION = 10
EMOTIONAL_PEAK_THRESHOLD = 8


def tension_at(position: float) -> float:
    """
    Unrounded tension for a normalized story position in [0, 1).

    Low at the start, builds through Act 2, peaks early in Act 3 and
    drops towards the resolution.
    """
    if position < 0.25:
        # Act 1: 2 -> 5
        return 2 + (position / 0.25) * 3
    if position < 0.75:
        # Act 2: 5 -> 9
        return 5 + ((position - 0.25) / 0.5) * 4

    # Act 3: peak near 10 then fall to 3
    act3_position = (position - 0.75) / 0.25
    if act3_position < 0.3:
        return 9 + act3_position * 3.33
    return 10 - ((act3_position - 0.3) / 0.7) * 7


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class TensionCurveCalculator:
    """Maps each scene's position onto a fixed dramatic-arc shape"""

    def calculate(self, scenes: List[Scene]) -> List[TensionCurvePoint]:
        """
        Calculate the tension curve

        Args:
            scenes: Indexed scenes in story order

        Returns:
            One TensionCurvePoint per scene, in input order
        """
        total = len(scenes)
        curve = []

        for index, scene in enumerate(scenes):
            level = _round_half_up(tension_at(index / total))
            level = max(MIN_TENSION, min(MAX_TENSION, level))
            curve.append(TensionCurvePoint(
                scene_id=scene.id,
                tension_level=level,
                emotional_peak=level >= EMOTIONAL_PEAK_THRESHOLD
            ))

        logger.debug(f"[Tension] {total} scenes, {sum(p.emotional_peak for p in curve)} emotional peaks")
        return curve

    def detect_emotional_peaks(self, scenes: List[Scene]) -> List[int]:
        """IDs of the scenes at an emotional peak, in story order"""
        return [point.scene_id for point in self.calculate(scenes) if point.emotional_peak]
