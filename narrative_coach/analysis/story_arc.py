"""Story Arc Analyzer - three-act partition and key beats"""

import logging
from typing import List, Optional

from narrative_coach.models import (
    Scene,
    ActRange,
    StoryActs,
    StoryBeats,
    PacingSummary,
    StoryArc,
)
from .positions import BeatPositions, compute_beat_positions
from .durations import SceneDurationAdvisor

logger = logging.getLogger(__name__)

ACT_DESCRIPTIONS = {
    "act1": "Setup - Introduce characters, world, and conflict",
    "act2": "Confrontation - Rising tension, obstacles, character growth",
    "act3": "Resolution - Climax and conclusion",
}


def _scene_id_at(scenes: List[Scene], position: Optional[int]) -> Optional[int]:
    if position is None:
        return None
    return scenes[position].id


class StoryArcAnalyzer:
    """Partitions scenes into three acts and maps the canonical beats onto them"""

    def __init__(self, duration_advisor: Optional[SceneDurationAdvisor] = None):
        self.duration_advisor = duration_advisor or SceneDurationAdvisor()

    def analyze(self, scenes: List[Scene]) -> StoryArc:
        """
        Analyze story structure

        Args:
            scenes: Indexed scenes in story order

        Returns:
            StoryArc with acts, beats and pacing
        """
        total = len(scenes)
        positions = compute_beat_positions(total)

        acts = StoryActs(
            act1=self._act(scenes, "act1", 0, positions.act1_end),
            act2=self._act(scenes, "act2", positions.act1_end, positions.act2_end),
            act3=self._act(scenes, "act3", positions.act2_end, total),
        )

        beats = self._beats(scenes, positions)

        distribution = self.duration_advisor.suggest(scenes, positions)
        pacing = PacingSummary(
            total_duration=sum(item.suggested_duration for item in distribution),
            scene_distribution=distribution
        )

        logger.debug(
            f"[StoryArc] {total} scenes -> acts "
            f"{len(acts.act1.scenes)}/{len(acts.act2.scenes)}/{len(acts.act3.scenes)}, "
            f"total duration {pacing.total_duration}s"
        )

        return StoryArc(acts=acts, beats=beats, pacing=pacing)

    def _act(self, scenes: List[Scene], name: str, start: int, end: int) -> ActRange:
        return ActRange(
            start=start,
            end=end,
            scenes=[scene.id for scene in scenes[start:end]],
            description=ACT_DESCRIPTIONS[name]
        )

    def _beats(self, scenes: List[Scene], positions: BeatPositions) -> StoryBeats:
        return StoryBeats(
            hook=_scene_id_at(scenes, positions.hook),
            inciting_incident=_scene_id_at(scenes, positions.inciting_incident),
            rising_action=[scenes[i].id for i in positions.rising_action],
            midpoint=_scene_id_at(scenes, positions.midpoint),
            crisis=_scene_id_at(scenes, positions.crisis),
            climax=_scene_id_at(scenes, positions.climax),
            resolution=_scene_id_at(scenes, positions.resolution),
        )
