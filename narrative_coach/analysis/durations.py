"""Scene Duration Advisor - suggests on-screen time per scene"""

import logging
from typing import List, Optional

from narrative_coach.models import Scene, SceneDuration, BeatType
from .positions import BeatPositions, compute_beat_positions

logger = logging.getLogger(__name__)

DEFAULT_DURATION = 5
MAX_DURATION = 15

BEAT_DURATIONS = {
    BeatType.HOOK: 3,
    BeatType.INCITING_INCIDENT: 6,
    BeatType.RISING_ACTION: 5,
    BeatType.MIDPOINT: 7,
    BeatType.CRISIS: 6,
    BeatType.CLIMAX: 8,
    BeatType.RESOLUTION: 5,
}

# (minimum description length, bonus seconds), longest first; only one applies
DESCRIPTION_BONUSES = ((400, 4), (200, 2))

CROWDED_SCENE_CHARACTERS = 2


class SceneDurationAdvisor:
    """Derives a suggested duration from beat type, content length and cast size"""

    def suggest(
        self,
        scenes: List[Scene],
        positions: Optional[BeatPositions] = None
    ) -> List[SceneDuration]:
        """
        Suggest a duration for every scene

        Args:
            scenes: Indexed scenes in story order
            positions: Precomputed beat positions for this scene list

        Returns:
            One SceneDuration per scene, in input order
        """
        positions = positions or compute_beat_positions(len(scenes))

        distribution = []
        for index, scene in enumerate(scenes):
            beat_type = positions.beat_at(index)
            distribution.append(SceneDuration(
                scene_id=scene.id,
                suggested_duration=self._duration_for(scene, beat_type),
                beat_type=beat_type
            ))

        logger.debug(f"[Durations] Suggested durations for {len(distribution)} scenes")
        return distribution

    def _duration_for(self, scene: Scene, beat_type: BeatType):
        if scene.duration is not None:
            return scene.duration

        duration = BEAT_DURATIONS.get(beat_type, DEFAULT_DURATION)

        description_length = len(scene.description)
        for threshold, bonus in DESCRIPTION_BONUSES:
            if description_length > threshold:
                duration += bonus
                break

        if len(scene.characters) > CROWDED_SCENE_CHARACTERS:
            duration += 1

        return min(duration, MAX_DURATION)
