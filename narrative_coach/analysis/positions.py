"""Act boundaries and beat positions shared by the arc and duration analyses"""

from dataclasses import dataclass
from typing import Optional

from narrative_coach.models import BeatType
from narrative_coach.validation import ValidationError

ACT1_SHARE = 0.25
ACT2_SHARE = 0.75


@dataclass(frozen=True)
class BeatPositions:
    """Positions (not scene IDs) of the acts and beats for a story of `total` scenes"""
    total: int
    act1_end: int
    act2_end: int
    hook: Optional[int] = None
    inciting_incident: Optional[int] = None
    rising_action: range = range(0)
    midpoint: Optional[int] = None
    crisis: Optional[int] = None
    climax: Optional[int] = None
    resolution: Optional[int] = None

    def beat_at(self, position: int) -> BeatType:
        """Beat played by the scene at `position`; earlier beats take precedence"""
        if position == self.hook:
            return BeatType.HOOK
        if position == self.inciting_incident:
            return BeatType.INCITING_INCIDENT
        if position in self.rising_action:
            return BeatType.RISING_ACTION
        if position == self.midpoint:
            return BeatType.MIDPOINT
        if position == self.crisis:
            return BeatType.CRISIS
        if position == self.climax:
            return BeatType.CLIMAX
        if position == self.resolution:
            return BeatType.RESOLUTION
        return BeatType.SCENE


def compute_beat_positions(total: int) -> BeatPositions:
    """Three-act boundaries and beat positions for `total` scenes"""
    act1_end = int(total * ACT1_SHARE)
    act2_end = int(total * ACT2_SHARE)

    if total <= 0:
        return BeatPositions(total=0, act1_end=0, act2_end=0)

    return BeatPositions(
        total=total,
        act1_end=act1_end,
        act2_end=act2_end,
        hook=0,
        inciting_incident=min(2, total - 1),
        rising_action=range(min(3, total - 1), total // 2),
        midpoint=total // 2,
        crisis=max(0, act2_end - 1),
        climax=max(0, total - 2),
        resolution=total - 1,
    )


def classify_beat_position(index: int, total: int) -> BeatType:
    """
    Classify a position in the story without looking at the scene list.

    Unlike BeatPositions.beat_at, every early scene counts as setup and
    wide bands of the story map onto rising action and crisis, which makes
    this suitable for labelling a scene before the full story exists.

    Args:
        index: Zero-based scene position
        total: Number of scenes in the story

    Returns:
        Beat type for that position
    """
    if total <= 0 or not 0 <= index < total:
        raise ValidationError(f"Scene index {index} out of range for {total} scenes")

    position = index / total

    if index == 0:
        return BeatType.HOOK
    if index <= 2:
        return BeatType.INCITING_INCIDENT
    if position < 0.25:
        return BeatType.SETUP
    if position < 0.5:
        return BeatType.RISING_ACTION
    if abs(position - 0.5) < 0.05:
        return BeatType.MIDPOINT
    if position < 0.75:
        return BeatType.RISING_ACTION
    if position < 0.85:
        return BeatType.CRISIS
    if index == total - 2:
        return BeatType.CLIMAX
    if index == total - 1:
        return BeatType.RESOLUTION
    return BeatType.SCENE
