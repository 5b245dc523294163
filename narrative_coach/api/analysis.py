"""
Single entry point for narrative analysis requests.

Used by the CLI and by any web backend that exposes the analysis over
HTTP. Callers pass the scene list and an action name; the result is a
plain JSON-ready dict keyed the same way as the analysis endpoint
responses. Stateless: nothing is kept between calls.
"""

import asyncio
import logging
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel

from narrative_coach.analysis import NarrativeEngine
from narrative_coach.validation import ValidationError, InvalidActionError, index_scenes

logger = logging.getLogger(__name__)


class Action(str, Enum):
    """Analysis to perform"""
    ANALYZE_ARC = "analyze_arc"
    TENSION_CURVE = "tension_curve"
    COACHING = "coaching"
    SCENE_DURATIONS = "scene_durations"
    EMOTIONAL_PEAKS = "emotional_peaks"
    COMPLETENESS = "completeness"
    FULL_ANALYSIS = "full_analysis"


def _dump(value: Any) -> Any:
    """Serialize models (and lists of models) with camelCase keys"""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, list):
        return [_dump(item) for item in value]
    return value


def _parse_action(action: Union[Action, str, None]) -> Action:
    if isinstance(action, Action):
        return action
    try:
        return Action(action)
    except ValueError:
        valid = ", ".join(a.value for a in Action)
        raise InvalidActionError(f"Invalid action. Use: {valid}") from None


def analyze(
    scenes: Any,
    action: Union[Action, str] = Action.FULL_ANALYSIS,
    engine: Optional[NarrativeEngine] = None
) -> Dict[str, Any]:
    """
    Run one analysis over a scene list.

    The scene list is validated before the action is looked at, so a
    malformed request never does any work.

    Args:
        scenes: List of scene records
        action: Which analysis to run
        engine: Engine to use (a fresh one if not given)

    Returns:
        JSON-ready dict, e.g. {"arc": {...}} or the full analysis object

    Raises:
        ValidationError: If scenes is not a list
        InvalidActionError: If the action is unknown
    """
    indexed = index_scenes(scenes)
    action = _parse_action(action)
    engine = engine or NarrativeEngine()

    logger.info(f"[NarrativeAnalysis] {action.value} on {len(indexed)} scenes")

    if action == Action.ANALYZE_ARC:
        return {"arc": _dump(engine.analyze_story_arc(indexed))}

    if action == Action.TENSION_CURVE:
        return {"tensionCurve": _dump(engine.calculate_tension_curve(indexed))}

    if action == Action.COACHING:
        return {"suggestions": _dump(engine.generate_coaching_suggestions(indexed))}

    if action == Action.SCENE_DURATIONS:
        return {"durations": _dump(engine.suggest_scene_durations(indexed))}

    if action == Action.EMOTIONAL_PEAKS:
        return {"peaks": engine.detect_emotional_peaks(indexed)}

    if action == Action.COMPLETENESS:
        return {"completeness": _dump(engine.analyze_story_completeness(indexed))}

    return _dump(engine.full_analysis(indexed))


def handle_request(payload: Any, engine: Optional[NarrativeEngine] = None) -> Dict[str, Any]:
    """
    Handle a request body of the form {"scenes": [...], "action": "..."}

    A missing action runs the full analysis.
    """
    if not isinstance(payload, Mapping):
        raise ValidationError("Invalid request: JSON object with a scenes array required")

    return analyze(
        payload.get("scenes"),
        payload.get("action") or Action.FULL_ANALYSIS,
        engine=engine
    )


async def run_analysis(
    scenes: Any,
    action: Union[Action, str] = Action.FULL_ANALYSIS,
    engine: Optional[NarrativeEngine] = None
) -> Dict[str, Any]:
    """
    Async variant of analyze() for use inside an event loop.

    The analysis is CPU-only, so it runs in a worker thread to keep the
    loop responsive for large stories.
    """
    return await asyncio.to_thread(analyze, scenes, action, engine)


def describe_api() -> Dict[str, Any]:
    """Usage document for the analysis endpoint"""
    return {
        "message": "Narrative Analysis API",
        "endpoints": {
            "POST": {
                "description": "Analyze story narrative structure",
                "body": {
                    "scenes": "Array of scene objects",
                    "action": " | ".join(a.value for a in Action)
                }
            }
        },
        "example": {
            "scenes": [
                {
                    "id": 1,
                    "title": "Opening Scene",
                    "description": "Hero discovers mysterious artifact",
                    "characters": ["Hero", "Mentor"],
                    "duration": 5
                }
            ],
            "action": Action.FULL_ANALYSIS.value
        }
    }
