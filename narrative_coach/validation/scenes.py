"""Scene indexing - validates the incoming scene list and fills in defaults"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from narrative_coach.models import Scene

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Raised when the analysis input has the wrong shape"""


class InvalidActionError(ValidationError):
    """Raised when an unknown analysis action is requested"""


# Optional string fields and the keys they may arrive under
_OPTIONAL_TEXT_FIELDS = {
    "setting": ("setting",),
    "mood": ("mood",),
    "image_url": ("imageUrl", "image_url"),
    "video_url": ("videoUrl", "video_url"),
}


def _as_mapping(raw: Any) -> Dict[str, Any]:
    """Get a plain dict view of a scene-like record"""
    if isinstance(raw, Scene):
        return raw.model_dump()
    if isinstance(raw, dict):
        return raw
    return {}


def _coerce_id(value: Any) -> int:
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return 0
    return 0


def _coerce_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _coerce_optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _coerce_duration(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value if value > 0 else None


def _coerce_characters(value: Any) -> List[str]:
    """Stringify character names and collapse repeated mentions"""
    if not isinstance(value, (list, tuple)):
        return []

    characters = []
    seen = set()
    for item in value:
        if item is None:
            continue
        name = _coerce_text(item).strip()
        if not name or name in seen:
            continue
        seen.add(name)
        characters.append(name)
    return characters


def _first_present(data: Dict[str, Any], keys: Sequence[str]) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def index_scenes(scenes: Any) -> List[Scene]:
    """
    Validate and normalize a scene list

    Args:
        scenes: List of scene dicts or Scene models, possibly incomplete

    Returns:
        Fully populated scenes in input order, each with its zero-based position

    Raises:
        ValidationError: If scenes is not a list
    """
    if not isinstance(scenes, (list, tuple)):
        raise ValidationError("Invalid request: scenes array required")

    indexed = []
    defaulted = 0

    for position, raw in enumerate(scenes):
        data = _as_mapping(raw)
        if not data:
            defaulted += 1

        optional = {
            field_name: _coerce_optional_text(_first_present(data, keys))
            for field_name, keys in _OPTIONAL_TEXT_FIELDS.items()
        }

        indexed.append(Scene(
            id=_coerce_id(data.get("id")),
            title=_coerce_text(data.get("title")),
            description=_coerce_text(data.get("description")),
            characters=_coerce_characters(data.get("characters")),
            duration=_coerce_duration(data.get("duration")),
            position=position,
            **optional
        ))

    if defaulted:
        logger.warning(f"[SceneIndexer] {defaulted} of {len(indexed)} scenes were empty or malformed, using defaults")
    logger.debug(f"[SceneIndexer] Indexed {len(indexed)} scenes")

    return indexed
