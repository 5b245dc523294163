"""Input validation for the analysis engine"""

from .scenes import ValidationError, InvalidActionError, index_scenes

__all__ = [
    "ValidationError",
    "InvalidActionError",
    "index_scenes",
]
