"""Shared fixtures"""

import pytest


@pytest.fixture
def make_scenes():
    """Factory for scene dicts with ids 1..n (or the given ids)"""

    def _make(count=None, ids=None, characters=None, **fields):
        ids = list(ids) if ids is not None else list(range(1, (count or 0) + 1))
        scenes = []
        for index, scene_id in enumerate(ids):
            scene = {
                "id": scene_id,
                "title": f"Scene {scene_id}",
                "description": f"Something happens in scene {scene_id}.",
                "characters": list(characters[index]) if characters else [],
            }
            scene.update(fields)
            scenes.append(scene)
        return scenes

    return _make
