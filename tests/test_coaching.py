"""Tests for coaching suggestions"""

import pytest

from narrative_coach.analysis import (
    StoryArcAnalyzer,
    CoachingSuggestionGenerator,
    count_character_appearances,
)
from narrative_coach.models import SuggestionType, Severity
from narrative_coach.validation import index_scenes


@pytest.fixture
def coach():
    return CoachingSuggestionGenerator()


@pytest.fixture
def run_coach(coach):
    analyzer = StoryArcAnalyzer()

    def _run(raw_scenes):
        scenes = index_scenes(raw_scenes)
        return coach.generate(scenes, analyzer.analyze(scenes))

    return _run


def kinds(suggestions):
    return [(s.type, s.severity, s.message) for s in suggestions]


def test_empty_story(run_coach):
    """Too short and no peaks; Act 2 rules need at least one scene"""
    assert kinds(run_coach([])) == [
        (SuggestionType.STRUCTURE, Severity.WARNING, "Story is very short"),
        (SuggestionType.EMOTION, Severity.CRITICAL, "No emotional peaks detected"),
    ]


def test_single_scene(run_coach, make_scenes):
    assert kinds(run_coach(make_scenes(1))) == [
        (SuggestionType.STRUCTURE, Severity.WARNING, "Story is very short"),
        (SuggestionType.STRUCTURE, Severity.WARNING, "Act 2 is too short"),
        (SuggestionType.EMOTION, Severity.CRITICAL, "No emotional peaks detected"),
    ]


def test_short_story_skips_character_rule(run_coach, make_scenes):
    """A one-off character in a two scene story is not flagged"""
    scenes = make_scenes(2, characters=[["Ana", "Ben"], ["Ana"]])
    suggestions = run_coach(scenes)

    assert all(s.type != SuggestionType.CHARACTER for s in suggestions)
    assert (SuggestionType.STRUCTURE, Severity.WARNING, "Story is very short") in kinds(suggestions)


def test_act2_too_long(run_coach, make_scenes):
    """Three scenes put two of them in Act 2"""
    suggestions = run_coach(make_scenes(3))

    assert (SuggestionType.PACING, Severity.WARNING, "Act 2 is too long") in kinds(suggestions)


def test_many_scenes(run_coach, make_scenes):
    suggestions = run_coach(make_scenes(31))

    assert (SuggestionType.PACING, Severity.INFO, "Story has many scenes") in kinds(suggestions)
    assert all(s.type != SuggestionType.STRUCTURE for s in suggestions)


def test_single_appearance_characters(run_coach, make_scenes):
    characters = [["Ana"] for _ in range(8)]
    characters[3] = ["Ana", "Ben", "Ben"]
    characters[5] = ["Cy", "Ana"]

    suggestions = run_coach(make_scenes(8, characters=characters))

    assert kinds(suggestions) == [
        (SuggestionType.CHARACTER, Severity.INFO, 'Character "Ben" appears in only one scene'),
        (SuggestionType.CHARACTER, Severity.INFO, 'Character "Cy" appears in only one scene'),
    ]
    assert "Ben's role" in suggestions[0].suggestion
    assert all(s.actionable for s in suggestions)
    assert all(s.scene_id is None for s in suggestions)


def test_similar_durations(run_coach, make_scenes):
    """Six scenes all pinned to the same duration"""
    suggestions = run_coach(make_scenes(6, duration=5))

    assert kinds(suggestions) == [
        (SuggestionType.PACING, Severity.INFO, "All scenes have similar duration"),
    ]


def test_varied_durations(run_coach, make_scenes):
    """Computed durations range from 3 to 8 seconds"""
    suggestions = run_coach(make_scenes(8))

    assert suggestions == []


@pytest.mark.parametrize("count,flagged", [(2, True), (3, False)])
def test_short_story_threshold(run_coach, make_scenes, count, flagged):
    suggestions = run_coach(make_scenes(count))

    assert ((SuggestionType.STRUCTURE, Severity.WARNING, "Story is very short") in kinds(suggestions)) is flagged


@pytest.mark.parametrize("count,flagged", [(30, False), (31, True)])
def test_many_scenes_threshold(run_coach, make_scenes, count, flagged):
    suggestions = run_coach(make_scenes(count))

    assert ((SuggestionType.PACING, Severity.INFO, "Story has many scenes") in kinds(suggestions)) is flagged


def test_five_scenes_skip_detailed_rules(run_coach, make_scenes):
    """A one-off character and equal durations pass unnoticed in five scenes"""
    characters = [["Ana"] for _ in range(5)]
    characters[2] = ["Ana", "Ben"]

    suggestions = run_coach(make_scenes(5, characters=characters, duration=5))

    assert suggestions == []


def test_six_scenes_flag_single_appearance(run_coach, make_scenes):
    characters = [["Ana"] for _ in range(6)]
    characters[2] = ["Ana", "Ben"]

    suggestions = run_coach(make_scenes(6, characters=characters))

    assert kinds(suggestions) == [
        (SuggestionType.CHARACTER, Severity.INFO, 'Character "Ben" appears in only one scene'),
    ]


def test_fresh_each_call(run_coach, make_scenes):
    scenes = make_scenes(1)

    assert run_coach(scenes) == run_coach(scenes)


def test_count_character_appearances(make_scenes):
    scenes = index_scenes(make_scenes(3, characters=[["Ben", "Ana", "Ben"], ["Ana"], []]))

    assert count_character_appearances(scenes) == {"Ben": 1, "Ana": 2}
    assert list(count_character_appearances(scenes)) == ["Ben", "Ana"]
