"""Tests for the analysis entry points"""

import pytest

from narrative_coach.analysis import NarrativeEngine
from narrative_coach.api import Action, analyze, handle_request, run_analysis, describe_api
from narrative_coach.models import NarrativeAnalysis
from narrative_coach.validation import ValidationError, InvalidActionError


@pytest.fixture
def story(make_scenes):
    characters = [["Mara"] for _ in range(9)]
    characters[2] = ["Mara", "Idris", "Quill"]
    characters[6] = ["Mara", "Idris"]
    scenes = make_scenes(ids=[11, 12, 13, 14, 15, 16, 17, 18, 19], characters=characters)
    scenes[4]["description"] = "The vault door gives way. " * 12
    return scenes


class TestAnalyze:
    """Test analyze()"""

    def test_analyze_arc(self, story):
        result = analyze(story, "analyze_arc")

        arc = result["arc"]
        assert list(result) == ["arc"]
        assert arc["acts"]["act1"]["scenes"] == [11, 12]
        assert arc["beats"]["hook"] == 11
        assert arc["beats"]["incitingIncident"] == 13
        assert arc["beats"]["risingAction"] == [14]
        assert arc["pacing"]["sceneDistribution"][0] == {
            "sceneId": 11,
            "suggestedDuration": 3,
            "beatType": "hook",
        }
        assert arc["pacing"]["totalDuration"] == sum(
            d["suggestedDuration"] for d in arc["pacing"]["sceneDistribution"]
        )

    def test_tension_curve(self, story):
        curve = analyze(story, Action.TENSION_CURVE)["tensionCurve"]

        assert [p["sceneId"] for p in curve] == [11, 12, 13, 14, 15, 16, 17, 18, 19]
        assert set(curve[0]) == {"sceneId", "tensionLevel", "emotionalPeak"}

    def test_coaching(self, story):
        suggestions = analyze(story, "coaching")["suggestions"]

        assert {"type": "character", "severity": "info"}.items() <= suggestions[0].items()
        assert suggestions[0]["message"] == 'Character "Quill" appears in only one scene'
        assert suggestions[0]["sceneId"] is None

    def test_scene_durations(self, story):
        durations = analyze(story, "scene_durations")["durations"]

        assert len(durations) == 9
        assert durations[2] == {"sceneId": 13, "suggestedDuration": 7, "beatType": "inciting_incident"}

    def test_emotional_peaks(self, story):
        peaks = analyze(story, "emotional_peaks")["peaks"]

        assert peaks
        assert all(isinstance(peak, int) for peak in peaks)

    def test_completeness(self, story):
        completeness = analyze(story, "completeness")["completeness"]

        assert completeness["hasHook"] is True
        assert completeness["characterDevelopment"] in ("weak", "moderate", "strong")
        assert 0 <= completeness["overallScore"] <= 100

    def test_full_analysis_matches_parts(self, story):
        """The combined result equals the individual actions"""
        full = analyze(story, "full_analysis")

        assert full == {
            "arc": analyze(story, "analyze_arc")["arc"],
            "tensionCurve": analyze(story, "tension_curve")["tensionCurve"],
            "suggestions": analyze(story, "coaching")["suggestions"],
            "emotionalPeaks": analyze(story, "emotional_peaks")["peaks"],
            "completeness": analyze(story, "completeness")["completeness"],
        }
        NarrativeAnalysis.model_validate(full)

    def test_deterministic(self, story):
        assert analyze(story) == analyze(story)

    def test_empty_story(self):
        full = analyze([], "full_analysis")

        assert full["arc"]["acts"]["act1"]["scenes"] == []
        assert full["arc"]["acts"]["act3"]["scenes"] == []
        assert full["arc"]["beats"]["hook"] is None
        assert full["tensionCurve"] == []
        assert full["emotionalPeaks"] == []
        assert full["completeness"]["overallScore"] == 0

    def test_rejects_non_list_before_action(self):
        with pytest.raises(ValidationError) as exc_info:
            analyze({"scenes": []}, "not_an_action")

        assert not isinstance(exc_info.value, InvalidActionError)

    def test_rejects_unknown_action(self, story):
        with pytest.raises(InvalidActionError, match="full_analysis"):
            analyze(story, "summarize")

    def test_shared_engine(self, story):
        engine = NarrativeEngine()

        assert analyze(story, "completeness", engine=engine) == analyze(story, "completeness")


class TestHandleRequest:
    """Test handle_request()"""

    def test_request_body(self, story):
        result = handle_request({"scenes": story, "action": "emotional_peaks"})

        assert list(result) == ["peaks"]

    def test_missing_action_runs_full_analysis(self, story):
        result = handle_request({"scenes": story})

        assert set(result) == {"arc", "tensionCurve", "suggestions", "emotionalPeaks", "completeness"}

    @pytest.mark.parametrize("payload", [None, [], {"scenes": None}, {"scenes": "abc"}])
    def test_invalid_body(self, payload):
        with pytest.raises(ValidationError):
            handle_request(payload)


@pytest.mark.asyncio
async def test_run_analysis(story):
    result = await run_analysis(story, "coaching")

    assert result == analyze(story, "coaching")


def test_describe_api():
    doc = describe_api()

    assert "full_analysis" in doc["endpoints"]["POST"]["body"]["action"]
    assert doc["example"]["action"] == "full_analysis"
    assert analyze(doc["example"]["scenes"], doc["example"]["action"])["arc"]["beats"]["hook"] == 1
