"""Tests for scoring models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from weather_eval.scoring import (
    CaseScores,
    Difficulty,
    ExpectedSpec,
    ScoreCase,
    ScoreInput,
    ScoreResult,
    ScoringReport,
)


class TestScoreResult:
    """Tests for ScoreResult model."""

    def test_create(self):
        result = ScoreResult(name="content_accuracy", score=0.75, metadata={"a": 1})
        assert result.score == 0.75
        assert result.metadata == {"a": 1}

    def test_is_immutable(self):
        result = ScoreResult(name="content_accuracy", score=0.5)
        with pytest.raises(ValidationError):
            result.score = 0.9

    @pytest.mark.parametrize("score", [-0.1, 1.1])
    def test_rejects_out_of_range(self, score):
        with pytest.raises(ValidationError):
            ScoreResult(name="x", score=score)


class TestScoreInput:
    """Tests for ScoreInput and ExpectedSpec."""

    def test_aliases(self):
        score_input = ScoreInput.model_validate(
            {
                "input": "Weather in Paris",
                "output": "Paris is 18°C.",
                "expected": {"requiredPhrases": ["Paris", "temperature"]},
            }
        )

        assert score_input.query == "Weather in Paris"
        assert score_input.expected.required_phrases == ["Paris", "temperature"]

    def test_defaults(self):
        score_input = ScoreInput(output=None)

        assert score_input.query is None
        assert score_input.output == ""
        assert score_input.expected is None

    def test_expected_defaults_empty(self):
        assert ExpectedSpec().required_phrases == []


class TestScoreCase:
    """Tests for ScoreCase model."""

    def test_metadata(self):
        case = ScoreCase.model_validate(
            {
                "id": "case_010",
                "input": "Is it snowing in Moscow today?",
                "output": "Yes, light snow in Moscow today at -5°C.",
                "metadata": {"category": "weather_conditions", "difficulty": "medium"},
            }
        )

        assert case.metadata.difficulty == Difficulty.MEDIUM
        assert case.expected is None

    def test_default_category(self):
        case = ScoreCase(id="case_011", output="hi")
        assert case.metadata.category == "uncategorized"


class TestScoringReport:
    """Tests for ScoringReport aggregates."""

    def test_empty(self):
        report = ScoringReport()

        assert report.mean_scores == {}
        assert report.category_means == {}
        assert report.pass_rate == 0.0

    def test_aggregates(self):
        report = ScoringReport(
            results=[
                CaseScores(
                    case_id="a",
                    category="weather_basic",
                    scores={
                        "content_accuracy": ScoreResult(name="content_accuracy", score=1.0),
                        "weather_llm_judge": ScoreResult(
                            name="weather_llm_judge", score=0.8, metadata={"pass": True}
                        ),
                    },
                ),
                CaseScores(
                    case_id="b",
                    category="weather_units",
                    scores={
                        "content_accuracy": ScoreResult(name="content_accuracy", score=0.5),
                        "weather_llm_judge": ScoreResult(
                            name="weather_llm_judge", score=0.4, metadata={"pass": False}
                        ),
                    },
                ),
            ]
        )

        assert report.mean_scores["content_accuracy"] == pytest.approx(0.75)
        assert report.mean_scores["weather_llm_judge"] == pytest.approx(0.6)
        assert report.category_means["weather_units"] == {
            "content_accuracy": 0.5,
            "weather_llm_judge": 0.4,
        }
        assert report.pass_rate == 0.5
