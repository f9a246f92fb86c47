"""Scoring models for weather answer evaluation."""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class Difficulty(str, Enum):
    """Test case difficulty level."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class ExpectedSpec(BaseModel):
    """Structured expectation attached to a query.

    Only ``required_phrases`` drives scoring. Any other fields a test case
    carries (``toolsUsed``, ``expectedTemperature``...) are kept so the
    weather judge can show them to the model.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    required_phrases: list[str] = Field(
        default_factory=list,
        alias="requiredPhrases",
        description="Phrases the answer should contain, matched fuzzily",
    )

    @field_validator("required_phrases", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class ScoreInput(BaseModel):
    """The triple every scorer receives."""

    model_config = ConfigDict(populate_by_name=True)

    query: Optional[str] = Field(
        default=None, alias="input", description="The user's query"
    )
    output: str = Field(default="", description="The candidate answer text")
    expected: Optional[ExpectedSpec] = Field(
        default=None, description="Optional structured expectation"
    )

    @field_validator("output", mode="before")
    @classmethod
    def none_to_blank(cls, v: Any) -> Any:
        return "" if v is None else v


class ScoreResult(BaseModel):
    """A single named score with diagnostic metadata."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Stable scorer identifier")
    score: float = Field(..., ge=0.0, le=1.0, description="Score in [0, 1]")
    metadata: dict[str, Any] = Field(default_factory=dict)


class CaseMetadata(BaseModel):
    """Grouping information for an offline test case."""

    category: str = Field(default="uncategorized", description="e.g. 'weather_basic'")
    difficulty: Optional[Difficulty] = Field(default=None)


class ScoreCase(ScoreInput):
    """One offline test case with the assistant answer already captured."""

    id: str = Field(..., description="Unique case ID (e.g., 'case_001')")
    metadata: CaseMetadata = Field(default_factory=CaseMetadata)


class ScoreDataset(BaseModel):
    """Collection of offline test cases."""

    metadata: dict = Field(default_factory=dict)
    cases: list[ScoreCase] = Field(default_factory=list)


class CaseScores(BaseModel):
    """All scorer results for a single case."""

    case_id: str
    category: str = "uncategorized"
    difficulty: Optional[Difficulty] = None
    scores: dict[str, ScoreResult] = Field(default_factory=dict)
    latency_ms: int = Field(default=0, description="Wall time spent scoring")
    scored_at: datetime = Field(default_factory=datetime.utcnow)


class ScoringReport(BaseModel):
    """Aggregated results of a scoring run."""

    metadata: dict = Field(default_factory=dict)
    results: list[CaseScores] = Field(default_factory=list)

    @computed_field
    @property
    def mean_scores(self) -> dict[str, float]:
        """Average score per scorer across all results."""
        totals: dict[str, list[float]] = defaultdict(list)
        for result in self.results:
            for name, score in result.scores.items():
                totals[name].append(score.score)
        return {name: sum(values) / len(values) for name, values in totals.items()}

    @computed_field
    @property
    def category_means(self) -> dict[str, dict[str, float]]:
        """Average score per scorer, grouped by case category."""
        grouped: dict[str, dict[str, list[float]]] = defaultdict(
            lambda: defaultdict(list)
        )
        for result in self.results:
            for name, score in result.scores.items():
                grouped[result.category][name].append(score.score)
        return {
            category: {name: sum(v) / len(v) for name, v in by_scorer.items()}
            for category, by_scorer in grouped.items()
        }

    @computed_field
    @property
    def pass_rate(self) -> float:
        """Fraction of weather-judged cases that passed."""
        judged = [
            r.scores["weather_llm_judge"]
            for r in self.results
            if "weather_llm_judge" in r.scores
        ]
        if not judged:
            return 0.0
        return sum(1 for s in judged if s.metadata.get("pass") is True) / len(judged)
