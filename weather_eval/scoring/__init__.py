"""Answer scoring for the weather chat assistant."""

from .models import (
    CaseMetadata,
    CaseScores,
    Difficulty,
    ExpectedSpec,
    ScoreCase,
    ScoreDataset,
    ScoreInput,
    ScoreResult,
    ScoringReport,
)
from .text import (
    TOPIC_KEYWORDS,
    WEATHER_SYNONYMS,
    has_temperature_with_unit,
    is_on_topic,
    normalize,
    phrase_matches,
)
from .heuristics import content_accuracy, contains_number, fahrenheit_presence
from .generation import OpenAIGenerator, TextGenerator, get_default_generator
from .llm_judge import (
    coerce_score,
    general_llm_judge,
    parse_judge_response,
    weather_llm_judge,
)
from .runner import ScoringRunner, score_online

__all__ = [
    # Enums
    "Difficulty",
    # Models
    "CaseMetadata",
    "CaseScores",
    "ExpectedSpec",
    "ScoreCase",
    "ScoreDataset",
    "ScoreInput",
    "ScoreResult",
    "ScoringReport",
    # Text
    "TOPIC_KEYWORDS",
    "WEATHER_SYNONYMS",
    "has_temperature_with_unit",
    "is_on_topic",
    "normalize",
    "phrase_matches",
    # Rule-based scorers
    "content_accuracy",
    "contains_number",
    "fahrenheit_presence",
    # Generation
    "OpenAIGenerator",
    "TextGenerator",
    "get_default_generator",
    # Judges
    "coerce_score",
    "general_llm_judge",
    "parse_judge_response",
    "weather_llm_judge",
    # Runner
    "ScoringRunner",
    "score_online",
]
