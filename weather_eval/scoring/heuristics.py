"""Rule-based scorers for weather answers."""

from __future__ import annotations

import re
from typing import Any, Optional, Union

from .calibration import (
    CONTENT_ON_TOPIC_FLOOR,
    CONTENT_TEMPERATURE_FLOOR,
    Signals,
    clamp_score,
)
from .models import ExpectedSpec, ScoreResult
from .text import normalize, phrase_matches

_FAHRENHEIT = re.compile(r"fahrenheit|\bF\b", re.IGNORECASE)
_DIGIT = re.compile(r"\d")


def coerce_expected(expected: Union[ExpectedSpec, dict, None]) -> ExpectedSpec:
    """Accept an ExpectedSpec, a raw dict (camelCase or snake_case), or None."""
    if expected is None:
        return ExpectedSpec()
    if isinstance(expected, ExpectedSpec):
        return expected
    return ExpectedSpec.model_validate(expected)


def content_accuracy(
    output: Optional[str],
    expected: Union[ExpectedSpec, dict, None] = None,
    **_: Any,
) -> ScoreResult:
    """Score how many required phrases the answer covers, with lenient floors.

    The raw score is the fraction of required phrases that match (1.0 when
    none are required). An on-topic answer is raised to at least 0.6 and an
    answer stating a temperature with a unit to at least 0.75.

    Args:
        output: The assistant's answer
        expected: Expectation carrying ``required_phrases``

    Returns:
        ScoreResult named ``content_accuracy``
    """
    phrases = coerce_expected(expected).required_phrases
    text = output or ""
    normalized = normalize(text)

    found = [phrase for phrase in phrases if phrase_matches(normalized, phrase)]
    raw_score = len(found) / len(phrases) if phrases else 1.0

    signals = Signals.detect(text)
    calibrated = raw_score
    if signals.on_topic:
        calibrated = max(calibrated, CONTENT_ON_TOPIC_FLOOR)
    if signals.has_temp_with_unit:
        calibrated = max(calibrated, CONTENT_TEMPERATURE_FLOOR)

    return ScoreResult(
        name="content_accuracy",
        score=clamp_score(calibrated),
        metadata={
            "required_phrases": list(phrases),
            "found_phrases": found,
            "raw_score": raw_score,
            "on_topic": signals.on_topic,
            "has_temp_with_unit": signals.has_temp_with_unit,
            "calibration": "lenient-floor",
        },
    )


def fahrenheit_presence(output: Optional[str], **_: Any) -> ScoreResult:
    """1.0 if the answer mentions Fahrenheit (or a standalone "F"), else 0.0."""
    present = bool(_FAHRENHEIT.search(output or ""))
    return ScoreResult(name="fahrenheit_presence", score=1.0 if present else 0.0)


def contains_number(output: Optional[str], **_: Any) -> ScoreResult:
    """1.0 if the answer contains any digit, else 0.0."""
    present = bool(_DIGIT.search(output or ""))
    return ScoreResult(name="contains_number", score=1.0 if present else 0.0)
