"""LLM-as-a-judge scorers for weather answers.

Both judges send a rubric prompt to a text generator, recover a JSON verdict
from whatever comes back, clamp the score, then raise it to a calibration
floor computed from the answer text alone. A failing judge never raises:
it returns a 0 score carrying the error.
"""

from __future__ import annotations

import json
import math
from typing import Any, Optional, Union

import structlog

from config.prompts import GENERAL_JUDGE_PROMPT, WEATHER_JUDGE_PROMPT
from config.settings import get_settings
from weather_eval.observability.context import get_context

from .calibration import (
    GENERAL_JUDGE_ON_TOPIC_FLOOR,
    GENERAL_JUDGE_TEMPERATURE_FLOOR,
    WEATHER_JUDGE_ON_TOPIC_FLOOR,
    WEATHER_JUDGE_TEMPERATURE_FLOOR,
    Signals,
    clamp_score,
)
from .generation import TextGenerator, get_default_generator
from .models import ExpectedSpec, ScoreResult

logger = structlog.get_logger(__name__)

WEATHER_PASS_THRESHOLD = 0.65

# Prompt truncation limits (characters)
WEATHER_QUERY_LIMIT = 2000
WEATHER_OUTPUT_LIMIT = 3000
WEATHER_EXPECTED_LIMIT = 1000
GENERAL_TEXT_LIMIT = 4000

_decoder = json.JSONDecoder()


def parse_judge_response(text: str) -> dict:
    """Recover a JSON verdict from judge output.

    Tries the whole text first, then the first balanced ``{...}`` object
    starting at the first opening brace. Anything that is not a JSON
    object yields an empty verdict.
    """
    try:
        parsed = json.loads(text)
    except ValueError:
        start = text.find("{")
        if start == -1:
            logger.debug("judge_json_not_found", text=text[:200])
            return {}
        try:
            parsed, _ = _decoder.raw_decode(text, start)
        except ValueError:
            logger.debug("judge_json_parse_failed", text=text[:200])
            return {}

    return parsed if isinstance(parsed, dict) else {}


def coerce_score(value: Any) -> Optional[float]:
    """Convert a judge's score to a finite float, or None if it isn't one."""
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def _expected_as_json(expected: Union[ExpectedSpec, dict, None]) -> str:
    if isinstance(expected, ExpectedSpec):
        payload = expected.model_dump(by_alias=True)
    else:
        payload = expected or {}
    return json.dumps(payload, indent=2, ensure_ascii=False, default=str)


async def _generate_verdict(
    prompt: str,
    model: str,
    temperature: Optional[float],
    generator: Optional[TextGenerator],
) -> tuple[str, dict]:
    generator = generator or get_default_generator()
    text = await generator.generate(model, prompt, temperature)
    text = text or ""
    return text, parse_judge_response(text)


async def weather_llm_judge(
    query: Optional[str],
    output: Optional[str],
    expected: Union[ExpectedSpec, dict, None] = None,
    *,
    generator: Optional[TextGenerator] = None,
    **_: Any,
) -> ScoreResult:
    """Weather-specific rubric judge.

    Args:
        query: The user's weather question
        output: The assistant's answer
        expected: Optional expectation, shown to the judge as JSON
        generator: Text generator; defaults to the OpenAI generator from settings

    Returns:
        ScoreResult named ``weather_llm_judge``; score 0 with ``error`` on failure
    """
    name = "weather_llm_judge"
    text_output = output or ""

    try:
        settings = get_settings()
        prompt = WEATHER_JUDGE_PROMPT.format(
            query=(query or "")[:WEATHER_QUERY_LIMIT],
            output=text_output[:WEATHER_OUTPUT_LIMIT],
            expected=_expected_as_json(expected)[:WEATHER_EXPECTED_LIMIT],
        )
        text, verdict = await _generate_verdict(
            prompt,
            settings.weather_judge_model,
            settings.weather_judge_temperature,
            generator,
        )

        raw_score = coerce_score(verdict.get("score"))
        score = clamp_score(raw_score) if raw_score is not None else 0.0

        signals = Signals.detect(text_output)
        soft_floor = signals.soft_floor(
            WEATHER_JUDGE_ON_TOPIC_FLOOR, WEATHER_JUDGE_TEMPERATURE_FLOOR
        )
        score = max(score, soft_floor)

        reason = verdict.get("reason")
        if reason is None:
            reason = text[:1000] or "No evaluation provided"

        logger.debug(
            "judge_scored",
            scorer=name,
            score=score,
            raw_score=raw_score,
            soft_floor=soft_floor,
            **get_context(),
        )

        return ScoreResult(
            name=name,
            score=score,
            metadata={
                "reason": reason,
                "pass": score >= WEATHER_PASS_THRESHOLD,
                "judge_pass": verdict.get("pass"),
                "weather_feedback": verdict.get("weather_specific_feedback") or {},
                "evaluation_focus": "weather_domain_specific",
                "calibration": {
                    "soft_floor": soft_floor,
                    "on_topic": signals.on_topic,
                    "has_temp_with_unit": signals.has_temp_with_unit,
                    "raw_score": raw_score,
                },
            },
        )

    except Exception as e:
        logger.warning("judge_failed", scorer=name, error=str(e), **get_context())
        return ScoreResult(
            name=name,
            score=0.0,
            metadata={
                "error": str(e),
                "reason": "Weather evaluation failed due to technical error",
                "pass": False,
            },
        )


async def general_llm_judge(
    query: Optional[str],
    output: Optional[str],
    expected: Union[ExpectedSpec, dict, None] = None,
    *,
    generator: Optional[TextGenerator] = None,
    **_: Any,
) -> ScoreResult:
    """Lenient general-purpose judge. ``expected`` is accepted but unused."""
    name = "general_llm_judge"
    text_output = output or ""

    try:
        settings = get_settings()
        prompt = GENERAL_JUDGE_PROMPT.format(
            query=(query or "")[:GENERAL_TEXT_LIMIT],
            output=text_output[:GENERAL_TEXT_LIMIT],
        )
        text, verdict = await _generate_verdict(
            prompt,
            settings.general_judge_model,
            settings.general_judge_temperature,
            generator,
        )

        raw_score = coerce_score(verdict.get("score"))
        score = clamp_score(raw_score) if raw_score is not None else 0.0

        signals = Signals.detect(text_output)
        soft_floor = signals.soft_floor(
            GENERAL_JUDGE_ON_TOPIC_FLOOR, GENERAL_JUDGE_TEMPERATURE_FLOOR
        )
        score = max(score, soft_floor)

        reason = verdict.get("reason")
        if reason is None:
            reason = text[:500]

        logger.debug(
            "judge_scored",
            scorer=name,
            score=score,
            raw_score=raw_score,
            soft_floor=soft_floor,
            **get_context(),
        )

        return ScoreResult(
            name=name,
            score=score,
            metadata={
                "reason": reason,
                "calibration": {
                    "soft_floor": soft_floor,
                    "on_topic": signals.on_topic,
                    "has_temp_with_unit": signals.has_temp_with_unit,
                    "raw_score": raw_score,
                },
            },
        )

    except Exception as e:
        logger.warning("judge_failed", scorer=name, error=str(e), **get_context())
        return ScoreResult(name=name, score=0.0, metadata={"error": str(e)})
