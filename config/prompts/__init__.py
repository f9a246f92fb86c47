"""Centralized prompt management for the weather answer scoring engine.

Prompts are organized by functional area:
- evaluation: LLM judge rubrics for scoring assistant answers

Usage:
    from config.prompts import WEATHER_JUDGE_PROMPT
    from config.prompts.evaluation import GENERAL_JUDGE_PROMPT
"""

from __future__ import annotations

from .evaluation import GENERAL_JUDGE_PROMPT, WEATHER_JUDGE_PROMPT

__all__ = [
    # Evaluation prompts
    "WEATHER_JUDGE_PROMPT",
    "GENERAL_JUDGE_PROMPT",
]
