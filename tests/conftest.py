"""Shared pytest fixtures for weather answer scoring tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from config.settings import get_settings
from weather_eval.scoring.generation import get_default_generator


@pytest.fixture(autouse=True)
def clear_cached_settings():
    """Reset cached settings and generator between tests."""
    get_settings.cache_clear()
    get_default_generator.cache_clear()
    yield
    get_settings.cache_clear()
    get_default_generator.cache_clear()


# =============================================================================
# Generators
# =============================================================================


@pytest.fixture
def make_generator() -> Callable[..., MagicMock]:
    """Factory for a text generator whose ``generate`` is an AsyncMock.

    Pass ``text`` for a fixed reply or ``error`` to make the call raise.
    """

    def _make(text: str = "", error: Exception | None = None) -> MagicMock:
        generator = MagicMock()
        if error is not None:
            generator.generate = AsyncMock(side_effect=error)
        else:
            generator.generate = AsyncMock(return_value=text)
        return generator

    return _make


# =============================================================================
# Sample Answers
# =============================================================================


@pytest.fixture
def temperature_answer() -> str:
    """Answer stating a temperature with a unit."""
    return "The current temperature in Philadelphia is 54°F."


@pytest.fixture
def on_topic_answer() -> str:
    """Weather answer with no quantified temperature."""
    return "It might rain later in Boston, so plan accordingly."


@pytest.fixture
def off_topic_answer() -> str:
    """Answer with no weather signal at all."""
    return "Could you tell me which city you are asking about?"


# =============================================================================
# Datasets
# =============================================================================


@pytest.fixture
def sample_dataset() -> dict:
    """Small dataset covering two categories."""
    return {
        "metadata": {"name": "test-cases"},
        "cases": [
            {
                "id": "case_001",
                "input": "What's the weather in Philadelphia?",
                "output": "The current temperature in Philadelphia is 54°F.",
                "expected": {
                    "requiredPhrases": ["temperature", "Philadelphia", "current"]
                },
                "metadata": {"category": "weather_basic", "difficulty": "easy"},
            },
            {
                "id": "case_002",
                "input": "Weather in Atlantis",
                "output": "Could you tell me which city you are asking about?",
                "expected": {"requiredPhrases": ["Atlantis"]},
                "metadata": {"category": "weather_edge_cases", "difficulty": "hard"},
            },
            {
                "id": "case_003",
                "input": "Tell me the temperature in London",
                "output": "London is at 12°C right now.",
                "expected": {"requiredPhrases": ["temperature", "London"]},
                "metadata": {"category": "weather_basic", "difficulty": "easy"},
            },
        ],
    }


@pytest.fixture
def dataset_file(tmp_path: Path, sample_dataset: dict) -> Path:
    """Sample dataset written to a temporary JSON file."""
    path = tmp_path / "cases.json"
    path.write_text(json.dumps(sample_dataset), encoding="utf-8")
    return path
