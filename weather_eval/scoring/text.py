"""Text normalization and weather-domain signals for answer scoring."""

from __future__ import annotations

import re
import unicodedata
from types import MappingProxyType
from typing import Optional

# Fraction of phrase tokens that must appear for a partial match
TOKEN_OVERLAP_THRESHOLD = 0.6

# Only the first word of a required phrase is looked up here
WEATHER_SYNONYMS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "temperature": ("temp", "degrees", "°f", "°c", "fahrenheit", "celsius"),
        "current": ("now", "currently", "right now", "as of"),
        "rain": ("raining", "precipitation", "showers", "drizzle"),
        "snow": ("snowing", "snowfall", "flurries"),
        "humidity": ("humid", "moisture"),
        "warmer": ("hotter", "warmer"),
        "today": ("today", "this day", "for today"),
        "weather": ("conditions", "forecast", "weather"),
        "visibility": ("visibility", "clear sight", "haze"),
    }
)

TOPIC_KEYWORDS: tuple[str, ...] = (
    "temperature",
    "weather",
    "°f",
    "°c",
    "degrees",
    "fahrenheit",
    "celsius",
    "rain",
    "snow",
    "humidity",
    "wind",
    "forecast",
    "conditions",
    "visibility",
    "sunrise",
    "sunset",
    "now",
    "today",
)

_DISALLOWED_CHARS = re.compile(r"[^a-z0-9°\s.\-]")
_WHITESPACE = re.compile(r"\s+")
_TEMPERATURE_WITH_UNIT = re.compile(
    r"\b\d{1,3}(\.\d+)?\s*°?\s*(f|c|fahrenheit|celsius)\b"
)


def normalize(text: Optional[str]) -> str:
    """Canonicalize text for substring and token comparison.

    - "São Paulo!" -> "sao paulo"
    - "54°F, Sunny" -> "54°f sunny"
    - "  Right\\nNow " -> "right now"
    """
    lowered = (text or "").lower()
    decomposed = unicodedata.normalize("NFD", lowered)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    cleaned = _DISALLOWED_CHARS.sub(" ", stripped)
    return _WHITESPACE.sub(" ", cleaned).strip()


def is_on_topic(text: Optional[str]) -> bool:
    """Check whether the text mentions any weather-domain keyword."""
    normalized = normalize(text)
    return any(keyword in normalized for keyword in TOPIC_KEYWORDS)


def has_temperature_with_unit(text: Optional[str]) -> bool:
    """Check whether the text states a temperature with a unit (e.g. "54°F")."""
    return _TEMPERATURE_WITH_UNIT.search(normalize(text)) is not None


def phrase_matches(normalized_output: str, phrase: str) -> bool:
    """Fuzzy containment test of an expected phrase against normalized output.

    Tries, in order: empty phrase (always matches), exact substring,
    synonyms of the phrase's first word, then partial token overlap
    of at least TOKEN_OVERLAP_THRESHOLD.

    Args:
        normalized_output: Output text already passed through normalize()
        phrase: Raw expected phrase

    Returns:
        True if the phrase is considered present
    """
    normalized_phrase = normalize(phrase)
    if not normalized_phrase:
        return True

    if normalized_phrase in normalized_output:
        return True

    tokens = normalized_phrase.split(" ")
    for synonym in WEATHER_SYNONYMS.get(tokens[0], ()):
        if normalize(synonym) in normalized_output:
            return True

    matched = sum(1 for token in tokens if token in normalized_output)
    return matched / len(tokens) >= TOKEN_OVERLAP_THRESHOLD
