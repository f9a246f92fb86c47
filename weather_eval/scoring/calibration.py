"""Calibration floors applied on top of raw and judge scores.

Floors only ever raise a score. They fire on independent signals from the
answer text: any weather keyword (on-topic) or a stated temperature with a
unit. These constants were tuned against the weather test cases; changing
them requires re-running the offline scoring.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .text import has_temperature_with_unit, is_on_topic

CONTENT_ON_TOPIC_FLOOR = 0.6
CONTENT_TEMPERATURE_FLOOR = 0.75

WEATHER_JUDGE_ON_TOPIC_FLOOR = 0.65
WEATHER_JUDGE_TEMPERATURE_FLOOR = 0.75

GENERAL_JUDGE_ON_TOPIC_FLOOR = 0.6
GENERAL_JUDGE_TEMPERATURE_FLOOR = 0.7


@dataclass(frozen=True)
class Signals:
    """Detector output for one answer."""

    on_topic: bool
    has_temp_with_unit: bool

    @classmethod
    def detect(cls, output: str) -> Signals:
        return cls(
            on_topic=is_on_topic(output),
            has_temp_with_unit=has_temperature_with_unit(output),
        )

    def soft_floor(self, on_topic_floor: float, temperature_floor: float) -> float:
        """Floor for a judge score: temperature beats topic, else none."""
        if self.has_temp_with_unit:
            return temperature_floor
        if self.on_topic:
            return on_topic_floor
        return 0.0


def clamp_score(value: float) -> float:
    """Clamp into [0, 1]; NaN becomes 0."""
    if math.isnan(value):
        return 0.0
    return min(1.0, max(0.0, value))
