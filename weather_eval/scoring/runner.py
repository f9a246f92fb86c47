"""Online and offline scoring runs for weather answers."""

from __future__ import annotations

import asyncio
import json
import time
import uuid
from pathlib import Path
from typing import Callable, Optional

import structlog

from weather_eval.observability.context import (
    case_context,
    clear_run_context,
    get_context,
    set_run_context,
)

from .generation import TextGenerator
from .heuristics import content_accuracy, contains_number, fahrenheit_presence
from .llm_judge import general_llm_judge, weather_llm_judge
from .models import CaseScores, ScoreCase, ScoreDataset, ScoreResult, ScoringReport

logger = structlog.get_logger(__name__)

# Generic phrases checked for live traffic, where no test case exists
ONLINE_REQUIRED_PHRASES = ("temperature", "weather")


async def score_online(
    query: Optional[str],
    output: Optional[str],
    generator: Optional[TextGenerator] = None,
) -> dict[str, ScoreResult]:
    """Score a live answer with every scorer.

    The two judges run concurrently. Judge failures come back as 0 scores,
    so this never raises for a misbehaving model.

    Args:
        query: The user's last message
        output: The full assistant answer
        generator: Optional text generator for the judges

    Returns:
        Mapping of scorer name to ScoreResult
    """
    weather, general = await asyncio.gather(
        weather_llm_judge(query, output, generator=generator),
        general_llm_judge(query, output, generator=generator),
    )
    results = [
        fahrenheit_presence(output),
        contains_number(output),
        content_accuracy(
            output, {"requiredPhrases": list(ONLINE_REQUIRED_PHRASES)}
        ),
        weather,
        general,
    ]
    return {result.name: result for result in results}


class ScoringRunner:
    """Scores a dataset of captured weather answers."""

    def __init__(
        self,
        dataset_path: str,
        generator: Optional[TextGenerator] = None,
        enable_judges: bool = True,
        max_concurrent: int = 5,
    ):
        """Initialize the scoring runner.

        Args:
            dataset_path: Path to a JSON dataset of cases
            generator: Text generator for the judges (default from settings)
            enable_judges: Run the two LLM judges in addition to content_accuracy
            max_concurrent: Maximum cases scored at once
        """
        self.generator = generator
        self.enable_judges = enable_judges
        self.max_concurrent = max_concurrent
        self.dataset = self._load_dataset(dataset_path)

    def _load_dataset(self, path: str) -> ScoreDataset:
        """Load scoring dataset from JSON file."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return ScoreDataset(**data)

    async def score_case(self, case: ScoreCase) -> CaseScores:
        """Run all enabled scorers on a single case.

        Args:
            case: The case to score

        Returns:
            CaseScores keyed by scorer name
        """
        with case_context(case.id):
            start = time.perf_counter()

            scores = [content_accuracy(case.output, case.expected)]
            if self.enable_judges:
                scores.extend(
                    await asyncio.gather(
                        weather_llm_judge(
                            case.query, case.output, case.expected, generator=self.generator
                        ),
                        general_llm_judge(
                            case.query, case.output, case.expected, generator=self.generator
                        ),
                    )
                )

            latency_ms = int((time.perf_counter() - start) * 1000)
            logger.info(
                "case_scored",
                scores={s.name: round(s.score, 3) for s in scores},
                latency_ms=latency_ms,
                **get_context(),
            )

        return CaseScores(
            case_id=case.id,
            category=case.metadata.category,
            difficulty=case.metadata.difficulty,
            scores={s.name: s for s in scores},
            latency_ms=latency_ms,
        )

    async def run_all(
        self,
        limit: Optional[int] = None,
        progress_callback: Optional[Callable[[int, int], None]] = None,
    ) -> ScoringReport:
        """Score every case in the dataset.

        Args:
            limit: Optional limit on number of cases to score
            progress_callback: Optional callback(current, total) for progress updates

        Returns:
            ScoringReport with results in dataset order
        """
        cases = self.dataset.cases[:limit] if limit else self.dataset.cases
        total = len(cases)
        run_id = uuid.uuid4().hex[:8]
        semaphore = asyncio.Semaphore(self.max_concurrent)
        completed = 0

        async def score_with_limit(case: ScoreCase) -> CaseScores:
            nonlocal completed
            async with semaphore:
                result = await self.score_case(case)
            completed += 1
            if progress_callback:
                progress_callback(completed, total)
            return result

        set_run_context(run_id)
        logger.info("scoring_run_started", total_cases=total, **get_context())
        try:
            results = await asyncio.gather(*(score_with_limit(c) for c in cases))
        finally:
            logger.info("scoring_run_finished", completed=completed, **get_context())
            clear_run_context()

        return ScoringReport(
            metadata={
                "run_id": run_id,
                "dataset": self.dataset.metadata,
                "total_cases": total,
                "judges_enabled": self.enable_judges,
            },
            results=list(results),
        )

    def save_report(self, report: ScoringReport, output_dir: str) -> Path:
        """Write a report as JSON and return its path."""
        directory = Path(output_dir)
        directory.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        path = directory / f"scores_{timestamp}.json"
        path.write_text(report.model_dump_json(indent=2), encoding="utf-8")
        return path
