#!/usr/bin/env python3
"""Score captured weather assistant answers against a dataset of cases.

Usage:
    python scripts/score_answers.py --dataset data/cases.json            # All scorers
    python scripts/score_answers.py --dataset data/cases.json --limit 5  # Quick check
    python scripts/score_answers.py --dataset data/cases.json --no-judge # Rule-based only
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.settings import get_settings
from weather_eval.observability import configure_logging
from weather_eval.scoring import ScoringRunner


async def main() -> int:
    """Run the offline scoring pipeline."""
    parser = argparse.ArgumentParser(
        description="Score weather assistant answers",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--dataset",
        default="data/cases.json",
        help="Path to scoring dataset",
    )
    parser.add_argument(
        "--output",
        default="data/reports",
        help="Output directory for reports",
    )
    parser.add_argument(
        "--limit",
        type=int,
        help="Limit to N cases (for quick check)",
    )
    parser.add_argument(
        "--no-judge",
        action="store_true",
        help="Skip LLM judges (faster, content_accuracy only)",
    )
    parser.add_argument(
        "--max-concurrent",
        type=int,
        help="Maximum cases scored at once (default: from settings)",
    )

    args = parser.parse_args()

    settings = get_settings()
    configure_logging(json_output=settings.use_json_logs, log_level=settings.log_level)

    print("=" * 60)
    print("WEATHER ANSWER SCORING")
    print("=" * 60)
    print(f"Dataset: {args.dataset}")
    print(f"Output: {args.output}")
    print(f"Cases: {args.limit or 'all'}")
    print(f"LLM Judges: {'disabled' if args.no_judge else 'enabled'}")
    print("=" * 60)
    print()

    if not args.no_judge and not settings.openai_api_key:
        print("  WARNING: OPENAI_API_KEY not set in settings")
        print("  Judges fall back to the environment and score 0 on failure")

    print("Loading scoring dataset...")
    try:
        runner = ScoringRunner(
            dataset_path=args.dataset,
            enable_judges=not args.no_judge,
            max_concurrent=args.max_concurrent or settings.judge_max_concurrent,
        )
        print(f"  Loaded {len(runner.dataset.cases)} cases")
    except Exception as e:
        print(f"  ERROR: Failed to load dataset: {e}")
        return 1

    print()
    print("Scoring...")
    print("-" * 60)

    def on_progress(current: int, total: int) -> None:
        print(f"  [{current}/{total}]")

    report = await runner.run_all(limit=args.limit, progress_callback=on_progress)

    print("-" * 60)
    print()

    json_path = runner.save_report(report, args.output)
    print(f"Saved JSON report: {json_path}")

    print()
    print("=" * 60)
    print("SCORING SUMMARY")
    print("=" * 60)
    print(f"  Run ID: {report.metadata['run_id']}")
    print(f"  Cases: {len(report.results)}")
    print()
    for name, mean in sorted(report.mean_scores.items()):
        print(f"  {name:20s}: {mean:.2f}")
    if not args.no_judge:
        print(f"  Pass Rate: {report.pass_rate:.1%}")

    if report.category_means:
        print()
        print("By Category:")
        for category, means in sorted(report.category_means.items()):
            summary = ", ".join(f"{n}={v:.2f}" for n, v in sorted(means.items()))
            print(f"  {category:24s}: {summary}")

    print("=" * 60)
    return 0


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
