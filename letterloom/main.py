"""
Build entry point: generates a validated level set.

Usage:
    python -m letterloom.main
    python -m letterloom.main config.yaml --output levels/levels.json --verbose
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import yaml

from .engine import GenerationExhausted, LevelBuildError, render_grid
from .generator import BuildConfig, LevelBuilder, LevelReport, default_schedule
from .play import save_levels


def load_config(config_path: str) -> BuildConfig:
    """Load build configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return BuildConfig(**data)


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate validated LetterLoom levels",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  seed: 42
  max_attempts: 100
  early_exit: false
  levels:
    - {id: 1, difficulty: easy, target_score: 550}
    - {id: 31, difficulty: hard, target_score: 4100, time_limit: 118, is_premium: true}
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (default: standard 60-level run)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the level set JSON (default: levels/levels_<timestamp>.json)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Override the configured seed"
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Record levels that cannot be built and continue with the rest"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stdout"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        config = load_config(args.config) if args.config else BuildConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.seed is not None:
        config = config.model_copy(update={"seed": args.seed})

    if args.output:
        output_path = Path(args.output)
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = Path("levels") / f"levels_{timestamp}.json"

    try:
        builder = LevelBuilder.create(config)
    except LevelBuildError as e:
        print(f"Error loading word lists: {e}", file=sys.stderr)
        return 1

    specs = config.levels or default_schedule()

    def on_level(report: LevelReport) -> None:
        print(
            f"Level {report.id} ({report.difficulty.value}): "
            f"{report.word_count} words on attempt {report.attempts}"
        )
        if report.flagged:
            print(f"  Flagged for review: {', '.join(report.flagged)}")

    if args.verbose:
        print(f"Config: {args.config or '(defaults)'}")
        print(f"Output: {output_path}")
        print(f"Levels: {len(specs)}")
        print("-" * 60)

    try:
        result = builder.build_all(
            specs,
            fail_fast=not args.keep_going,
            on_level=on_level if args.verbose else None,
        )
    except GenerationExhausted as e:
        print(f"Error: {e}", file=sys.stderr)
        if e.rejections:
            last = e.rejections[-1]
            print(f"  Last rejection: {last.code} - {last.message}", file=sys.stderr)
        return 1

    result.config = config
    save_levels(
        result.levels,
        output_path,
        generated_at=result.ended_at,
        seed=config.seed,
    )

    if args.verbose and result.levels:
        print()
        print(f"Sample grid (level {result.levels[0].id}):")
        print(render_grid(result.levels[0].grid))

    # Print summary
    print()
    print("=== Build Summary ===")
    print(f"Levels built: {len(result.levels)}/{len(specs)}")
    for difficulty, stats in result.summary_by_difficulty().items():
        print(f"{difficulty.upper()}: {stats['count']} levels, avg {stats['avg_words']} words per level")
    print(f"Duration: {result.duration_seconds:.2f}s")
    print(f"Saved to: {output_path}")

    if result.failures:
        print(f"\n{len(result.failures)} level(s) could not be built:", file=sys.stderr)
        for failure in result.failures:
            print(f"  - {failure.message}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
