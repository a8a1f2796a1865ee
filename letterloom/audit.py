"""
Standalone CLI for re-checking a persisted level set.

Each level's grid is solved again in exhaustive mode and filtered; the result
must match the stored word list exactly.

Usage:
    python -m letterloom.audit levels/levels.json
    python -m letterloom.audit levels/levels.json --dictionary words.txt --verbose
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from .engine import ContentFilter, Dictionary, Level, LevelBuildError, find_words
from .engine import load_content_filter, load_dictionary
from .engine.models import Difficulty
from .generator import DIFFICULTY_SETTINGS, DifficultySettings, LevelAudit
from .play import LevelStore


def audit_level(
    level: Level,
    dictionary: Dictionary,
    content_filter: ContentFilter,
    settings: Dict[Difficulty, DifficultySettings] = DIFFICULTY_SETTINGS,
) -> LevelAudit:
    """
    Re-solve a level and compare against its stored word list.

    FAIL when the lists disagree, a forbidden word is reachable or there are
    no words at all; WARNING when consistent but below the difficulty's
    minimum; PASS otherwise.
    """
    filtered = content_filter.filter(find_words(level.grid, dictionary))
    forbidden = filtered.rejected | content_filter.forbidden_on(level.grid)
    stored = set(level.valid_words)
    missing = sorted(filtered.accepted - stored)
    extra = sorted(stored - filtered.accepted)
    min_words = settings[level.difficulty].min_words

    issues: List[str] = []
    if forbidden:
        issues.append(f"Forbidden word(s) reachable: {', '.join(sorted(forbidden))}")
    if missing:
        issues.append(f"{len(missing)} reachable word(s) missing from word list")
    if extra:
        issues.append(f"{len(extra)} listed word(s) not reachable on grid")
    if not stored:
        issues.append("NO VALID WORDS FOUND!")
    elif len(stored) < min_words:
        issues.append(f"Only {len(stored)} words (need {min_words})")

    if forbidden or missing or extra or not stored:
        status = "FAIL"
    elif issues:
        status = "WARNING"
    else:
        status = "PASS"

    return LevelAudit(
        level_id=level.id,
        difficulty=level.difficulty,
        word_count=len(stored),
        status=status,
        issues=issues,
        missing=missing,
        extra=extra,
        top_words=sorted(stored, key=lambda w: (-len(w), w))[:10],
    )


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Audit a LetterLoom level set against the word finder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m letterloom.audit levels/levels.json
  python -m letterloom.audit levels/levels.json --denylist my_denylist.txt
        """
    )
    parser.add_argument(
        "levels",
        help="Path to the level set JSON file"
    )
    parser.add_argument("--dictionary", help="Word list to solve with (default: bundled list)")
    parser.add_argument("--denylist", help="Denylist file (default: bundled list)")
    parser.add_argument("--flaglist", help="Flaglist file (default: bundled list)")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print every level and sample words"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    levels_path = Path(args.levels)
    if not levels_path.exists():
        print(f"Error: Level file not found: {args.levels}", file=sys.stderr)
        return 1

    try:
        store = LevelStore.load(levels_path)
    except Exception as e:
        print(f"Error reading level file: {e}", file=sys.stderr)
        return 1

    try:
        dictionary = load_dictionary(args.dictionary)
        content_filter = load_content_filter(args.denylist, args.flaglist)
    except LevelBuildError as e:
        print(f"Error loading word lists: {e}", file=sys.stderr)
        return 1

    audits = [audit_level(level, dictionary, content_filter) for level in store]
    counts = {"PASS": 0, "WARNING": 0, "FAIL": 0}

    for audit in audits:
        counts[audit.status] += 1
        if audit.status == "PASS":
            if args.verbose:
                print(f"PASS  Level {audit.level_id} ({audit.difficulty.value}): {audit.word_count} words")
        else:
            print(
                f"{audit.status:<5} Level {audit.level_id} ({audit.difficulty.value}): "
                f"{audit.word_count} words - {'; '.join(audit.issues)}"
            )
        if args.verbose and audit.top_words:
            print(f"      Top words: {', '.join(audit.top_words[:5])}")

    total = len(audits)
    print()
    print("=== Audit Summary ===")
    print(f"PASS:    {counts['PASS']}/{total} levels")
    print(f"WARNING: {counts['WARNING']}/{total} levels")
    print(f"FAIL:    {counts['FAIL']}/{total} levels")

    return 1 if counts["FAIL"] else 0


if __name__ == "__main__":
    sys.exit(main())
