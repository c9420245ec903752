from __future__ import annotations
import os
import sys
import json
import argparse
from typing import Any, Dict, List, Optional
from fivewords.app import SolveParams, solve_five_words
from fivewords.io_utils import format_combination, read_words

DEFAULT_WORDFILE = "words_alpha.txt"

def debug(msg: str) -> None:
    # stdout is reserved for results
    print(msg, file=sys.stderr)

def print_details(result: Dict[str, Any]) -> None:
    stats = result["stats"]
    debug("\nDetails")
    debug(f"Five-letter words: {stats['five_letter_words']}")
    if stats["skipped_invalid"]:
        debug(f"Skipped malformed words: {stats['skipped_invalid']}")
    debug(f"Words with a repeated letter: {stats['duplicate_letter_words']}")
    debug(f"Distinct signatures searched: {stats['catalog_size']}")
    debug(f"Signature 5-tuples found: {stats['candidate_tuples']}")
    debug(f"Word combinations: {stats['solutions']}")
    if stats["missing_letters"]:
        missing = ", ".join(f"{k}={v}" for k, v in stats["missing_letters"].items())
        debug(f"Unused letter per tuple: {missing}")

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Find five five-letter words with 25 distinct letters")
    parser.add_argument("--file", type=str, default=DEFAULT_WORDFILE, help="Dictionary file, one word per line.")
    parser.add_argument("--workers", type=int, default=os.cpu_count() or 1, help="Worker processes for the search.")
    parser.add_argument("--skip-invalid", action="store_true", help="Skip words with characters outside a-z instead of aborting.")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar during the search.")
    parser.add_argument("--debug", action="store_true", help="Print debug diagnostics.")
    parser.add_argument("--details", action="store_true", help="Print search statistics after the results.")
    parser.add_argument("--json", action="store_true", help="Print JSON output (optional).")

    args = parser.parse_args(argv)

    try:
        words = read_words(args.file)
    except (OSError, UnicodeDecodeError) as e:
        debug(f"Input error: cannot read {args.file}: {e}")
        return 1

    if args.debug:
        debug(f"Five-letter words (count={len(words)}) from {args.file}")

    params = SolveParams(
        workers=args.workers,
        skip_invalid=args.skip_invalid,
        progress=args.progress,
    )
    result = solve_five_words(words, params)

    if not result["ok"]:
        debug(f"Input error: {result['error']}")
        debug("Tip: the dictionary must be lowercase a-z, or pass --skip-invalid.")
        return 1

    if args.debug:
        stats = result["stats"]
        debug(f"Catalog size: {stats['catalog_size']}")
        for stage, secs in stats["timings"].items():
            debug(f"{stage.capitalize()} completed in {secs:.3f} seconds")

    # JSON
    if args.json:
        print(json.dumps(result, indent=2))
        return 0

    for combo in result["solutions"]:
        print(format_combination(combo))

    if args.details:
        print_details(result)
    return 0

if __name__ == "__main__":
    sys.exit(main())
