from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from time import perf_counter
from typing import Any, Dict, List
from .expand import expand_all, index_words
from .io_utils import validate_words
from .search import find_candidate_tuples
from .signatures import ALL_LETTERS_MASK, build_catalog, letters_of, sign_words
from .types import CandidateTuple, Word

@dataclass
class SolveParams:
    workers: int = 1
    skip_invalid: bool = False
    progress: bool = False

def missing_letter_counts(candidates: List[CandidateTuple]) -> Dict[str, int]:
    counts: Counter = Counter()
    for c in candidates:
        union = 0
        for m in c:
            union |= m
        counts[letters_of(ALL_LETTERS_MASK & ~union)] += 1
    return dict(sorted(counts.items()))

def solve_five_words(words: List[Word], params: SolveParams) -> Dict[str, Any]:
    # Core solver entrypoint. `words` is the already-filtered, sorted
    # five-letter list produced by io_utils.parse_words.

    if not params.skip_invalid:
        ok, msg = validate_words(words)
        if not ok:
            return {"ok": False, "error": msg}

    timings: Dict[str, float] = {}

    t0 = perf_counter()
    signed = sign_words(words, skip_invalid=params.skip_invalid)
    catalog = build_catalog(signed)
    t1 = perf_counter()
    timings["catalog"] = t1 - t0

    # Search on signatures only
    candidates = find_candidate_tuples(catalog, workers=params.workers, progress_bar=params.progress)
    t2 = perf_counter()
    timings["search"] = t2 - t1

    # Back to words, then put everything in canonical order
    index = index_words(signed)
    solutions = sorted(expand_all(candidates, index))
    t3 = perf_counter()
    timings["expand"] = t3 - t2

    return {
        "ok": True,
        "params": {
            "workers": params.workers,
            "skip_invalid": params.skip_invalid,
        },
        "stats": {
            "five_letter_words": len(words),
            "skipped_invalid": len(words) - len(signed),
            "duplicate_letter_words": sum(1 for s in signed if s.has_duplicate),
            "catalog_size": int(len(catalog)),
            "candidate_tuples": len(candidates),
            "solutions": len(solutions),
            "missing_letters": missing_letter_counts(candidates),
            "timings": timings,
        },
        "solutions": [list(s) for s in solutions],
    }
