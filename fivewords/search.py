from __future__ import annotations
import multiprocessing
from typing import Iterable, List, Optional
import numpy as np
from tqdm import tqdm
from .types import CandidateTuple, Signature

_CATALOG: Optional[np.ndarray] = None

def restrict(candidates: np.ndarray, upper: Signature, used: Signature) -> np.ndarray:
    """
    Entries of the ascending `candidates` array that are strictly below `upper`
    and share no letter with `used`.
    Strict ordering keeps one representative per set of five signatures,
    so permutations are never explored.
    """
    below = candidates[: np.searchsorted(candidates, upper)]
    return below[(below & used) == 0]

def search_from(m1: Signature, catalog: np.ndarray) -> List[CandidateTuple]:
    # All tuples whose largest signature is m1. Each restricted list is already
    # disjoint from every earlier pick, so only the newest pick is tested.
    m1 = int(m1)
    solutions: List[CandidateTuple] = []

    c2 = restrict(catalog, m1, m1)
    for m2 in c2.tolist():
        mask2 = m1 | m2
        c3 = restrict(c2, m2, mask2)
        if len(c3) < 3:
            continue
        for m3 in c3.tolist():
            mask3 = mask2 | m3
            c4 = restrict(c3, m3, mask3)
            if len(c4) < 2:
                continue
            # Last two levels at once: row i is m4, column j < i is m5
            disjoint = np.tril((c4[:, None] & c4[None, :]) == 0, k=-1)
            rows, cols = np.nonzero(disjoint)
            for m4, m5 in zip(c4[rows].tolist(), c4[cols].tolist()):
                solutions.append((m1, m2, m3, m4, m5))
    return solutions

def _search_init(catalog: np.ndarray) -> None:
    global _CATALOG
    _CATALOG = catalog

def _search_worker(m1: Signature) -> List[CandidateTuple]:
    return search_from(m1, _CATALOG)

def progress(iterable: Iterable, total: int, enabled: bool, desc: str = "Searching") -> Iterable:
    return tqdm(iterable, total=total, desc=desc, disable=not enabled, unit="sig")

def find_candidate_tuples(catalog: np.ndarray, workers: int = 1, progress_bar: bool = False) -> List[CandidateTuple]:
    """
    Fan out one unit of work per catalog signature (as the largest element
    of a tuple) and concatenate the results. Order is unspecified.
    """
    tops = catalog.tolist()
    solutions: List[CandidateTuple] = []

    if workers > 1 and len(tops) > 1:
        with multiprocessing.Pool(
            processes=workers,
            initializer=_search_init,
            initargs=(catalog,),
        ) as pool:
            chunksize = max(1, len(tops) // (workers * 16))
            results = pool.imap_unordered(_search_worker, tops, chunksize=chunksize)
            for part in progress(results, len(tops), progress_bar):
                solutions.extend(part)
    else:
        for m1 in progress(tops, len(tops), progress_bar):
            solutions.extend(search_from(m1, catalog))
    return solutions
