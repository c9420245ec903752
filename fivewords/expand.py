from __future__ import annotations
from collections import defaultdict
from itertools import product
from typing import Dict, Iterable, List
from .types import CandidateTuple, Signature, SignedWord, Word, WordCombination

def index_words(signed: Iterable[SignedWord]) -> Dict[Signature, List[Word]]:
    """
    Map each signature to every word that realizes it.
    Words with a repeated letter are left out, even when an anagram-free
    word happens to share their signature.
    """
    index: Dict[Signature, List[Word]] = defaultdict(list)
    for s in signed:
        if not s.has_duplicate and s.word not in index[s.signature]:
            index[s.signature].append(s.word)
    return dict(index)

def expand_tuple(candidate: CandidateTuple, index: Dict[Signature, List[Word]]) -> List[WordCombination]:
    # Each slot is an independent choice among anagrams
    slots = [index[m] for m in candidate]
    return [tuple(sorted(choice)) for choice in product(*slots)]

def expand_all(candidates: Iterable[CandidateTuple], index: Dict[Signature, List[Word]]) -> List[WordCombination]:
    combos: List[WordCombination] = []
    for c in candidates:
        combos.extend(expand_tuple(c, index))
    return combos
