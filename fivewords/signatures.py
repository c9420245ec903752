from __future__ import annotations
from typing import Iterable, List, Tuple
import numpy as np
from .types import Signature, SignedWord, Word

ALPHABET_SIZE = 26
ALL_LETTERS_MASK = (1 << ALPHABET_SIZE) - 1

def letter_index(ch: str) -> int:
    o = ord(ch) - ord("a")
    if 0 <= o < ALPHABET_SIZE:
        return o
    raise ValueError(f"Unsupported char: {ch!r} (use a-z)")

def word_signature(word: Word) -> Tuple[Signature, bool]:
    """
    One bit per letter. The duplicate flag is sticky: once a letter
    repeats, the word can never take part in a solution.
    """
    mask = 0
    duplicate = False
    for ch in word:
        bit = 1 << letter_index(ch)
        duplicate |= bool(mask & bit)
        mask |= bit
    return mask, duplicate

def sign_words(words: Iterable[Word], skip_invalid: bool = False) -> List[SignedWord]:
    signed: List[SignedWord] = []
    for w in words:
        try:
            mask, dup = word_signature(w)
        except ValueError:
            if skip_invalid:
                continue
            raise
        signed.append(SignedWord(w, mask, dup))
    return signed

def bit_count(signature: Signature) -> int:
    return bin(signature).count("1")

def build_catalog(signed: Iterable[SignedWord]) -> np.ndarray:
    """
    Deduplicated, ascending signatures of every word without a repeated letter.
    This array is the whole search space; it is returned read-only.
    """
    masks = [s.signature for s in signed if not s.has_duplicate]
    catalog = np.unique(np.asarray(masks, dtype=np.int64))
    catalog.setflags(write=False)
    return catalog

def letters_of(signature: Signature) -> str:
    return "".join(chr(ord("a") + i) for i in range(ALPHABET_SIZE) if signature >> i & 1)
