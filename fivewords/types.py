from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

Word = str
Signature = int
CandidateTuple = Tuple[Signature, Signature, Signature, Signature, Signature]
WordCombination = Tuple[Word, Word, Word, Word, Word]

@dataclass(frozen=True)
class SignedWord:
    word: Word
    signature: Signature
    has_duplicate: bool
