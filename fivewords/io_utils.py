from __future__ import annotations
import json
from pathlib import Path
from typing import List, Sequence, Tuple
from .types import Word

WORD_LENGTH = 5

def parse_words(text: str) -> List[Word]:
    """
    Parse a dictionary from raw text
    Rules:
    - One word per line
    - Strip surrounding whitespace
    - Keep only words of exactly five characters
    - Drop repeated words, so each word realizes its signature once
    - Sort lexicographically so every later stage iterates deterministically
    """
    words: List[Word] = []
    for line in text.splitlines():
        w = line.strip()
        if len(w) == WORD_LENGTH:
            words.append(w)
    return sorted(set(words))

def read_words(path: str | Path) -> List[Word]:
    # OSError propagates: an unreadable dictionary is fatal
    return parse_words(Path(path).read_text(encoding="utf-8"))

def is_valid_word(w: Word) -> bool:
    return all("a" <= ch <= "z" for ch in w)

def validate_words(words: Sequence[Word]) -> Tuple[bool, str]:
    bad = [w for w in words if not is_valid_word(w)]
    if bad:
        shown = ", ".join(repr(w) for w in bad[:5])
        more = f" (and {len(bad) - 5} more)" if len(bad) > 5 else ""
        return False, f"Words with characters outside a-z: {shown}{more}"
    return True, ""

def format_combination(combo: Sequence[Word]) -> str:
    return json.dumps(list(combo))
