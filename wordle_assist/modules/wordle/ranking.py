# wordle_assist/modules/wordle/ranking.py
from collections import Counter
from typing import Dict, Iterable

from ...settings import ALPHABET

def calc_char_freqs(words: Iterable[str]) -> Dict[str, int]:
    """Occurrences of every letter across the candidates, repeats included.

    All 26 letters are present, in a..z order; e.g. [apple, grape] gives
    a=2, p=3, l=1, e=2, g=1, r=1 and zero elsewhere.
    """
    cnt = Counter(dict.fromkeys(ALPHABET, 0))
    for w in words:
        cnt.update(w)
    return {ch: cnt[ch] for ch in ALPHABET}

def calc_char_ranks(char_freqs: Dict[str, int]) -> Dict[str, int]:
    """Dense ranks 1..26, most frequent first; equal counts fall back to alphabetical order."""
    ordered = sorted(char_freqs.items(), key=lambda kv: (-kv[1], kv[0]))
    return {ch: i + 1 for i, (ch, _) in enumerate(ordered)}
