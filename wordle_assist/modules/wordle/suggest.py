# wordle_assist/modules/wordle/suggest.py
from typing import Dict, List, Sequence, Tuple

from ...settings import ALPHABET, SUGGESTION_LIMIT
from .checker import filter_words
from .dictionary import valid_words
from .hints import Hint
from .ranking import calc_char_freqs, calc_char_ranks

REPEAT_PENALTY = len(ALPHABET)

def calc_word_scores(words: Sequence[str], char_ranks: Dict[str, int]) -> Dict[str, int]:
    """Sum of letter ranks per word; a letter already seen in the word costs rank + 26.

    Lower is better. Duplicate words collapse to one entry.
    """
    result: Dict[str, int] = {}
    for w in words:
        score = 0
        seen = set()
        for ch in w:
            rank = char_ranks[ch]
            score += rank + REPEAT_PENALTY if ch in seen else rank
            seen.add(ch)
        result[w] = score
    return result

def sort_word_scores(word_scores: Dict[str, int]) -> List[Tuple[str, int]]:
    # stable: equal scores keep candidate order
    return sorted(word_scores.items(), key=lambda kv: kv[1])

def _ranked(words: Sequence[str], hints: Sequence[Hint]) -> Tuple[List[str], List[Tuple[str, int]]]:
    cands = filter_words(valid_words(words), hints)
    ranks = calc_char_ranks(calc_char_freqs(cands))
    return cands, sort_word_scores(calc_word_scores(cands, ranks))

def run(words: Sequence[str], hints: Sequence[Hint], limit: int = SUGGESTION_LIMIT) -> List[str]:
    """Filter by hints, rank letters over what is left, score, and return the best `limit` guesses."""
    _, scored = _ranked(words, hints)
    return [w for w, _ in scored[:limit]]

def suggest(words: Sequence[str], hints: Sequence[Hint], limit: int = SUGGESTION_LIMIT) -> Dict:
    cands, scored = _ranked(words, hints)
    top = scored[:limit]
    return {
        "suggestions": [w for w, _ in top],
        "scores": [[w, s] for w, s in top],
        "candidates": len(cands),
        "dict": len(words),
    }
