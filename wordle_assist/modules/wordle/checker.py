# wordle_assist/modules/wordle/checker.py
from typing import Iterable, List, Sequence

from .hints import Hint, HintError, PositionHint, ExcludedPositionsHint, ExcludedHint

# ---- hint matching ----
def is_word_hint_match(word: str, hint: Hint) -> bool:
    # must match position
    if isinstance(hint, PositionHint):
        return word[hint.position] == hint.char
    # must not sit at any listed index, but must be somewhere.
    # Letter counts are not checked: one "r" satisfies any number of notpos hints for "r".
    if isinstance(hint, ExcludedPositionsHint):
        if any(word[i] == hint.char for i in hint.positions):
            return False
        return hint.char in word
    # must not contain char
    if isinstance(hint, ExcludedHint):
        return hint.char not in word
    raise HintError(f"not a hint: {hint!r}")

def matches_all(word: str, hints: Sequence[Hint]) -> bool:
    return all(is_word_hint_match(word, h) for h in hints)

def filter_words(words: Iterable[str], hints: Sequence[Hint]) -> List[str]:
    """Words satisfying every hint, in source order."""
    hints = tuple(hints)
    return [w for w in words if matches_all(w, hints)]
