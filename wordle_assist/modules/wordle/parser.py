# wordle_assist/modules/wordle/parser.py
import re
from typing import Dict, List, Tuple

from ...settings import WORD_LENGTH
from .hints import Hint, HintError, PositionHint, ExcludedPositionsHint, ExcludedHint

_GREEN = "g"
_YELLOW = "y"
_GRAY = {"b", ".", "x", "-"}
_MARKS_RE = re.compile(r"[gyb.x\-]{%d}" % WORD_LENGTH)
_GUESS_RE = re.compile(r"[a-z]{%d}" % WORD_LENGTH)

def hints_from_marks(guess: str, marks: str) -> List[Hint]:
    """One guess plus its colour marks (g=green, y=yellow, b/./x/- = gray) → hints.

    A gray letter that is green or yellow elsewhere in the same guess only
    means "not here", so it becomes a notpos hint rather than a skip.
    """
    if not isinstance(guess, str) or not isinstance(marks, str):
        raise HintError("guess and marks must be strings")
    g = guess.strip().lower()
    m = marks.strip().lower()
    if not _GUESS_RE.fullmatch(g):
        raise HintError(f"guess must be {WORD_LENGTH} letters a-z, got {guess!r}")
    if not _MARKS_RE.fullmatch(m):
        raise HintError(f"marks must be {WORD_LENGTH} of g/y/b, got {marks!r}")

    present = {ch for ch, mk in zip(g, m) if mk in (_GREEN, _YELLOW)}
    out: List[Hint] = []
    for idx, (ch, mk) in enumerate(zip(g, m)):
        if mk == _GREEN:
            out.append(PositionHint(ch, idx))
        elif mk == _YELLOW or ch in present:
            out.append(ExcludedPositionsHint(ch, (idx,)))
        else:
            out.append(ExcludedHint(ch))
    return _uniq(out)

def _uniq(hints: List[Hint]) -> List[Hint]:
    seen = set(); out = []
    for h in hints:
        if h not in seen:
            out.append(h); seen.add(h)
    return out

def parse_feedback_arg(arg: str) -> Tuple[str, str]:
    """CLI form GUESS:MARKS, e.g. 'crane:bygbb'."""
    guess, sep, marks = (arg or "").partition(":")
    if not sep:
        raise HintError(f"feedback must look like GUESS:MARKS, got {arg!r}")
    return guess, marks

def hints_from_feedback(items: List[Dict]) -> List[Hint]:
    if not isinstance(items, (list, tuple)):
        raise HintError(f"feedback must be a list, got {type(items).__name__}")
    out: List[Hint] = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise HintError(f"feedback[{i}]: must be an object with guess and marks")
        try:
            out.extend(hints_from_marks(item.get("guess", ""), item.get("marks", "")))
        except HintError as e:
            raise HintError(f"feedback[{i}]: {e}") from e
    return _uniq(out)
