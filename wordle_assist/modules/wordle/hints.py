# wordle_assist/modules/wordle/hints.py
"""Hint variants and the payload form they are exchanged in.

A payload mirrors the classic solver input:
    {"char": "i", "pos": 2}          letter is at index 2          (green)
    {"char": "r", "notpos": [1]}     letter is in the word, not at 1 (yellow)
    {"char": "a", "skip": true}      letter is not in the word     (gray)
Exactly one directive per payload.
"""
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Tuple, Union

from jsonschema import Draft202012Validator

from ...settings import WORD_LENGTH, ALPHABET

SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "hints.schema.json"
_VALIDATOR = Draft202012Validator(json.loads(SCHEMA_PATH.read_text(encoding="utf-8")))
DIRECTIVES = ("pos", "notpos", "skip")

class HintError(ValueError):
    pass

def _check_char(char: Any) -> None:
    if not isinstance(char, str) or len(char) != 1 or char not in ALPHABET:
        raise HintError(f"hint letter must be a single a-z character, got {char!r}")

def _check_index(idx: Any) -> None:
    if isinstance(idx, bool) or not isinstance(idx, int) or not 0 <= idx < WORD_LENGTH:
        raise HintError(f"hint position must be an int in 0..{WORD_LENGTH - 1}, got {idx!r}")

@dataclass(frozen=True)
class PositionHint:
    char: str
    position: int

    def __post_init__(self):
        _check_char(self.char)
        _check_index(self.position)

@dataclass(frozen=True)
class ExcludedPositionsHint:
    char: str
    positions: Tuple[int, ...]

    def __post_init__(self):
        _check_char(self.char)
        if isinstance(self.positions, (str, bytes)):
            raise HintError("excluded positions must be a sequence of ints")
        try:
            positions = tuple(self.positions)
        except TypeError as e:
            raise HintError("excluded positions must be a sequence of ints") from e
        if not positions:
            raise HintError(f"excluded positions for {self.char!r} must not be empty")
        for idx in positions:
            _check_index(idx)
        object.__setattr__(self, "positions", positions)

@dataclass(frozen=True)
class ExcludedHint:
    char: str

    def __post_init__(self):
        _check_char(self.char)

Hint = Union[PositionHint, ExcludedPositionsHint, ExcludedHint]

def parse_hint(payload: Dict) -> Hint:
    if not isinstance(payload, dict):
        raise HintError(f"hint must be an object, got {type(payload).__name__}")
    given = [k for k in DIRECTIVES if k in payload]
    if len(given) != 1:
        raise HintError(
            f"hint for {payload.get('char')!r} needs exactly one of pos/notpos/skip, got {given or 'none'}"
        )
    errors = sorted(_VALIDATOR.iter_errors(payload), key=lambda e: list(e.path))
    if errors:
        err = errors[0]
        where = "/".join(str(p) for p in err.path) or "hint"
        raise HintError(f"{where}: {err.message}")

    char = payload["char"]
    if "pos" in payload:
        return PositionHint(char, payload["pos"])
    if "notpos" in payload:
        return ExcludedPositionsHint(char, tuple(payload["notpos"]))
    return ExcludedHint(char)

def parse_hints(payloads: Iterable[Dict]) -> Tuple[Hint, ...]:
    if not isinstance(payloads, (list, tuple)):
        raise HintError(f"hints must be a list, got {type(payloads).__name__}")
    out = []
    for i, p in enumerate(payloads):
        try:
            out.append(parse_hint(p))
        except HintError as e:
            raise HintError(f"hint[{i}]: {e}") from e
    return tuple(out)

def hint_to_payload(hint: Hint) -> Dict:
    if isinstance(hint, PositionHint):
        return {"char": hint.char, "pos": hint.position}
    if isinstance(hint, ExcludedPositionsHint):
        return {"char": hint.char, "notpos": list(hint.positions)}
    if isinstance(hint, ExcludedHint):
        return {"char": hint.char, "skip": True}
    raise HintError(f"not a hint: {hint!r}")
