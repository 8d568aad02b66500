# wordle_assist/modules/wordle/dictionary.py
import re, json
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from ...settings import WORD_LENGTH, dict_file_override

DICT_PATH = Path(__file__).resolve().parent / "dictionary.txt"
_WORD_RE = re.compile(r"[a-z]{%d}" % WORD_LENGTH)

class DictionaryError(RuntimeError):
    pass

def valid_words(words: Iterable[str]) -> List[str]:
    """Keep entries that are exactly five lowercase a-z letters; order preserved, nothing rewritten."""
    return [w for w in words if isinstance(w, str) and _WORD_RE.fullmatch(w)]

# ---- dictionary discovery (first hit wins) ----
def _candidate_paths() -> List[Path]:
    env = dict_file_override()
    return [p for p in (Path(env).expanduser() if env else None, DICT_PATH) if p]

def resolve_path() -> Optional[Path]:
    for p in _candidate_paths():
        if p.exists() and p.is_file():
            return p
    return None

def _read_entries(p: Path) -> List[str]:
    text = p.read_text(encoding="utf-8-sig")
    if p.suffix.lower() == ".json":
        data = json.loads(text)
        if not isinstance(data, list):
            raise DictionaryError(f"{p}: expected a JSON array of words")
        return list(data)
    return [ln.strip() for ln in text.splitlines() if ln.strip()]

def load_dictionary(path: str | Path | None = None) -> Tuple[str, ...]:
    """Read a word list (text, one per line, or a JSON array) and return its valid words.

    Raises DictionaryError when the file is missing or unreadable; callers treat that as fatal.
    """
    p = Path(path).expanduser() if path else resolve_path()
    if p is None:
        raise DictionaryError("no dictionary found (set WORDLE_DICT_FILE)")
    try:
        entries = _read_entries(p)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DictionaryError(f"cannot read dictionary {p}: {type(e).__name__}: {e}") from e
    return tuple(valid_words(entries))
