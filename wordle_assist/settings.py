# SETTINGS_V2: env-driven config; .env is read once on import
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

WORD_LENGTH = 5
ALPHABET = "abcdefghijklmnopqrstuvwxyz"

MAX_LIMIT = 100

def clamp_limit(value) -> int:
    """Suggestion count forced into 1..MAX_LIMIT."""
    return max(1, min(MAX_LIMIT, int(value)))

SUGGESTION_LIMIT = clamp_limit(os.getenv("SUGGESTION_LIMIT", "10"))

def history_file() -> Path:
    """Path of the JSONL event log (HISTORY_FILE, default history.jsonl)."""
    return Path(os.getenv("HISTORY_FILE", "history.jsonl"))

def dict_file_override() -> str:
    """WORDLE_DICT_FILE, or "" when unset."""
    return os.getenv("WORDLE_DICT_FILE", "").strip()
