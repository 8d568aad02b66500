import json
import pytest

WORDS = ["arise", "chose", "apple", "grape", "amber", "stone", "Hello", "toolong", "r2d2x"]

@pytest.fixture(autouse=True)
def _history(tmp_path, monkeypatch):
    # keep the JSONL event log out of the working tree
    path = tmp_path / "history.jsonl"
    monkeypatch.setenv("HISTORY_FILE", str(path))
    return path

@pytest.fixture
def dict_file(tmp_path, monkeypatch):
    p = tmp_path / "words.txt"
    p.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    monkeypatch.setenv("WORDLE_DICT_FILE", str(p))
    return p

@pytest.fixture
def json_dict_file(tmp_path):
    p = tmp_path / "words.json"
    p.write_text(json.dumps(WORDS), encoding="utf-8")
    return p
