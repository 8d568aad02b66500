#!/usr/bin/env python3
"""
Print the best next Wordle guesses for a set of hints.

Hints come from a JSON file (or stdin with "-") holding a list such as
    [{"char": "a", "skip": true}, {"char": "r", "notpos": [1]}, {"char": "i", "pos": 2}]
and/or from --feedback GUESS:MARKS pairs (g=green, y=yellow, b=gray), e.g.
    wordle-suggest --feedback crane:bybbg --feedback spire:bbggg
"""
import argparse
import json
import sys
from typing import List, Optional

from .history import log_event
from .settings import SUGGESTION_LIMIT, MAX_LIMIT
from .modules.wordle.dictionary import DictionaryError, load_dictionary
from .modules.wordle.hints import HintError, parse_hints, hint_to_payload
from .modules.wordle.parser import hints_from_marks, parse_feedback_arg
from .modules.wordle.suggest import suggest


def _read_hints(src: str) -> list:
    try:
        if src == "-":
            raw = sys.stdin.read()
        else:
            with open(src, "r", encoding="utf-8-sig") as f:
                raw = f.read()
        return json.loads(raw or "[]")
    except (OSError, json.JSONDecodeError) as e:
        raise HintError(f"cannot read hints from {src}: {e}") from e


def _limit(value: str) -> int:
    n = int(value)
    if not 1 <= n <= MAX_LIMIT:
        raise argparse.ArgumentTypeError(f"limit must be in 1..{MAX_LIMIT}")
    return n


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="wordle-suggest", description="Suggest the next Wordle guess.")
    ap.add_argument("--dict", dest="dict_path", default=None,
                    help="word list (text, one per line, or JSON array); default WORDLE_DICT_FILE or the bundled list")
    ap.add_argument("--hints", default=None, help="JSON file with a list of hints, or - for stdin")
    ap.add_argument("--feedback", action="append", default=[], metavar="GUESS:MARKS",
                    help="a scored guess, e.g. crane:bygbb (repeatable)")
    ap.add_argument("--limit", type=_limit, default=SUGGESTION_LIMIT, help="how many guesses to print")
    ap.add_argument("--json", action="store_true", help="print the full report as JSON")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        words = load_dictionary(args.dict_path)
        hints = list(parse_hints(_read_hints(args.hints))) if args.hints else []
        for fb in args.feedback:
            for h in hints_from_marks(*parse_feedback_arg(fb)):
                if h not in hints:
                    hints.append(h)
    except (DictionaryError, HintError) as e:
        print(f"[error] {e}", file=sys.stderr)
        log_event({"dir":"err","source":"cli","error":str(e)})
        return 2

    out = suggest(words, hints, limit=args.limit)
    log_event({"dir":"cli","hints":len(hints),"candidates":out["candidates"],
               "guess":(out["suggestions"] or [None])[0]})

    if args.json:
        print(json.dumps({**out, "hints": [hint_to_payload(h) for h in hints]}, ensure_ascii=False))
    elif not out["suggestions"]:
        print("(no candidates)", file=sys.stderr)
    else:
        for w in out["suggestions"]:
            print(w)
    return 0


if __name__ == "__main__":
    sys.exit(main())
