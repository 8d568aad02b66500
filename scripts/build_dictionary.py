import argparse, json, pathlib, sys

from wordle_assist.modules.wordle.dictionary import valid_words

ROOT = pathlib.Path(__file__).resolve().parents[1]
OUT  = ROOT / "wordle_assist" / "modules" / "wordle" / "dictionary.txt"

def load(p: pathlib.Path):
    # tolerate UTF-8 BOM on Windows
    text = p.read_text(encoding="utf-8-sig")
    if p.suffix.lower() == ".json":
        return [str(w) for w in json.loads(text)]
    return text.splitlines()

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Normalise a raw word list into the bundled dictionary format.")
    ap.add_argument("src", type=pathlib.Path)
    ap.add_argument("-o", "--out", type=pathlib.Path, default=OUT)
    args = ap.parse_args(argv)

    words = valid_words(w.strip().lower() for w in load(args.src))
    words = list(dict.fromkeys(words))
    args.out.write_text("\n".join(words) + "\n", encoding="utf-8")
    print(f"OK: {len(words)} words -> {args.out}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
