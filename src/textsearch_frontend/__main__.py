from __future__ import annotations
import argparse, json
from typing import List

from textsearch import SearchEngine
from textsearch.config import TOP_K
from textsearch.report import format_results, format_suggestions, format_document
from . import initialize

def _emit_results(eng: SearchEngine, q: str, k: int, as_json: bool, *, phrase: bool = False) -> None:
    rows = eng.search_phrase(q, top_k=k) if phrase else eng.search(q, top_k=k)
    if as_json:
        print(json.dumps([r.to_dict() for r in rows], ensure_ascii=False, indent=2))
    else:
        print(format_results(q, rows, phrase=phrase))

def _emit_suggestions(eng: SearchEngine, prefix: str, as_json: bool) -> None:
    words = eng.autocomplete(prefix)
    if as_json:
        print(json.dumps(words, ensure_ascii=False))
    else:
        print(format_suggestions(prefix, words))

def _emit_document(eng: SearchEngine, doc_id: int, as_json: bool) -> None:
    text = eng.display_document(doc_id)
    if as_json:
        print(json.dumps({"id": doc_id, "text": text}, ensure_ascii=False))
    else:
        print(format_document(doc_id, text))

def _repl(eng: SearchEngine, k: int, as_json: bool) -> None:
    print("Type a query (empty line to exit). Commands: :phrase <text>, :complete <prefix>, :show <id>")
    while True:
        try:
            line = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            break
        if not line:
            break
        cmd, _, arg = line.partition(" ")
        if cmd == ":phrase":
            _emit_results(eng, arg, k, as_json, phrase=True)
        elif cmd == ":complete":
            _emit_suggestions(eng, arg, as_json)
        elif cmd == ":show":
            try:
                _emit_document(eng, int(arg), as_json)
            except ValueError:
                print(f"not a document id: {arg!r}")
        else:
            _emit_results(eng, line, k, as_json)

def main(argv: List[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Text search CLI (TF-IDF ranking + autocomplete)")
    p.add_argument("--roots", nargs="+", default=[], help="Folders to scan for .txt")
    p.add_argument("--unit", choices=["file", "line"], help="One document per file or per line")
    p.add_argument("--demo", action="store_true", help="Load the three sample documents")
    p.add_argument("--q", action="append", default=[], help="Ranked search (repeatable)")
    p.add_argument("--phrase", action="append", default=[], help="Phrase search (repeatable)")
    p.add_argument("--complete", action="append", default=[], help="Autocomplete a prefix (repeatable)")
    p.add_argument("--show", type=int, action="append", default=[], help="Print a stored document")
    p.add_argument("-k", type=int, default=TOP_K, help="Top-K results")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)
    if not args.roots and not args.demo:
        p.error("one of --roots or --demo is required")

    eng = initialize(args.roots, unit=args.unit, demo=args.demo, verbose=args.verbose)
    try:
        for q in args.q:
            _emit_results(eng, q, args.k, args.json)
        for q in args.phrase:
            _emit_results(eng, q, args.k, args.json, phrase=True)
        for prefix in args.complete:
            _emit_suggestions(eng, prefix, args.json)
        for doc_id in args.show:
            _emit_document(eng, doc_id, args.json)
        if args.repl:
            _repl(eng, args.k, args.json)
        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
