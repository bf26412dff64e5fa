# apps/cli/query.py
"""
CLI entry point for querying the clue engine.

Subcommands (results are printed as JSON lists):
  words TOKEN[/TOKEN...]     candidates consistent with every guess
  most-letters N PATTERN     length-N words best covering PATTERN's letters
  most-common N              length-N words made of the most widespread letters
  validate                   one-line corpus summary

Examples:
  python -m apps.cli.query words A0P1P2L0E0/S2T0O0R0M0
  python -m apps.cli.query --corpus data/corpus.txt most-common 5
"""

from __future__ import annotations

import argparse
import json
import logging

from wordler.config import DEFAULT_CORPUS
from wordler.corpus import load_index, validate_corpus, pretty_summary
from wordler.engine import ClueError, split_tokens
from wordler.harness import queries


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordler — filter and rank words from Wordle feedback")
    ap.add_argument("--corpus", default=DEFAULT_CORPUS,
                    help="path to the corpus (one word per line; env CORPUS_FILE)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("words", help="list candidates for one or more guesses")
    p.add_argument("guesses", nargs="+",
                   help="guess tokens like A0P1P2L0E0; '/'-separated paths are split")

    p = sub.add_parser("most-letters", help="words best covering a letter pattern")
    p.add_argument("n", type=int, help="word length")
    p.add_argument("pattern", help="letters to cover, e.g. PAPEL")

    p = sub.add_parser("most-common", help="words made of the most common letters")
    p.add_argument("n", type=int, help="word length")

    sub.add_parser("validate", help="check the corpus file")
    return ap


def main(argv=None):
    ap = _build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "validate":
        rep = validate_corpus(args.corpus)
        print(pretty_summary(rep))
        for issue in rep["issues"]:
            print(f"  - {issue}")
        return 0 if rep["passed"] else 1

    try:
        index = load_index(args.corpus)
    except FileNotFoundError as e:
        ap.exit(2, f"error: corpus file not found: {e}\n")

    try:
        if args.command == "words":
            tokens = [t for g in args.guesses for t in split_tokens(g.upper())]
            out = queries.words(index, tokens)
        elif args.command == "most-letters":
            out = queries.most_letters(index, args.n, args.pattern)
        else:
            out = queries.most_common(index, args.n)
    except ClueError as e:
        ap.exit(2, f"error: {e}\n")

    print(json.dumps(out, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
