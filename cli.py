#!/usr/bin/env python3
"""
CLI for the phonetic spelling checker.

Commands:
  check <word>...   Report whether each word is in the dictionary
  suggest <word>    Print ranked suggestions for a word
  build --out F     Save the phonetic index (JSON, or SQLite for .db)
  stats             Dictionary size and bucket count
  demo              Run a few queries against the bundled sample word list
  benchmark         Measure build time and suggestion latency
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from phonetics import ENCODERS, get_encoder
from speller import DEFAULT_THRESHOLD, SpellChecker, SpellerError, load_index, save_index

SAMPLE_WORDLIST = Path(__file__).resolve().parent / "data" / "sample_words.txt"


def load_checker(args: argparse.Namespace) -> SpellChecker:
    """Checker from --index if given, else from --wordlist."""
    encoder = get_encoder(args.encoder) if args.encoder else None
    try:
        if args.index:
            return SpellChecker(load_index(args.index, encoder), threshold=args.threshold)
        return SpellChecker.from_file(args.wordlist, encoder=encoder, threshold=args.threshold)
    except SpellerError as e:
        print("Could not load dictionary:", e, file=sys.stderr)
        sys.exit(1)


def cmd_check(args: argparse.Namespace) -> None:
    checker = load_checker(args)
    misspelled = 0
    for word in args.words:
        ok = checker.is_correct(word)
        misspelled += 0 if ok else 1
        print(f"{word}: {'ok' if ok else 'misspelled'}")
    if misspelled:
        sys.exit(1)


def cmd_suggest(args: argparse.Namespace) -> None:
    checker = load_checker(args)
    try:
        report = checker.explain(args.word, args.query_threshold)
    except SpellerError as e:
        print("Could not encode word:", e, file=sys.stderr)
        sys.exit(2)
    suggestions = report.suggestions
    if args.limit:
        suggestions = suggestions[: args.limit]
    if args.verbose:
        print("Code:", report.code)
        print("Mutated codes:", len(report.mutated_codes))
        print("Candidates:", len(report.candidates))
        for failure in report.failures:
            print(" ! failed:", failure.word, "-", failure.error)
    print("Query:", args.word)
    print("Suggestions:", len(suggestions))
    for s in suggestions:
        print(f" - {s.word} ({s.distance})")


def cmd_build(args: argparse.Namespace) -> None:
    checker = load_checker(args)
    save_index(checker.index, args.out)
    print("Saved", len(checker.index), "words in", checker.index.bucket_count, "buckets to", args.out)


def cmd_stats(args: argparse.Namespace) -> None:
    checker = load_checker(args)
    print("Encoder:", checker.index.encoder.name)
    print("Alphabet:", checker.index.alphabet)
    print("Words:", len(checker.index))
    print("Buckets:", checker.index.bucket_count)


def cmd_demo(args: argparse.Namespace) -> None:
    """Run a self-contained demo with the sample word list."""
    if not SAMPLE_WORDLIST.exists():
        print("Sample data not found at", SAMPLE_WORDLIST, file=sys.stderr)
        sys.exit(1)
    encoder = get_encoder(args.encoder) if args.encoder else None
    checker = SpellChecker.from_file(SAMPLE_WORDLIST, encoder=encoder)
    print("Demo: loaded", len(checker), "words.")
    for word in ("Family", "famly", "recieve", "goverment", "beleive"):
        print(f"\n{word!r} correct: {checker.is_correct(word)}")
        for s in checker.suggest(word)[:5]:
            print(f" - {s.word} ({s.distance})")
    print("\nDemo done.")


def cmd_benchmark(args: argparse.Namespace) -> None:
    from benchmark import run_benchmark, write_csv

    result = run_benchmark(counts=args.counts, encoder_name=args.encoder or "metaphone")
    for r in result["results"]:
        if r.get("error"):
            print(f"N={r['num_words']}: error: {r['error']}")
            continue
        print(
            f"N={r['num_words']}: build {r['build_sec']}s, "
            f"suggest {r['suggest_latency_ms']}ms, "
            f"{r['mean_candidates']} candidates, {r['bucket_count']} buckets"
        )
    print(result["scaling"]["summary"])
    if args.csv:
        write_csv(result["results"], Path(args.csv))
        print("Results written to", args.csv)


def _configure_logging(args: argparse.Namespace) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if args.log_file:
        handlers.append(logging.FileHandler(args.log_file, encoding="utf-8"))
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(levelname)s: %(message)s",
        handlers=handlers,
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Phonetic spelling checker")
    parser.add_argument("--wordlist", default=str(SAMPLE_WORDLIST), help="Word list, one word per line")
    parser.add_argument("--index", help="Saved index (.json or .db) to load instead of a word list")
    parser.add_argument("--encoder", choices=sorted(ENCODERS), help="Phonetic encoder (default: metaphone)")
    parser.add_argument("--threshold", type=int, default=DEFAULT_THRESHOLD, help="Default maximum edit distance")
    parser.add_argument("--log-level", default="WARNING", help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("--log-file", help="Also write log messages to this file")
    sub = parser.add_subparsers(dest="command", required=True)
    p_check = sub.add_parser("check", help="Check words against the dictionary")
    p_check.add_argument("words", nargs="+", help="Words to check")
    p_suggest = sub.add_parser("suggest", help="Suggest corrections for a word")
    p_suggest.add_argument("word", help="Misspelled word")
    p_suggest.add_argument(
        "--threshold", dest="query_threshold", type=int, default=None,
        help="Maximum edit distance for this query (default: global --threshold)",
    )
    p_suggest.add_argument("--limit", type=int, default=0, help="Show at most this many suggestions")
    p_suggest.add_argument("-v", "--verbose", action="store_true", help="Show code and candidate statistics")
    p_build = sub.add_parser("build", help="Save the phonetic index")
    p_build.add_argument("--out", required=True, help="Output path (.json or .db)")
    sub.add_parser("stats", help="Show dictionary statistics")
    sub.add_parser("demo", help="Run demo with the sample word list")
    p_bench = sub.add_parser("benchmark", help="Benchmark build time and suggestion latency")
    p_bench.add_argument("--counts", type=int, nargs="+", default=[1000, 10000], help="Dictionary sizes")
    p_bench.add_argument("--csv", help="Write results to this CSV file")
    args = parser.parse_args()
    _configure_logging(args)
    if args.command == "check":
        cmd_check(args)
    elif args.command == "suggest":
        cmd_suggest(args)
    elif args.command == "build":
        cmd_build(args)
    elif args.command == "stats":
        cmd_stats(args)
    elif args.command == "demo":
        cmd_demo(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)


if __name__ == "__main__":
    main()
