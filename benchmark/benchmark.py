"""
Speller performance benchmarking module.

Measures: index build time, suggestion latency, candidate pool size and
bucket growth for synthetic dictionaries of increasing size.
Runs entirely in memory; does not touch any configured word list or index.
"""

import csv
import random
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Sequence

# Project root on path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from phonetics import get_encoder
from speller import SpellChecker

BENCHMARK_COUNTS = (1000, 10000, 50000)
QUERIES_PER_RUN = 50
_LETTERS = "abcdefghijklmnopqrstuvwxyz"
_VOWELS = "aeiou"
_CONSONANTS = "bcdfghjklmnpqrstvwxz"


def _synthetic_word(rng: random.Random) -> str:
    """Pronounceable pseudo-word: alternating consonant/vowel syllables."""
    syllables = rng.randint(1, 4)
    return "".join(rng.choice(_CONSONANTS) + rng.choice(_VOWELS) for _ in range(syllables))


def _misspell(word: str, rng: random.Random) -> str:
    """Apply one random edit (replace, insert, delete or swap)."""
    i = rng.randrange(len(word))
    op = rng.choice(("replace", "insert", "delete", "swap"))
    if op == "replace":
        return word[:i] + rng.choice(_LETTERS) + word[i + 1:]
    if op == "insert":
        return word[:i] + rng.choice(_LETTERS) + word[i:]
    if op == "delete" and len(word) > 1:
        return word[:i] + word[i + 1:]
    if op == "swap" and i + 1 < len(word):
        return word[:i] + word[i + 1] + word[i] + word[i + 2:]
    return word + rng.choice(_LETTERS)


def _run_one(count: int, encoder_name: str, seed: int) -> Dict[str, Any]:
    rng = random.Random(seed + count)
    words = [_synthetic_word(rng) for _ in range(count)]
    start = time.perf_counter()
    checker = SpellChecker.from_words(words, encoder=get_encoder(encoder_name))
    build_sec = time.perf_counter() - start

    queries = [_misspell(rng.choice(words), rng) for _ in range(QUERIES_PER_RUN)]
    candidate_total = 0
    hits = 0
    start = time.perf_counter()
    for q in queries:
        report = checker.explain(q)
        candidate_total += len(report.candidates)
        hits += 1 if report.suggestions else 0
    search_sec = time.perf_counter() - start

    return {
        "num_words": count,
        "encoder": encoder_name,
        "build_sec": round(build_sec, 4),
        "bucket_count": checker.index.bucket_count,
        "suggest_latency_ms": round(search_sec / len(queries) * 1000, 3),
        "mean_candidates": round(candidate_total / len(queries), 1),
        "queries_with_suggestions": hits,
        "queries": len(queries),
        "error": None,
    }


def _compute_scaling_analysis(results: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Compute per-word rates and a scaling summary from benchmark results."""
    valid = [r for r in results if r.get("error") is None]
    if not valid:
        return {
            "summary": "Insufficient data for scaling analysis.",
            "build_time_per_word_us": None,
            "suggest_latency_ms_at_max_n": None,
        }
    largest = max(valid, key=lambda r: r["num_words"])
    n = largest["num_words"]
    build_per_word_us = largest["build_sec"] / n * 1e6 if n else None
    parts = [
        f"Build: ~{build_per_word_us:.1f} us per word.",
        f"Suggest latency at N={n}: {largest['suggest_latency_ms']:.2f} ms.",
        f"Buckets at N={n}: {largest['bucket_count']}.",
    ]
    if len(valid) >= 2:
        r0, r1 = valid[0], valid[-1]
        n0, n1 = r0["num_words"], r1["num_words"]
        b0, b1 = r0["build_sec"], r1["build_sec"]
        if b0 and b1 and n0 < n1 and 0.5 <= (b1 / b0) / (n1 / n0) <= 2.0:
            parts.append("Scaling: build time grows approximately linearly with word count.")
    return {
        "summary": " ".join(parts),
        "build_time_per_word_us": round(build_per_word_us, 3) if build_per_word_us is not None else None,
        "suggest_latency_ms_at_max_n": largest["suggest_latency_ms"],
    }


def run_benchmark(
    counts: Sequence[int] = BENCHMARK_COUNTS,
    encoder_name: str = "metaphone",
    seed: int = 7,
) -> Dict[str, Any]:
    """
    Run the benchmark for each dictionary size in counts.
    A failing run is reported with its error instead of aborting the others.
    """
    results = []
    for count in counts:
        try:
            results.append(_run_one(count, encoder_name, seed))
        except Exception as e:
            results.append({"num_words": count, "encoder": encoder_name, "error": str(e)})
    return {"results": results, "scaling": _compute_scaling_analysis(results)}


def write_csv(results: List[Dict[str, Any]], path: Path) -> None:
    """Write per-run metrics to CSV (one row per dictionary size)."""
    fields = [
        "num_words",
        "encoder",
        "build_sec",
        "bucket_count",
        "suggest_latency_ms",
        "mean_candidates",
        "queries_with_suggestions",
        "queries",
        "error",
    ]
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fields, extrasaction="ignore")
        writer.writeheader()
        for row in results:
            writer.writerow(row)
