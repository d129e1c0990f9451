"""
Benchmark API: run the speller performance benchmark in isolation.
Uses synthetic dictionaries only; the served dictionary is untouched.
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent.parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi import APIRouter, HTTPException, Query

from ..config import ENCODER_NAME

router = APIRouter(prefix="/api/benchmark", tags=["benchmark"])

MAX_BENCHMARK_WORDS = 50000
MAX_BENCHMARK_RUNS = 5


@router.post("/run")
def run_benchmark_endpoint(
    counts: list[int] = Query([1000, 10000], description="Dictionary sizes to benchmark"),
):
    """
    Build synthetic dictionaries of the given sizes and time suggestions.
    Returns metrics JSON for frontend graph rendering.
    """
    from benchmark.benchmark import run_benchmark
    if len(counts) > MAX_BENCHMARK_RUNS:
        raise HTTPException(
            status_code=400,
            detail=f"At most {MAX_BENCHMARK_RUNS} dictionary sizes per run",
        )
    counts = [max(1, min(c, MAX_BENCHMARK_WORDS)) for c in counts]
    return run_benchmark(counts=counts, encoder_name=ENCODER_NAME)
