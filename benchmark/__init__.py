"""Speller performance benchmarking: index build time, suggestion latency, bucket growth."""

from .benchmark import run_benchmark, write_csv, BENCHMARK_COUNTS

__all__ = ["run_benchmark", "write_csv", "BENCHMARK_COUNTS"]
