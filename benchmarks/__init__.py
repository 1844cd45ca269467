"""
Benchmarks package for LLRB trees.

This package contains ASV benchmarks and a standalone runner for:
- LLRBTree construction via put
- LLRBTree lookups with configurable hit ratios
- Removal by key and by minimum
- A dict baseline for comparison

The benchmarks use deterministic test data so that runs are reproducible.
"""

# Import benchmark utilities for easier access
from .benchmark_utils import BaseBenchmark, BenchmarkUtils

__all__ = ["BaseBenchmark", "BenchmarkUtils"]
