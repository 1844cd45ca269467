#!/usr/bin/env python3
"""
Main entry point for LLRB tree benchmarks.

This script runs performance benchmarks with proper phase separation:
- Setup (not timed): Key generation
- Warmup (not timed): Cache warming
- Run (timed): put / get / remove, with a dict baseline
- Verify (not timed): Invariant checks

Usage:
    # Run with default settings
    python -m benchmarks.run_benchmarks

    # Run with custom seed for reproducibility
    BENCHMARK_SEED=123 python -m benchmarks.run_benchmarks

    # Sequential keys (worst case for an unbalanced BST)
    python -m benchmarks.run_benchmarks --distribution sequential
"""

import argparse
import logging
import os
import sys
from datetime import datetime

from .config import DISTRIBUTIONS, BenchmarkConfig
from .runner import BenchmarkRunner


def setup_logging(config: BenchmarkConfig, log_dir: str = None) -> None:
    """
    Configure logging for benchmark output.

    Args:
        config: Benchmark configuration
        log_dir: Optional directory for log files
    """
    handlers = [logging.StreamHandler()]

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = os.path.join(log_dir, f"benchmark_{ts}.log")
        handlers.append(logging.FileHandler(log_path, mode="w"))

    level = getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
        force=True,  # Override any existing configuration
    )
    logging.getLogger("llrb_tree").setLevel(level)


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Run LLRB tree benchmarks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducibility (default: from env or 42)",
    )
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        help="Tree sizes to benchmark (default: 100 1000 10000)",
    )
    parser.add_argument(
        "--repetitions",
        type=int,
        help="Number of repetitions per size (default: 20)",
    )
    parser.add_argument(
        "--distribution",
        choices=DISTRIBUTIONS,
        help="Order in which keys are inserted (default: uniform)",
    )
    parser.add_argument(
        "--skip-warmup",
        action="store_true",
        help="Skip warmup phase",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--log-dir",
        help="Directory for log files (default: no log file)",
    )

    return parser.parse_args()


def main() -> int:
    """
    Main benchmark execution.

    Returns:
        Exit code (0 for success)
    """
    args = parse_args()

    # Start with config from environment
    config = BenchmarkConfig.from_env()

    # Override with command-line arguments
    if args.seed is not None:
        config.seed = args.seed
    if args.sizes is not None:
        config.sizes = args.sizes
    if args.repetitions is not None:
        config.repetitions = args.repetitions
    if args.distribution is not None:
        config.distribution = args.distribution
    if args.skip_warmup:
        config.skip_warmup = True
    if args.log_level is not None:
        config.log_level = args.log_level

    setup_logging(config, args.log_dir)

    runner = BenchmarkRunner(config)
    for size in config.sizes:
        logging.info("")
        logging.info("---------------- n = %d, repetitions = %d ----------------", size, config.repetitions)
        results, metadata = runner.run_benchmark(size, config.repetitions)
        runner.report(results, metadata)

    return 0


if __name__ == "__main__":
    sys.exit(main())
