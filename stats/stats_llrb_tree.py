"""Statistics for LLRB trees."""

import argparse
import logging
import math
import os
import random
import time
from datetime import datetime
from statistics import mean

import numpy as np

from llrb_tree.invariants import assert_tree_invariants_raise
from llrb_tree.keys import IntKey
from llrb_tree.llrb_tree_base import LLRBTree
from llrb_tree.tree_stats import llrb_stats_

logger = logging.getLogger(__name__)


def create_tree(keys) -> LLRBTree:
    """Build a tree by putting every key with its integer as the value."""
    tree = LLRBTree()
    tree_put = tree.put
    for k in keys:
        tree_put(IntKey(k), k)
    return tree


def random_tree_of_size(n: int, remove_fraction: float = 0.0) -> LLRBTree:
    """
    Build a tree from n distinct random keys, then remove a random
    ``remove_fraction`` of them again.
    """
    # we need at least n unique values; 2^24 = 16 777 216 > 1 000 000
    space = 1 << 24
    if space <= n:
        raise ValueError(f"Key-space too small! Required: {n + 1}, Available: {space}")

    keys = random.sample(range(1, space), k=n)
    tree = create_tree(keys)

    remove_count = int(n * remove_fraction)
    for k in random.sample(keys, k=remove_count):
        tree.remove(IntKey(k))
    return tree


def repeated_experiment(
    size: int,
    repetitions: int,
    remove_fraction: float,
) -> None:
    """
    Repeatedly builds random LLRB trees and aggregates height, black height
    and color statistics together with build / stats timings.
    """
    t_all_0 = time.perf_counter()

    results = []
    times_build = []
    times_stats = []

    for _ in range(repetitions):
        t0 = time.perf_counter()
        tree = random_tree_of_size(size, remove_fraction)
        times_build.append(time.perf_counter() - t0)

        t0 = time.perf_counter()
        stats = llrb_stats_(tree)
        times_stats.append(time.perf_counter() - t0)

        results.append(stats)
        assert_tree_invariants_raise(tree, stats)

    live = size - int(size * remove_fraction)
    # Perfect height of a binary tree holding `live` nodes
    perfect_height = math.ceil(math.log2(live + 1)) if live > 0 else 0

    heights = np.array([s.height for s in results], dtype=float)
    black_heights = np.array([s.black_height for s in results], dtype=float)
    red_share = np.array(
        [s.red_count / s.node_count if s.node_count else 0.0 for s in results], dtype=float
    )
    height_amp = heights / perfect_height if perfect_height else np.zeros_like(heights)

    rows = [
        ("Node count", live, None),
        ("Height", heights.mean(), heights.var()),
        ("Black height", black_heights.mean(), black_heights.var()),
        ("Red share", red_share.mean(), red_share.var()),
        ("Perfect height", perfect_height, None),
        ("Height amplification", height_amp.mean(), height_amp.var()),
        ("Max height", heights.max(), None),
    ]

    header = f"{'Metric':<22} {'Avg':>15} {'(Var)':>15}"
    logger.info(header)
    logger.info("-" * len(header))
    for name, avg, var in rows:
        if var is None:
            logger.info(f"{name:<22} {avg:>15}")
        else:
            var_str = f"({var:.4f})"
            logger.info(f"{name:<22} {avg:15.4f} {var_str:>15}")

    sum_build = sum(times_build)
    sum_stats = sum(times_stats)
    logger.info("")
    logger.info("Performance summary:")
    logger.info(f"{'Build time (s)':<22}{mean(times_build):13.6f}{sum_build:13.6f}")
    logger.info(f"{'Stats time (s)':<22}{mean(times_stats):13.6f}{sum_stats:13.6f}")
    logger.info("Execution time: %.3f seconds", time.perf_counter() - t_all_0)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run statistics experiments for LLRB trees.")
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=[10, 100, 1000, 10_000], help="List of tree sizes to test."
    )
    parser.add_argument("--repetitions", type=int, default=10, help="Number of repetitions for each experiment.")
    parser.add_argument(
        "--remove-fraction", type=float, default=0.5, help="Share of keys removed again after building."
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Set the logging level (default: INFO)",
    )

    args = parser.parse_args()

    if args.seed is not None:
        random.seed(args.seed)
        np.random.seed(args.seed)

    log_dir = os.path.join(os.getcwd(), "stats/logs/llrb_tree_logs")
    os.makedirs(log_dir, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = os.path.join(log_dir, f"run_{ts}.log")

    log_level = getattr(logging, args.log_level)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(log_path, mode="w"),
            logging.StreamHandler(),
        ],
        force=True,  # Override any existing logging configuration
    )

    # Also apply the chosen level to the library logger so that
    # log records from llrb_tree.* are emitted at the requested level.
    logging.getLogger("llrb_tree").setLevel(log_level)

    for n in args.sizes:
        logger.info("")
        logger.info(
            f"---------------- NOW RUNNING EXPERIMENT: n = {n}, "
            f"remove fraction = {args.remove_fraction}, repetitions = {args.repetitions} ----------------"
        )
        t0 = time.perf_counter()
        repeated_experiment(size=n, repetitions=args.repetitions, remove_fraction=args.remove_fraction)
        logger.info(f"Total experiment time: {time.perf_counter() - t0:.3f} seconds")
