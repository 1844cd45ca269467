"""Core benchmark runner for LLRB tree performance measurements."""

import logging
import math
import time
from dataclasses import dataclass
from statistics import mean, pvariance
from typing import Dict, List, Tuple

from tqdm import tqdm

from llrb_tree.invariants import InvariantError, assert_tree_invariants_raise
from llrb_tree.keys import IntKey
from llrb_tree.llrb_tree_base import LLRBTree
from llrb_tree.tree_stats import Stats, llrb_stats_

from .benchmark_utils import BenchmarkUtils
from .config import BenchmarkConfig, BenchmarkMetadata, get_git_commit_hash


@dataclass
class BenchmarkInput:
    """Pre-generated keys for one repetition."""
    insert_keys: List[IntKey]
    lookup_keys: List[IntKey]
    remove_keys: List[IntKey]


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    stats: Stats
    build_time: float
    get_time: float
    remove_time: float
    dict_build_time: float
    dict_get_time: float


class BenchmarkRunner:
    """
    Manages the benchmark lifecycle with proper phase separation.

    Phases:
    1. Setup (not timed): Key generation
    2. Warmup (not timed): Optional warmup iterations
    3. Run (timed): put / get / remove against LLRBTree and a dict baseline
    4. Verify (not timed): Invariant checks on the resulting trees
    """

    def __init__(self, config: BenchmarkConfig):
        self.config = config
        self._check_logging_level()

    def _check_logging_level(self) -> None:
        """Warn if verbose logging is enabled during measurement."""
        current_level = logging.getLogger("llrb_tree").getEffectiveLevel()
        if current_level < logging.INFO:
            level_name = logging.getLevelName(current_level)
            logging.warning(
                "Verbose logging (%s) is enabled. This may affect benchmark timing! "
                "Set log level to INFO or higher for accurate measurements.",
                level_name
            )

    def setup(self, size: int, repetitions: int) -> List[BenchmarkInput]:
        """
        Setup phase: Generate keys for every repetition.

        NOT TIMED.
        """
        inputs = []
        for i in range(repetitions):
            seed = self.config.seed + i
            raw = BenchmarkUtils.generate_deterministic_keys(
                size=size, seed=seed, distribution=self.config.distribution
            )
            lookups = BenchmarkUtils.create_lookup_keys(
                raw, hit_ratio=self.config.hit_ratio, seed=seed, num_lookups=size
            )
            insert_keys = BenchmarkUtils.create_test_keys(raw)
            inputs.append(BenchmarkInput(
                insert_keys=insert_keys,
                lookup_keys=BenchmarkUtils.create_test_keys(lookups),
                remove_keys=insert_keys[: size // 2],
            ))
        return inputs

    def warmup(self, inputs: List[BenchmarkInput]) -> None:
        """Warmup phase: build a few trees to warm caches. NOT TIMED."""
        if self.config.skip_warmup:
            return
        for bench_input in inputs[:min(3, len(inputs))]:
            tree = LLRBTree()
            for k in bench_input.insert_keys:
                tree.put(k, k.value)

    def run_single(self, bench_input: BenchmarkInput) -> Tuple[LLRBTree, BenchmarkResult]:
        """
        Run measurement on a single key set.

        TIMED - only the actual operations are measured.
        """
        tree = LLRBTree()
        t0 = time.perf_counter()
        for k in bench_input.insert_keys:
            tree.put(k, k.value)
        build_time = time.perf_counter() - t0

        t0 = time.perf_counter()
        for k in bench_input.lookup_keys:
            tree.get(k)
        get_time = time.perf_counter() - t0

        # Stats are taken on the full tree, before removal
        stats = llrb_stats_(tree)

        t0 = time.perf_counter()
        for k in bench_input.remove_keys:
            tree.remove(k)
        remove_time = time.perf_counter() - t0

        baseline: Dict[IntKey, int] = {}
        t0 = time.perf_counter()
        for k in bench_input.insert_keys:
            baseline[k] = k.value
        dict_build_time = time.perf_counter() - t0

        t0 = time.perf_counter()
        for k in bench_input.lookup_keys:
            baseline.get(k)
        dict_get_time = time.perf_counter() - t0

        return tree, BenchmarkResult(
            stats=stats,
            build_time=build_time,
            get_time=get_time,
            remove_time=remove_time,
            dict_build_time=dict_build_time,
            dict_get_time=dict_get_time,
        )

    def verify(self, tree: LLRBTree) -> bool:
        """Verify phase: check the tree left after removals. NOT TIMED."""
        try:
            assert_tree_invariants_raise(tree, llrb_stats_(tree))
        except InvariantError as e:
            logging.error("%s", e)
            return False
        return True

    def run_benchmark(self, size: int, repetitions: int) -> Tuple[List[BenchmarkResult], BenchmarkMetadata]:
        """Run complete benchmark with proper phase separation."""
        metadata = BenchmarkMetadata(
            commit_hash=get_git_commit_hash(),
            config=self.config,
            size=size,
            repetitions=repetitions,
        )

        # === SETUP PHASE (not timed) ===
        logging.debug("Setup: Generating %d key sets...", repetitions)
        inputs = self.setup(size, repetitions)

        # === WARMUP PHASE (not timed) ===
        self.warmup(inputs)

        # === MEASUREMENT PHASE (timed) ===
        results = []
        all_verified = True
        for bench_input in tqdm(inputs, desc=f"n={size}", leave=False):
            tree, result = self.run_single(bench_input)
            results.append(result)

            # === VERIFY PHASE (not timed) ===
            if not self.verify(tree):
                all_verified = False

        if not all_verified:
            logging.error("Invariant verification failed for n=%d", size)

        return results, metadata

    def report(self, results: List[BenchmarkResult], metadata: BenchmarkMetadata) -> None:
        """Log a summary table for one benchmark configuration."""
        size = metadata.size
        log2_n = math.log2(size + 1) if size > 0 else 0

        rows = [
            ("Height", [r.stats.height for r in results]),
            ("Black height", [r.stats.black_height for r in results]),
            ("Red nodes", [r.stats.red_count for r in results]),
            ("Put total (s)", [r.build_time for r in results]),
            ("Get total (s)", [r.get_time for r in results]),
            ("Remove total (s)", [r.remove_time for r in results]),
            ("dict put (s)", [r.dict_build_time for r in results]),
            ("dict get (s)", [r.dict_get_time for r in results]),
        ]

        for line in str(metadata).splitlines():
            logging.info(line)
        header = f"{'Metric':<20}{'Avg':>15}{'Var':>15}"
        logging.info(header)
        logging.info("-" * len(header))
        for name, values in rows:
            logging.info(f"{name:<20}{mean(values):15.6f}{pvariance(values):15.6f}")
        logging.info(f"{'2*log2(n+1)':<20}{2 * log2_n:15.2f}")
