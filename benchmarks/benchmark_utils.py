"""
Benchmarking utilities for LLRB trees.

This module provides common utilities and base classes for ASV benchmarking
that work optimally with ASV's built-in timing and stabilization mechanisms.

Reproducibility:
    All random data generation uses deterministic seeds by default.
    The default seed can be overridden via the BENCHMARK_SEED environment variable.

Logging:
    Benchmarks should be run with logging at INFO level or higher to avoid
    performance contamination from verbose debug output.
"""

import random
import gc
import os
import logging
from typing import List, Tuple
import numpy as np

from llrb_tree.keys import IntKey

# Default seed for deterministic benchmarking - can be overridden via environment variable
DEFAULT_BENCHMARK_SEED = int(os.environ.get('BENCHMARK_SEED', '42'))

# Logger for benchmark utilities
_logger = logging.getLogger(__name__)


class BenchmarkUtils:
    """Utility class for ASV benchmarking operations.

    This class provides methods for generating deterministic test data and
    performing common benchmark setup operations while ensuring reproducibility.
    """

    @staticmethod
    def check_logging_level():
        """
        Check if logging level is appropriate for benchmarking.

        Raises if DEBUG or lower (more verbose) logging is enabled, as the
        rotation and fix-up debug records would dominate the measurements.
        """
        llrb_logger = logging.getLogger("llrb_tree")
        # Use getEffectiveLevel() to handle NOTSET correctly
        effective_level = llrb_logger.getEffectiveLevel()
        if effective_level <= logging.DEBUG:
            raise ValueError(
                f"Logging level is set to {logging.getLevelName(effective_level)}. "
                "Benchmarks require logging to be at INFO level or higher to avoid "
                "performance contamination from verbose debug output."
            )

    @staticmethod
    def generate_deterministic_keys(size: int,
                                    seed: int = None,
                                    key_range: Tuple[int, int] = (1, 1000000),
                                    distribution: str = 'uniform') -> List[int]:
        """
        Generate deterministic, distinct integer keys for benchmarking.

        Args:
            size: Number of keys to generate
            seed: Random seed for reproducibility. If None, uses DEFAULT_BENCHMARK_SEED.
            key_range: Range of key values (min, max)
            distribution: 'uniform' (random order), 'sequential' (ascending)
                or 'reversed' (descending)

        Returns:
            List of deterministic keys
        """
        if seed is None:
            seed = DEFAULT_BENCHMARK_SEED

        rng = np.random.default_rng(seed)
        min_key, max_key = key_range
        if max_key - min_key + 1 < size:
            raise ValueError(f"Key range too small! Required: {size}, Available: {max_key - min_key + 1}")

        if distribution == 'uniform':
            return rng.choice(np.arange(min_key, max_key + 1), size=size, replace=False).tolist()
        elif distribution == 'sequential':
            return list(range(min_key, min_key + size))
        elif distribution == 'reversed':
            return list(range(min_key + size - 1, min_key - 1, -1))
        else:
            raise ValueError(f"Unknown distribution: {distribution}")

    @staticmethod
    def create_test_keys(keys: List[int]) -> List[IntKey]:
        """Wrap raw integers as tree keys."""
        return [IntKey(k) for k in keys]

    @staticmethod
    def create_lookup_keys(insert_keys: List[int],
                           hit_ratio: float = 0.8,
                           seed: int = None,
                           num_lookups: int = 1000) -> List[int]:
        """
        Create keys for lookup operations with specified hit ratio.

        Args:
            insert_keys: Keys that were inserted (for hits)
            hit_ratio: Ratio of lookups that should be hits (0.0 to 1.0)
            seed: Random seed for reproducibility. If None, uses DEFAULT_BENCHMARK_SEED.
            num_lookups: Number of lookup keys to generate

        Returns:
            List of lookup keys
        """
        if seed is None:
            seed = DEFAULT_BENCHMARK_SEED

        rnd = random.Random(seed)

        if not insert_keys:
            return [rnd.randint(1, 1000000) for _ in range(num_lookups)]

        num_hits = int(num_lookups * hit_ratio)
        num_misses = num_lookups - num_hits

        hit_keys = rnd.choices(insert_keys, k=num_hits) if num_hits > 0 else []

        # Misses are drawn above the largest inserted key
        max_key = max(insert_keys)
        miss_keys = [max_key + rnd.randint(1, max_key + 1) for _ in range(num_misses)]

        lookup_keys = hit_keys + miss_keys
        rnd.shuffle(lookup_keys)
        return lookup_keys


class BaseBenchmark:
    """Base class for ASV benchmarks optimized for ASV's built-in timing.

    This class provides a standard setup/teardown pattern that ensures:
    - Garbage collection is disabled during timed sections
    - Logging level is appropriate for benchmarking
    - Consistent parameter handling across benchmarks
    """

    # Parameters for benchmarking
    params = []
    param_names = []

    # Let ASV handle timing optimization automatically
    warmup_time = 0.1
    sample_time = 0.4

    def setup(self, *params):
        """Setup method called before each benchmark.

        Subclasses should:
        1. Call super().setup(*params) first
        2. Prepare test data
        3. Call gc.collect() to clean up setup overhead
        4. Call gc.disable() to prevent GC during measurement
        """
        BenchmarkUtils.check_logging_level()

    def teardown(self, *params):
        """Re-enables garbage collection after measurement completes."""
        if not gc.isenabled():
            gc.enable()
