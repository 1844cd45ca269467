"""
ASV benchmarks for LLRBTree operations.

Covers batch construction via ``put``, point lookups via ``get`` with a
configurable hit ratio, and draining a tree via ``remove`` /
``remove_min`` for several sizes and key orders.
"""

import gc

from llrb_tree.llrb_tree_base import LLRBTree
from benchmarks.benchmark_utils import BaseBenchmark, BenchmarkUtils


def _build_tree(keys) -> LLRBTree:
    tree = LLRBTree()
    put = tree.put
    for k in keys:
        put(k, k.value)
    return tree


class LLRBTreeBatchInsertBenchmarks(BaseBenchmark):
    """Benchmarks for tree construction via sequential puts."""

    params = [
        [100, 1000, 10000],
        ['uniform', 'sequential', 'reversed'],
    ]
    param_names = ['size', 'distribution']

    min_run_count = 5

    def setup(self, size, distribution):
        super().setup(size, distribution)
        raw = BenchmarkUtils.generate_deterministic_keys(
            size=size,
            seed=42 + size,
            distribution=distribution,
        )
        self.keys = BenchmarkUtils.create_test_keys(raw)
        gc.collect()
        gc.disable()

    def time_put_batch_construction(self, size, distribution):
        _build_tree(self.keys)


class LLRBTreeGetBenchmarks(BaseBenchmark):
    """Benchmarks for LLRBTree.get() with a mix of hits and misses."""

    params = [
        [100, 1000, 10000],
        [0.0, 0.5, 1.0],
    ]
    param_names = ['size', 'hit_ratio']

    def setup(self, size, hit_ratio):
        super().setup(size, hit_ratio)
        raw = BenchmarkUtils.generate_deterministic_keys(size=size, seed=7 + size)
        self.tree = _build_tree(BenchmarkUtils.create_test_keys(raw))
        lookups = BenchmarkUtils.create_lookup_keys(raw, hit_ratio=hit_ratio, seed=11 + size)
        self.lookup_keys = BenchmarkUtils.create_test_keys(lookups)
        gc.collect()
        gc.disable()

    def time_get(self, size, hit_ratio):
        get = self.tree.get
        for k in self.lookup_keys:
            get(k)


class LLRBTreeRemoveBenchmarks(BaseBenchmark):
    """Benchmarks for draining a tree by key and by minimum.

    Each timed call empties the tree, so every sample gets its own setup.
    """

    params = [[100, 1000, 10000]]
    param_names = ['size']

    number = 1
    repeat = 20
    warmup_time = 0

    def setup(self, size):
        super().setup(size)
        raw = BenchmarkUtils.generate_deterministic_keys(size=size, seed=13 + size)
        self.keys = BenchmarkUtils.create_test_keys(raw)
        self.tree = _build_tree(self.keys)
        gc.collect()
        gc.disable()

    def time_remove_all(self, size):
        tree = self.tree
        for k in self.keys:
            tree.remove(k)

    def time_remove_min_all(self, size):
        tree = self.tree
        while not tree.is_empty():
            tree.remove_min()
