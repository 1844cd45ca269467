"""Tests for LLRBTree.remove and LLRBTree.remove_min."""

import random
import unittest

from llrb_tree.keys import IntKey
from tests.test_base import SCENARIO_KEYS, LLRBTreeTestCase


class TestRemoveBasics(LLRBTreeTestCase):

    def test_remove_from_empty_tree(self):
        self.assertIsNone(self.tree.remove(self.make_key("1")))
        self.assertTrue(self.tree.is_empty())

    def test_remove_absent_is_noop(self):
        self.put_keys(SCENARIO_KEYS)
        before = self.tree.size()
        self.assertIsNone(self.tree.remove(self.make_key("5")))
        self.assertEqual(self.tree.size(), before)
        self.expected_keys = SCENARIO_KEYS

    def test_remove_only_key(self):
        self.put_keys(["1"])
        self.assertEqual(self.tree.remove(self.make_key("1")), 1)
        self.assertTrue(self.tree.is_empty())
        self.assert_absent("1")

    def test_remove_returns_value(self):
        self.tree.put(self.make_key("a"), {"payload": 1})
        self.assertEqual(self.tree.remove(self.make_key("a")), {"payload": 1})

    def test_remove_none_value(self):
        # a stored None is indistinguishable from "absent" in the return
        # value; get() tells them apart
        self.tree.put(self.make_key("a"), None)
        self.assertIsNone(self.tree.remove(self.make_key("a")))
        self.assert_absent("a")

    def test_remove_root_of_three(self):
        self.put_keys(["1", "2", "3"])
        self.assertEqual(self.tree.remove(self.make_key("2")), 2)
        self.expected_keys = ["1", "3"]

    def test_remove_red_leaf(self):
        self.put_keys(["5", "3"])
        self.assertEqual(self.tree.remove(self.make_key("3")), 3)
        self.expected_keys = ["5"]

    def test_remove_root_with_red_left(self):
        self.put_keys(["5", "3"])
        self.assertEqual(self.tree.remove(self.make_key("5")), 5)
        self.expected_keys = ["3"]


class TestRemoveEachPosition(LLRBTreeTestCase):
    """Remove every key in turn from a fresh copy of the same tree."""

    def make_key(self, key):
        return IntKey(key)

    def test_every_single_removal(self):
        keys = list(range(1, 64))
        for victim in keys:
            with self.subTest(victim=victim):
                self.tree.clear()
                self.put_keys(keys)
                self.assertEqual(self.tree.remove(IntKey(victim)), victim)
                self.assert_absent(victim)
                self.validate_tree(self.tree, [k for k in keys if k != victim])

    def test_size_decreases_by_one(self):
        keys = list(range(100))
        self.put_keys(keys)
        for i, k in enumerate(keys[::3]):
            size = self.tree.size()
            self.tree.remove(IntKey(k))
            self.assertEqual(self.tree.size(), size - 1)
        self.validate_tree(self.tree)


class TestRemoveSequences(LLRBTreeTestCase):

    def make_key(self, key):
        return IntKey(key)

    def _drain(self, insert_order, remove_order):
        self.put_keys(insert_order)
        remaining = set(insert_order)
        for i, k in enumerate(remove_order):
            self.assertEqual(self.tree.remove(IntKey(k)), k)
            remaining.discard(k)
            if i % 7 == 0:
                self.validate_tree(self.tree, sorted(remaining))
        self.assertTrue(self.tree.is_empty())

    def test_ascending_removal(self):
        keys = list(range(200))
        self._drain(keys, keys)

    def test_descending_removal(self):
        keys = list(range(200))
        self._drain(keys, keys[::-1])

    def test_random_removal(self):
        rnd = random.Random(99)
        keys = list(range(300))
        rnd.shuffle(keys)
        removal = keys[:]
        rnd.shuffle(removal)
        self._drain(keys, removal)

    def test_remove_from_the_middle_outwards(self):
        keys = list(range(101))
        order = sorted(keys, key=lambda k: abs(k - 50))
        self._drain(keys, order)

    def test_reinsert_after_removal(self):
        keys = list(range(50))
        self.put_keys(keys)
        for k in keys[::2]:
            self.tree.remove(IntKey(k))
        self.put_keys(keys[::2])
        self.expected_keys = keys


class TestRemoveMin(LLRBTreeTestCase):

    def test_remove_min_empty(self):
        self.assertEqual(self.tree.remove_min(), (None, None))

    def test_remove_min_single(self):
        self.put_keys(["7"])
        self.assertEqual(self.tree.remove_min(), (self.make_key("7"), 7))
        self.assertTrue(self.tree.is_empty())

    def test_remove_min_drains_in_order(self):
        keys = [str(i) for i in range(10, 60)]
        self.put_keys(keys)
        drained = []
        while not self.tree.is_empty():
            key, value = self.tree.remove_min()
            drained.append(key.value)
            self.assertEqual(int(key.value), value)
            if len(drained) % 5 == 0:
                self.validate_tree(self.tree)
        self.assertEqual(drained, sorted(keys))

    def test_remove_min_matches_first(self):
        self.put_keys(SCENARIO_KEYS)
        first = self.tree.first()
        self.assertEqual(self.tree.remove_min(), first)
        self.assert_absent("1")
        self.expected_keys = [k for k in SCENARIO_KEYS if k != "1"]


if __name__ == "__main__":
    unittest.main()
