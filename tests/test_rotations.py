"""Tests for the LLRB structural primitives."""

import unittest

from llrb_tree.base import BLACK, RED
from llrb_tree.rotations import (
    color_flip,
    fix_up,
    is_red,
    move_red_left,
    move_red_right,
    rotate_left,
    rotate_right,
)
from tests.utils import black, red


def key_of(n):
    return n.key.value


class TestIsRed(unittest.TestCase):

    def test_none_is_black(self):
        self.assertFalse(is_red(None))

    def test_colors(self):
        self.assertTrue(is_red(red("1")))
        self.assertFalse(is_red(black("1")))


class TestRotations(unittest.TestCase):

    def test_rotate_left(self):
        # 2(B) with red right child 4, which has children 3 and 5
        a, c, e = black("1"), black("3"), black("5")
        n = black("2", left=a, right=red("4", left=c, right=e))

        top = rotate_left(n)

        self.assertEqual(key_of(top), "4")
        self.assertEqual(top.color, BLACK, "New top inherits the old top's color")
        self.assertIs(top.left, n)
        self.assertEqual(n.color, RED, "Old top becomes the red left child")
        self.assertIs(n.left, a)
        self.assertIs(n.right, c, "Inner grandchild moves across")
        self.assertIs(top.right, e)

    def test_rotate_right(self):
        a, c, e = black("1"), black("3"), black("5")
        n = red("4", left=red("2", left=a, right=c), right=e)

        top = rotate_right(n)

        self.assertEqual(key_of(top), "2")
        self.assertEqual(top.color, RED, "New top inherits the old top's color")
        self.assertIs(top.right, n)
        self.assertEqual(n.color, RED)
        self.assertIs(top.left, a)
        self.assertIs(n.left, c)
        self.assertIs(n.right, e)

    def test_rotations_are_inverse(self):
        n = black("2", left=black("1"), right=red("4", left=black("3"), right=black("5")))
        back = rotate_right(rotate_left(n))
        self.assertIs(back, n)
        self.assertEqual(key_of(back.right), "4")
        self.assertEqual(key_of(back.right.left), "3")
        self.assertEqual(key_of(back.left), "1")


class TestColorFlip(unittest.TestCase):

    def test_split(self):
        n = black("2", left=red("1"), right=red("3"))
        self.assertIs(color_flip(n), n)
        self.assertEqual(n.color, RED)
        self.assertEqual(n.left.color, BLACK)
        self.assertEqual(n.right.color, BLACK)

    def test_merge(self):
        n = red("2", left=black("1"), right=black("3"))
        color_flip(n)
        self.assertEqual(n.color, BLACK)
        self.assertTrue(is_red(n.left))
        self.assertTrue(is_red(n.right))


class TestFixUp(unittest.TestCase):

    def test_valid_node_unchanged(self):
        n = black("2", left=red("1"))
        self.assertIs(fix_up(n), n)
        self.assertEqual(n.color, BLACK)
        self.assertTrue(is_red(n.left))

    def test_right_leaning_red_is_rotated(self):
        n = black("1", right=red("2"))
        top = fix_up(n)
        self.assertEqual(key_of(top), "2")
        self.assertEqual(top.color, BLACK)
        self.assertTrue(is_red(top.left))
        self.assertIsNone(top.right)

    def test_double_red_left_is_split(self):
        n = black("3", left=red("2", left=red("1")))
        top = fix_up(n)
        # rotate right, then color flip pushes red up
        self.assertEqual(key_of(top), "2")
        self.assertEqual(top.color, RED)
        self.assertEqual(top.left.color, BLACK)
        self.assertEqual(top.right.color, BLACK)
        self.assertEqual(key_of(top.left), "1")
        self.assertEqual(key_of(top.right), "3")

    def test_red_in_the_middle(self):
        # 1 < 2 < 3 inserted as the right child of a red left child
        n = black("3", left=red("1", right=red("2")))
        n.left = fix_up(n.left)
        top = fix_up(n)
        self.assertEqual(key_of(top), "2")
        self.assertEqual(top.color, RED)
        self.assertEqual(key_of(top.left), "1")
        self.assertEqual(key_of(top.right), "3")

    def test_two_red_children_flip(self):
        n = black("2", left=red("1"), right=red("3"))
        top = fix_up(n)
        self.assertIs(top, n)
        self.assertEqual(n.color, RED)
        self.assertFalse(is_red(n.left))
        self.assertFalse(is_red(n.right))


class TestMoveRed(unittest.TestCase):

    def test_move_red_left_without_borrow(self):
        n = red("2", left=black("1"), right=black("3"))
        top = move_red_left(n)
        self.assertIs(top, n)
        self.assertEqual(n.color, BLACK)
        self.assertTrue(is_red(n.left))
        self.assertTrue(is_red(n.right))

    def test_move_red_left_borrows_from_right(self):
        # right sibling is a 3-node (4 with red left child 3)
        n = red("2", left=black("1"), right=black("4", left=red("3")))
        top = move_red_left(n)
        self.assertEqual(key_of(top), "3")
        self.assertEqual(top.color, RED)
        self.assertEqual(key_of(top.left), "2")
        self.assertEqual(top.left.color, BLACK)
        self.assertTrue(is_red(top.left.left), "Left child now has a red left child")
        self.assertEqual(key_of(top.right), "4")
        self.assertEqual(top.right.color, BLACK)

    def test_move_red_right_without_borrow(self):
        n = red("2", left=black("1"), right=black("3"))
        top = move_red_right(n)
        self.assertIs(top, n)
        self.assertEqual(n.color, BLACK)
        self.assertTrue(is_red(n.right))

    def test_move_red_right_borrows_from_left(self):
        # left sibling is a 3-node (2 with red left child 1)
        n = red("3", left=black("2", left=red("1")), right=black("4"))
        top = move_red_right(n)
        self.assertEqual(key_of(top), "2")
        self.assertEqual(top.color, RED)
        self.assertEqual(key_of(top.left), "1")
        self.assertEqual(top.left.color, BLACK)
        self.assertEqual(key_of(top.right), "3")
        self.assertEqual(top.right.color, BLACK)
        self.assertTrue(is_red(top.right.right), "Right child now has a red right child")


if __name__ == "__main__":
    unittest.main()
