"""Tests for the LLRB rotation primitives."""
# pylint: skip-file

import unittest

from llrb_trees.base import InvariantError
from llrb_trees.node import Node, node_size
from llrb_trees.rotations import (
    is_red,
    rotate_left,
    rotate_right,
    flip,
    move_red_left,
    move_red_right,
    fix_up,
)


def black(item, left=None, right=None):
    return Node(item, left, right, black=True)


def red(item, left=None, right=None):
    return Node(item, left, right, black=False)


class TestNode(unittest.TestCase):
    def test_new_node_is_red(self):
        self.assertTrue(is_red(Node(1)))

    def test_missing_node_is_black(self):
        self.assertFalse(is_red(None))

    def test_sizes_from_children(self):
        h = black(2, black(1), red(4, black(3)))
        self.assertEqual(h.n_left, 1)
        self.assertEqual(h.n_right, 2)
        self.assertEqual(h.size(), 4)
        self.assertEqual(node_size(h), 4)
        self.assertEqual(node_size(None), 0)


class TestRotate(unittest.TestCase):
    def test_rotate_left(self):
        h = black(10, black(5), red(20, black(15), black(25)))
        x = rotate_left(h)

        self.assertEqual(x.item, 20)
        self.assertTrue(x.black, "New local root keeps the incoming color")
        self.assertIs(x.left, h)
        self.assertFalse(h.black, "Demoted node hangs off a red link")
        self.assertEqual(h.right.item, 15)
        self.assertEqual((h.n_left, h.n_right), (1, 1))
        self.assertEqual((x.n_left, x.n_right), (3, 1))

    def test_rotate_right(self):
        h = black(20, red(10, black(5), black(15)), black(25))
        x = rotate_right(h)

        self.assertEqual(x.item, 10)
        self.assertTrue(x.black)
        self.assertIs(x.right, h)
        self.assertFalse(h.black)
        self.assertEqual(h.left.item, 15)
        self.assertEqual((h.n_left, h.n_right), (1, 1))
        self.assertEqual((x.n_left, x.n_right), (1, 3))

    def test_rotate_left_black_link_raises(self):
        h = black(1, None, black(2))
        with self.assertRaises(InvariantError):
            rotate_left(h)

    def test_rotate_right_missing_link_raises(self):
        with self.assertRaises(InvariantError):
            rotate_right(black(1))

    def test_invariant_error_is_assertion_error(self):
        self.assertTrue(issubclass(InvariantError, AssertionError))


class TestFlip(unittest.TestCase):
    def test_flip_inverts_three_colors(self):
        h = black(2, red(1), red(3))
        flip(h)
        self.assertFalse(h.black)
        self.assertTrue(h.left.black)
        self.assertTrue(h.right.black)

    def test_flip_missing_child_raises(self):
        with self.assertRaises(InvariantError):
            flip(black(2, red(1)))


class TestMoveRed(unittest.TestCase):
    def test_move_red_left_flip_only(self):
        h = red(10, black(5), black(20))
        h = move_red_left(h)
        self.assertEqual(h.item, 10)
        self.assertTrue(h.black)
        self.assertTrue(is_red(h.left))
        self.assertTrue(is_red(h.right))

    def test_move_red_left_borrows_from_right(self):
        h = red(10, black(5), black(20, red(15)))
        h = move_red_left(h)

        self.assertEqual(h.item, 15)
        self.assertFalse(h.black)
        self.assertEqual(h.left.item, 10)
        self.assertTrue(h.left.black)
        self.assertEqual(h.left.left.item, 5)
        self.assertTrue(is_red(h.left.left))
        self.assertEqual(h.right.item, 20)
        self.assertTrue(h.right.black)
        self.assertEqual((h.n_left, h.n_right), (2, 1))
        self.assertEqual((h.left.n_left, h.left.n_right), (1, 0))
        self.assertEqual((h.right.n_left, h.right.n_right), (0, 0))

    def test_move_red_right_borrows_from_left(self):
        h = red(10, black(5, red(2)), black(20))
        h = move_red_right(h)

        self.assertEqual(h.item, 5)
        self.assertFalse(h.black)
        self.assertEqual(h.left.item, 2)
        self.assertTrue(h.left.black)
        self.assertEqual(h.right.item, 10)
        self.assertTrue(h.right.black)
        self.assertTrue(is_red(h.right.right))
        self.assertEqual((h.n_left, h.n_right), (1, 2))

    def test_move_red_requires_both_children(self):
        with self.assertRaises(InvariantError):
            move_red_left(black(10, None, black(20)))
        with self.assertRaises(InvariantError):
            move_red_right(black(10, black(5)))


class TestFixUp(unittest.TestCase):
    def test_right_leaning_red_is_rotated(self):
        h = fix_up(black(10, None, red(20)))
        self.assertEqual(h.item, 20)
        self.assertTrue(h.black)
        self.assertTrue(is_red(h.left))
        self.assertIsNone(h.right)
        self.assertEqual(h.size(), 2)

    def test_two_left_reds_are_balanced(self):
        h = fix_up(black(30, red(20, red(10))))
        self.assertEqual(h.item, 20)
        self.assertFalse(h.black, "Temporary 4-node is split upwards")
        self.assertTrue(h.left.black)
        self.assertTrue(h.right.black)
        self.assertEqual((h.n_left, h.n_right), (1, 1))

    def test_both_children_red_are_flipped(self):
        h = fix_up(black(10, red(5), red(20)))
        self.assertEqual(h.item, 10)
        self.assertFalse(h.black)
        self.assertTrue(h.left.black)
        self.assertTrue(h.right.black)
        self.assertEqual((h.n_left, h.n_right), (1, 1))

    def test_valid_node_is_untouched(self):
        left = red(5)
        h = black(10, left)
        self.assertIs(fix_up(h), h)
        self.assertIs(h.left, left)
        self.assertTrue(h.black)


if __name__ == "__main__":
    unittest.main()
