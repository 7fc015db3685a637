"""
Rotation primitives for LLRB trees.

These are the only routines that change colors or tree shape. Each takes the
root of a subtree and returns the (possibly different) new root; the caller
must store the result in place of the argument.
"""

from typing import Optional

from llrb_trees.base import InvariantError
from llrb_trees.node import Node, node_size


def is_red(h: Optional[Node]) -> bool:
    """A missing node is black."""
    if h is None:
        return False
    return not h.black


def _require_children(h: Node, op: str) -> None:
    if h.left is None or h.right is None:
        raise InvariantError(f"{op}(): node {h.item!r} is missing a child")


def rotate_left(h: Node) -> Node:
    """Turn the red right link of h into a red left link of its right child."""
    x = h.right
    if not is_red(x):
        raise InvariantError("rotate_left(): rotating a black link")
    h.right = x.left
    x.left = h
    x.black = h.black
    h.black = False

    h.n_right = node_size(h.right)
    x.n_left = node_size(x.left)
    return x


def rotate_right(h: Node) -> Node:
    """Mirror of rotate_left over the left link."""
    x = h.left
    if not is_red(x):
        raise InvariantError("rotate_right(): rotating a black link")
    h.left = x.right
    x.right = h
    x.black = h.black
    h.black = False

    h.n_left = node_size(h.left)
    x.n_right = node_size(x.right)
    return x


def flip(h: Node) -> None:
    """Invert the colors of h and both its children (split/merge a 4-node)."""
    _require_children(h, "flip")
    h.black = not h.black
    h.left.black = not h.left.black
    h.right.black = not h.right.black


def move_red_left(h: Node) -> Node:
    """
    Make h.left or one of its children red, so a removal below h.left
    never has to shrink a 2-node.
    """
    _require_children(h, "move_red_left")
    flip(h)
    if is_red(h.right.left):
        h.right = rotate_right(h.right)
        h = rotate_left(h)
        flip(h)
    return h


def move_red_right(h: Node) -> Node:
    """Mirror of move_red_left for descending right."""
    _require_children(h, "move_red_right")
    flip(h)
    if is_red(h.left.left):
        h = rotate_right(h)
        flip(h)
    return h


def fix_up(h: Node) -> Node:
    """
    Restore the left-leaning shape of h on the way back up, assuming the
    invariants already hold strictly below it.
    """
    if is_red(h.right):
        h = rotate_left(h)

    if is_red(h.left) and is_red(h.left.left):
        h = rotate_right(h)

    if is_red(h.left) and is_red(h.right):
        flip(h)

    return h
