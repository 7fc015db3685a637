"""LLRB tree node"""

from typing import Any, Optional


class Node:
    """
    A vertex of an LLRB tree.

    Attributes:
        item: The stored item.
        left (Optional[Node]): Left child, owned exclusively by this node.
        right (Optional[Node]): Right child, owned exclusively by this node.
        black (bool): Color of the link from the parent to this node.
            New nodes are red.
        n_left (int): Number of nodes in the left subtree.
        n_right (int): Number of nodes in the right subtree.
    """
    __slots__ = ("item", "left", "right", "black", "n_left", "n_right")

    def __init__(
        self,
        item: Any,
        left: Optional["Node"] = None,
        right: Optional["Node"] = None,
        black: bool = False,
    ) -> None:
        self.item = item
        self.left = left
        self.right = right
        self.black = black
        self.n_left = node_size(left)
        self.n_right = node_size(right)

    def size(self) -> int:
        """Number of nodes in the subtree rooted here."""
        return self.n_left + 1 + self.n_right

    def __repr__(self) -> str:
        color = "black" if self.black else "red"
        return (f"Node(item={self.item!r}, {color}, "
                f"n_left={self.n_left}, n_right={self.n_right})")


def node_size(h: Optional[Node]) -> int:
    if h is None:
        return 0
    return h.n_left + 1 + h.n_right
