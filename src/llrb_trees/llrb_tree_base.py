"""LLRB tree base implementation"""

from __future__ import annotations
import logging
from typing import Any, Callable, Optional, Tuple, Type
from dataclasses import dataclass

from llrb_trees.base import (
    AbstractOrderedSet,
    DeleteResult,
    InsertResult,
    InvariantError,
    default_less,
    ordered_less,
)
from llrb_trees.node import Node, node_size
from llrb_trees.rotations import (
    is_red,
    rotate_right,
    move_red_left,
    move_red_right,
    fix_up,
)

# Configure logging
logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

# When set, every mutating public operation re-validates the whole tree.
DEBUG = False

TREE_FLAGS = (
    "is_search_tree",
    "is_black_balanced",
    "is_left_leaning",
    "no_double_red",
    "sizes_consistent",
    "root_is_black",
    "count_matches",
)


class LLRBTreeBase(AbstractOrderedSet):
    """
    A left-leaning red-black tree (a binary encoding of a 2-3 tree) that
    reports the rank of every item it inserts or removes.

    Attributes:
        _root (Optional[Node]): The root node, or None if the tree is empty.
        _count (int): Number of items currently stored.
    """
    __slots__ = ("_root", "_count")

    # Overridden by the factory for custom orderings
    NodeClass: Type[Node] = Node
    LESS: Callable[[Any, Any], bool] = staticmethod(default_less)

    def __init__(self, root: Optional[Node] = None):
        self._root: Optional[Node] = None
        self._count = 0
        if root is not None:
            self.set_root(root)

    def _less(self, a, b) -> bool:
        return ordered_less(a, b, self.LESS)

    def is_empty(self) -> bool:
        return self._root is None

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key) -> bool:
        return self.has(key)

    def __str__(self):
        return "Empty LLRBTree" if self.is_empty() else f"LLRBTree(count={self._count}, root={self._root})"

    __repr__ = __str__

    # Root access for (de)serializers
    def root(self) -> Optional[Node]:
        """Return the root node so a serializer can walk the tree."""
        return self._root

    def set_root(self, root: Optional[Node]) -> None:
        """
        Replace the whole tree with a previously built or deserialized one.

        The node is trusted to satisfy every tree invariant; nothing is
        validated. The item count is taken from the root's cached size.
        """
        self._root = root
        self._count = node_size(root)
        logger.debug(f"set_root(): attached root with {self._count} items")

    # Lookups
    def has(self, key) -> bool:
        """True if the tree holds an item ordering the same as key."""
        return self.get(key) is not None

    def get(self, key) -> Optional[Any]:
        """
        Return the item ordering the same as key, or None if there is none.
        Iterative, O(log n).
        """
        less = self._less
        h = self._root
        while h is not None:
            if less(key, h.item):
                h = h.left
            elif less(h.item, key):
                h = h.right
            else:
                return h.item
        return None

    def min(self) -> Optional[Any]:
        """Return the smallest item, or None if the tree is empty."""
        h = self._root
        if h is None:
            return None
        while h.left is not None:
            h = h.left
        return h.item

    def max(self) -> Optional[Any]:
        """Return the greatest item, or None if the tree is empty."""
        h = self._root
        if h is None:
            return None
        while h.right is not None:
            h = h.right
        return h.item

    # Insertion
    def replace_or_insert(self, item) -> InsertResult:
        """
        Public method (O(log n)): Insert item into the tree. If an item of the
        same order is already stored, it is overwritten and returned.

        Args:
            item: The item to insert.

        Returns:
            InsertResult: (replaced, rank) where replaced is the overwritten
                item or None, and rank is the 0-based position of item.

        Raises:
            ValueError: If item is None.
        """
        if item is None:
            raise ValueError("replace_or_insert(): cannot insert None")
        self._root, replaced, rank = self._replace_or_insert(self._root, item, 0)
        self._root.black = True
        if replaced is None:
            self._count += 1
        self._check_invariants("replace_or_insert")
        return InsertResult(replaced, rank)

    def _replace_or_insert(self, h: Optional[Node], item, n: int) -> Tuple[Node, Any, int]:
        if h is None:
            return self.NodeClass(item), None, n

        if self._less(item, h.item):
            h.left, replaced, rank = self._replace_or_insert(h.left, item, n)
            if replaced is None:
                h.n_left += 1
        elif self._less(h.item, item):
            h.right, replaced, rank = self._replace_or_insert(h.right, item, n + 1 + h.n_left)
            if replaced is None:
                h.n_right += 1
        else:
            replaced, h.item, rank = h.item, item, n + h.n_left

        return fix_up(h), replaced, rank

    def insert_no_replace(self, item) -> int:
        """
        Public method (O(log n)): Insert item into the tree even if items of
        the same order exist. The new item is placed after all of them.

        Args:
            item: The item to insert.

        Returns:
            int: The 0-based position of the inserted item.

        Raises:
            ValueError: If item is None.
        """
        if item is None:
            raise ValueError("insert_no_replace(): cannot insert None")
        self._root, rank = self._insert_no_replace(self._root, item, 0)
        self._root.black = True
        self._count += 1
        self._check_invariants("insert_no_replace")
        return rank

    def _insert_no_replace(self, h: Optional[Node], item, n: int) -> Tuple[Node, int]:
        if h is None:
            return self.NodeClass(item), n

        if self._less(item, h.item):
            h.left, rank = self._insert_no_replace(h.left, item, n)
            h.n_left += 1
        else:
            h.right, rank = self._insert_no_replace(h.right, item, n + 1 + h.n_left)
            h.n_right += 1

        return fix_up(h), rank

    def replace_or_insert_bulk(self, *items) -> None:
        """Insert items one after another. Not atomic: a failure keeps earlier items."""
        for item in items:
            self.replace_or_insert(item)

    def insert_no_replace_bulk(self, *items) -> None:
        """Insert items one after another, keeping duplicates. Not atomic."""
        for item in items:
            self.insert_no_replace(item)

    # Deletion
    def delete_min(self) -> Optional[Any]:
        """Remove and return the smallest item, or None if the tree is empty."""
        self._root, deleted = _delete_min(self._root)
        if self._root is not None:
            self._root.black = True
        if deleted is not None:
            self._count -= 1
        self._check_invariants("delete_min")
        return deleted

    def delete_max(self) -> Optional[Any]:
        """Remove and return the greatest item, or None if the tree is empty."""
        self._root, deleted = _delete_max(self._root)
        if self._root is not None:
            self._root.black = True
        if deleted is not None:
            self._count -= 1
        self._check_invariants("delete_max")
        return deleted

    def delete(self, key) -> DeleteResult:
        """
        Public method (O(log n)): Remove the item ordering the same as key.

        Args:
            key: An item ordering the same as the one to remove.

        Returns:
            DeleteResult: (item, rank) of the removed item, where rank is its
                position before removal; (None, None) if key is absent.
        """
        self._root, deleted, rank = self._delete(self._root, key, 0)
        if self._root is not None:
            self._root.black = True
        if deleted is not None:
            self._count -= 1
        self._check_invariants("delete")
        return DeleteResult(deleted, rank)

    def _delete(self, h: Optional[Node], key, n: int) -> Tuple[Optional[Node], Any, Optional[int]]:
        if h is None:
            return None, None, None

        less = self._less
        if less(key, h.item):
            if h.left is None:
                # key not present
                return h, None, None
            if not is_red(h.left) and not is_red(h.left.left):
                h = move_red_left(h)
            h.left, deleted, rank = self._delete(h.left, key, n)
            if deleted is not None:
                h.n_left -= 1
        else:
            if is_red(h.left):
                h = rotate_right(h)
            # h holds key and has no right child: remove h itself
            if not less(h.item, key) and h.right is None:
                return None, h.item, n + h.n_left
            # move_red_right may rotate an equal item into h; only the matched node is replaced
            target = h
            if h.right is not None and not is_red(h.right) and not is_red(h.right.left):
                h = move_red_right(h)
            if h is target and not less(h.item, key):
                # Swap in the in-order successor (h.right is not None here)
                h.right, successor = _delete_min(h.right)
                if successor is None:
                    raise InvariantError("delete(): no minimum in a non-empty right subtree")
                deleted, h.item, rank = h.item, successor, n + h.n_left
            else:
                h.right, deleted, rank = self._delete(h.right, key, n + 1 + h.n_left)
            if deleted is not None:
                h.n_right -= 1

        return fix_up(h), deleted, rank

    def _check_invariants(self, op: str) -> None:
        if not DEBUG:
            return
        stats = tree_stats_(self)
        for flag in TREE_FLAGS:
            if not getattr(stats, flag):
                logger.error(f"{op}(): invariant {flag} violated\n{self.print_structure()}")
                raise InvariantError(f"{op}(): invariant {flag} violated")

    def print_structure(self, indent: int = 0, max_depth: Optional[int] = None) -> str:
        """Render the tree sideways-indented, one node per line, right subtree first."""
        if self.is_empty():
            return f"{' ' * indent}Empty {self.__class__.__name__}"

        lines = []

        def _render(h: Optional[Node], depth: int) -> None:
            if h is None:
                return
            prefix = ' ' * (indent + 4 * depth)
            if max_depth is not None and depth > max_depth:
                lines.append(f"{prefix}... (max depth reached)")
                return
            _render(h.right, depth + 1)
            color = "B" if h.black else "R"
            lines.append(f"{prefix}{h.item} [{color}] ({h.n_left}|{h.n_right})")
            _render(h.left, depth + 1)

        _render(self._root, 0)
        return "\n".join(lines)


def _delete_min(h: Optional[Node]) -> Tuple[Optional[Node], Any]:
    if h is None:
        return None, None
    if h.left is None:
        if h.right is not None:
            raise InvariantError(f"delete_min(): node {h.item!r} has a right child but no left child")
        return None, h.item

    if not is_red(h.left) and not is_red(h.left.left):
        h = move_red_left(h)

    h.left, deleted = _delete_min(h.left)
    if deleted is not None:
        h.n_left -= 1

    return fix_up(h), deleted


def _delete_max(h: Optional[Node]) -> Tuple[Optional[Node], Any]:
    if h is None:
        return None, None
    if is_red(h.left):
        h = rotate_right(h)
    if h.right is None:
        if h.left is not None:
            raise InvariantError(f"delete_max(): node {h.item!r} has a left child but no right child")
        return None, h.item

    if not is_red(h.right) and not is_red(h.right.left):
        h = move_red_right(h)

    h.right, deleted = _delete_max(h.right)
    if deleted is not None:
        h.n_right -= 1

    return fix_up(h), deleted


@dataclass
class Stats:
    node_count: int
    height: int
    black_height: int
    least_item: Optional[Any]
    greatest_item: Optional[Any]
    is_search_tree: bool
    is_black_balanced: bool
    is_left_leaning: bool
    no_double_red: bool
    sizes_consistent: bool
    root_is_black: bool
    count_matches: bool


def _node_stats(h: Optional[Node], less: Callable[[Any, Any], bool]) -> Stats:
    # ---------- empty subtree ---------------------------------
    if h is None:
        return Stats(node_count        = 0,
                     height            = 0,
                     black_height      = 0,
                     least_item        = None,
                     greatest_item     = None,
                     is_search_tree    = True,
                     is_black_balanced = True,
                     is_left_leaning   = True,
                     no_double_red     = True,
                     sizes_consistent  = True,
                     root_is_black     = True,
                     count_matches     = True)

    ls = _node_stats(h.left, less)
    rs = _node_stats(h.right, less)

    # In-order sequence must be non-decreasing; equal items only come from
    # insert_no_replace and may end up on either side after rotations.
    is_search_tree = ls.is_search_tree and rs.is_search_tree
    if ls.greatest_item is not None and less(h.item, ls.greatest_item):
        is_search_tree = False
    if rs.least_item is not None and less(rs.least_item, h.item):
        is_search_tree = False

    return Stats(
        node_count        = ls.node_count + 1 + rs.node_count,
        height            = 1 + max(ls.height, rs.height),
        black_height      = ls.black_height + (1 if h.black else 0),
        least_item        = ls.least_item if h.left is not None else h.item,
        greatest_item     = rs.greatest_item if h.right is not None else h.item,
        is_search_tree    = is_search_tree,
        is_black_balanced = (ls.is_black_balanced and rs.is_black_balanced
                             and ls.black_height == rs.black_height),
        is_left_leaning   = ls.is_left_leaning and rs.is_left_leaning and not is_red(h.right),
        no_double_red     = (ls.no_double_red and rs.no_double_red
                             and not (is_red(h) and is_red(h.left))),
        sizes_consistent  = (ls.sizes_consistent and rs.sizes_consistent
                             and h.n_left == ls.node_count
                             and h.n_right == rs.node_count),
        root_is_black     = True,
        count_matches     = True,
    )


def tree_stats_(t: LLRBTreeBase) -> Stats:
    """
    Returns aggregated statistics and invariant flags for an LLRB tree
    in **O(n)** time.
    """
    root = t.root()
    stats = _node_stats(root, t._less)
    stats.root_is_black = root is None or root.black
    stats.count_matches = len(t) == stats.node_count
    return stats


def collect_items(tree: LLRBTreeBase) -> list:
    """Return all items of the tree in order."""
    out = []
    stack = []
    h = tree.root()
    while stack or h is not None:
        while h is not None:
            stack.append(h)
            h = h.left
        h = stack.pop()
        out.append(h.item)
        h = h.right
    return out
