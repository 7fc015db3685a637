"""
Left-leaning red-black trees with order statistics.

Every insertion and deletion reports the 0-based rank of the affected item.
"""

from llrb_trees.base import (
    Item,
    InsertResult,
    DeleteResult,
    InvariantError,
    AbstractOrderedSet,
    PINF,
    NINF,
    inf,
    ordered_less,
)
from llrb_trees.node import Node
from llrb_trees.llrb_tree_base import (
    LLRBTreeBase,
    Stats,
    tree_stats_,
    collect_items,
)
from llrb_trees.factory import (
    make_llrb_tree_class,
    create_llrb_tree,
)

__all__ = [
    'Item',
    'InsertResult',
    'DeleteResult',
    'InvariantError',
    'AbstractOrderedSet',
    'PINF',
    'NINF',
    'inf',
    'ordered_less',
    'Node',
    'LLRBTreeBase',
    'Stats',
    'tree_stats_',
    'collect_items',
    'make_llrb_tree_class',
    'create_llrb_tree',
]
