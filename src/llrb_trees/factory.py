"""Factory for LLRB tree classes specialised to an ordering"""

from typing import Any, Callable, Dict, Optional, Type
import logging

from llrb_trees.base import default_less
from llrb_trees.llrb_tree_base import LLRBTreeBase

# Configure logging
logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

# Cache for previously created classes to avoid recreating them
_class_cache: Dict[Callable[[Any, Any], bool], Type[LLRBTreeBase]] = {}


def make_llrb_tree_class(
    less: Optional[Callable[[Any, Any], bool]] = None
) -> Type[LLRBTreeBase]:
    """
    Factory function to generate an LLRB tree class whose ordering is fixed
    to the predicate `less(a, b)` ("a orders before b").

    Returns:
        LLRBTreeBase subclass with LESS=less. Calling it twice with the same
        predicate returns the same class.

    Raises:
        TypeError: If less is neither None nor callable.
    """
    if less is None:
        less = default_less
    if not callable(less):
        raise TypeError(f"make_llrb_tree_class(): expected callable, got {type(less).__name__}")

    # Check if we've already created a class for this ordering
    if less in _class_cache:
        logger.debug(f"Using cached class for less={less!r}")
        return _class_cache[less]

    name = getattr(less, "__name__", type(less).__name__)
    TreeClass = type(
        f"LLRBTree_{name}",
        (LLRBTreeBase,),
        {
            "LESS": staticmethod(less),
            "__slots__": (),
        }
    )
    logger.debug(f"Created {TreeClass.__name__} with LESS={less!r}")

    _class_cache[less] = TreeClass
    return TreeClass


def create_llrb_tree(
    less: Optional[Callable[[Any, Any], bool]] = None
) -> LLRBTreeBase:
    """
    Create a new empty LLRB tree ordered by less.

    Args:
        less: Strict weak ordering predicate; defaults to `a < b`.

    Returns:
        A new empty tree.
    """
    TreeClass = make_llrb_tree_class(less)
    tree = TreeClass()
    logger.debug(f"Created tree instance of type {type(tree).__name__}")
    return tree
