from abc import ABC, abstractmethod

from typing import Any, Callable, NamedTuple, Optional


class InvariantError(AssertionError):
    """Raised when the balancing logic finds a red-black invariant violated."""
    pass


class _Infinity:
    """
    Marker that orders after (sign > 0) or before (sign < 0) every real item.

    Only the two module-level singletons PINF and NINF exist. They are never
    stored in a tree; range-scanning callers use them as open bounds.
    """
    __slots__ = ("sign",)

    def __init__(self, sign: int):
        self.sign = sign

    def __repr__(self) -> str:
        return "+Inf" if self.sign > 0 else "-Inf"


PINF = _Infinity(1)
NINF = _Infinity(-1)


def inf(sign: int) -> _Infinity:
    """
    Return the shared "+infinity" marker for a positive sign and the
    "-infinity" marker for a negative one.

    Raises:
        ValueError: If sign is zero.
    """
    if sign == 0:
        raise ValueError("inf(): sign must be nonzero")
    if sign > 0:
        return PINF
    return NINF


def default_less(a, b) -> bool:
    return a < b


def ordered_less(a, b, less: Callable[[Any, Any], bool] = default_less) -> bool:
    """
    Sentinel-aware strict ordering: True if a orders before b.

    The sentinels are checked before the caller-supplied predicate is reached,
    so item types never need to know about them.
    """
    if a is PINF:
        return False
    if a is NINF:
        return True
    if b is PINF:
        return True
    if b is NINF:
        return False
    return less(a, b)


class Item:
    """
    Represents an item (a key-value pair) for insertion in LLRB trees.
    Items order by key only, so two items with equal keys are the same
    position in the tree regardless of their values.
    """
    __slots__ = ("key", "value")  # Define slots for memory efficiency

    def __init__(
            self,
            key,
            value=None
    ):
        """
        Initialize an Item.

        Parameters:
            key: The item's key. Must be orderable with other keys in the tree.
            value: The item's value.
        """
        self.key = key
        self.value = value

    def __lt__(self, other: "Item") -> bool:
        return self.key < other.key

    def __eq__(self, other) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.key == other.key and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.key, self.value))

    def short_key(self) -> str:
        """Create a short representation of the key for display purposes."""
        if isinstance(self.key, (bytes, bytearray)):
            s = self.key.hex()
        else:
            s = str(self.key)
        return s if len(s) <= 10 else f"{s[:3]}...{s[-3:]}"

    def __repr__(self) -> str:
        cls = self.__class__.__name__
        return f"{cls}(key={self.key!r}, value={self.value!r})"

    def __str__(self):
        cls = self.__class__.__name__
        return f"{cls}(key={self.short_key()}, value={self.value})"


class InsertResult(NamedTuple):
    """
    Outcome of a replace-or-insert.

    Attributes:
        replaced (Optional[Any]): The item that previously occupied the same
            position and was overwritten, or None if a new node was added.
        rank (int): 0-based position of the inserted item among all items.
    """
    replaced: Optional[Any]
    rank: int


class DeleteResult(NamedTuple):
    """
    Outcome of a keyed deletion.

    Attributes:
        item (Optional[Any]): The removed item, or None if the key was absent.
        rank (Optional[int]): 0-based position the removed item held before
            removal; None whenever item is None.
    """
    item: Optional[Any]
    rank: Optional[int]


class AbstractOrderedSet(ABC):
    """
    Abstract base class for an ordered set of items with rank reporting.
    """
    __slots__ = ()

    @abstractmethod
    def replace_or_insert(self, item: Any) -> InsertResult:
        """
        Insert an item, overwriting any item of the same order.

        Parameters:
            item: The item to be inserted.

        Returns:
            InsertResult: The replaced item (or None) and the item's rank.
        """
        pass

    @abstractmethod
    def delete(self, key: Any) -> DeleteResult:
        """
        Delete the item ordering the same as key.

        Parameters:
            key: An item ordering the same as the one to delete.

        Returns:
            DeleteResult: The removed item and its former rank, or (None, None).
        """
        pass

    @abstractmethod
    def get(self, key: Any) -> Optional[Any]:
        """
        Retrieve the item ordering the same as key.

        Parameters:
            key: An item ordering the same as the one to look up.

        Returns:
            The stored item, or None if absent.
        """
        pass
