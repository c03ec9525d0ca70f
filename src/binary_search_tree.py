import logging
from typing import TypeVar, Generic, List, Iterator, Optional

import numpy as np

from tree_iterators import InOrderIterator, PreOrderIterator, SnapshotIterator
from tree_node import NULL_NODE, Node

T = TypeVar('T')

logger = logging.getLogger(__name__)


class BinarySearchTree(Generic[T]):
    """An ordered set kept in an unbalanced binary search tree.

    Values must support ``<``, ``>`` and ``==``. ``None`` is never stored.
    Every structural change bumps ``generation``, which live iterators use
    to detect modification during traversal.
    """

    def __init__(self) -> None:
        self._root: Node[T] = NULL_NODE
        self._generation: int = 0

    @property
    def root(self) -> Node[T]:
        return self._root

    @property
    def generation(self) -> int:
        return self._generation

    def _bump_generation(self) -> None:
        self._generation += 1

    def insert(self, value: T) -> bool:
        if value is None:
            raise ValueError("cannot insert None")

        if self._root is NULL_NODE:
            self._root = Node(value)
            inserted = True
        else:
            inserted = self._root.insert(value)

        if inserted:
            self._bump_generation()
            logger.debug("inserted %r (generation %d)", value, self._generation)
        return inserted

    def contains(self, value: T) -> bool:
        if value is None:
            raise ValueError("cannot search for None")
        return self._root.contains(value)

    def contains_non_bst(self, value: T) -> bool:
        return self._root.contains_non_bst(value)

    def remove(self, value: T) -> bool:
        if value is None or self._root is NULL_NODE:
            return False
        return self.unlink(value) is not None

    def unlink(self, value: T) -> Optional[Node[T]]:
        """Remove ``value`` and return the subtree now in its slot.

        Returns ``None`` when the value is absent. Iterators use the returned
        subtree to carry on after removing the value they last produced.
        """
        parent, is_left_child, node = self._root.find_with_parent(value)
        if node is NULL_NODE:
            return None

        replacement = node.detach()
        if parent is None:
            self._root = replacement
        elif is_left_child:
            parent.left = replacement
        else:
            parent.right = replacement

        self._bump_generation()
        logger.debug("removed %r (generation %d)", value, self._generation)
        return replacement

    def min(self) -> T:
        if self._root is NULL_NODE:
            raise ValueError("min from empty tree")
        return self._root.min_node().value

    def max(self) -> T:
        if self._root is NULL_NODE:
            raise ValueError("max from empty tree")
        return self._root.max_node().value

    def size(self) -> int:
        return self._root.size()

    def height(self) -> int:
        return self._root.height()

    def is_empty(self) -> bool:
        return self._root is NULL_NODE

    def clear(self) -> None:
        if self._root is NULL_NODE:
            return
        self._root = NULL_NODE
        self._bump_generation()
        logger.debug("cleared (generation %d)", self._generation)

    def to_list(self) -> List[T]:
        return list(self._root.in_order_values())

    def to_array(self) -> np.ndarray:
        """In-order values as a 1-D object array.

        ``dtype=object`` keeps each element as-is, so tuples or strings are
        never broadcast into extra dimensions or coerced to a common type.
        """
        values = self.to_list()
        array = np.empty(len(values), dtype=object)
        for index, value in enumerate(values):
            array[index] = value
        return array

    def copy(self) -> 'BinarySearchTree[T]':
        clone: BinarySearchTree[T] = BinarySearchTree()
        for value in self._root.pre_order_values():
            clone.insert(value)
        return clone

    def snapshot_iterator(self) -> SnapshotIterator[T]:
        return SnapshotIterator(self)

    def pre_order_iterator(self) -> PreOrderIterator[T]:
        return PreOrderIterator(self)

    def in_order_iterator(self) -> InOrderIterator[T]:
        return InOrderIterator(self)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return self.in_order_iterator()

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.to_list()})"

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self._root.in_order_values()) + "]"
