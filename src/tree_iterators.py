"""
Iterators over a BinarySearchTree.

Each iterator captures the tree's generation stamp when it is built and fails
fast with ConcurrentModificationError once the stamp moves. Removals made
through the iterator's own ``remove()`` re-capture the stamp.

- SnapshotIterator copies the in-order values up front.
- PreOrderIterator walks root, left, right with an explicit stack.
- InOrderIterator walks the left spine with an explicit stack.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TypeVar, Generic, List, Optional

from tree_errors import ConcurrentModificationError, IllegalIteratorStateError
from tree_node import NULL_NODE, Node

if TYPE_CHECKING:
    from binary_search_tree import BinarySearchTree

T = TypeVar('T')

logger = logging.getLogger(__name__)


class _TreeIterator(ABC, Generic[T]):
    def __init__(self, tree: 'BinarySearchTree[T]') -> None:
        self._tree = tree
        self._generation: int = tree.generation
        logger.debug("%s started at generation %d", type(self).__name__, self._generation)

    def __iter__(self) -> '_TreeIterator[T]':
        return self

    def __next__(self) -> T:
        # A finished iterator stays finished whatever happens to the tree later.
        if not self.has_next():
            raise StopIteration
        self._check_for_comodification()
        return self._advance()

    @abstractmethod
    def has_next(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def _advance(self) -> T:
        raise NotImplementedError

    def _is_stale(self) -> bool:
        return self._tree.generation != self._generation

    def _check_for_comodification(self) -> None:
        if self._is_stale():
            logger.debug(
                "%s rejected: generation %d != %d",
                type(self).__name__, self._generation, self._tree.generation,
            )
            raise ConcurrentModificationError(self._generation, self._tree.generation)


class SnapshotIterator(_TreeIterator[T]):
    """Walks a list of the values taken when the iterator was created."""

    def __init__(self, tree: 'BinarySearchTree[T]') -> None:
        super().__init__(tree)
        self._values: List[T] = tree.to_list()
        self._position = 0

    def has_next(self) -> bool:
        return self._position < len(self._values)

    def _advance(self) -> T:
        value = self._values[self._position]
        self._position += 1
        return value


class _RemovingIterator(_TreeIterator[T]):
    def __init__(self, tree: 'BinarySearchTree[T]') -> None:
        super().__init__(tree)
        self._last_returned: Optional[T] = None
        self._can_remove = False

    def __next__(self) -> T:
        value = super().__next__()
        self._last_returned = value
        self._can_remove = True
        return value

    def remove(self) -> None:
        """Remove the value most recently returned by ``next()``."""
        if self._is_stale():
            raise IllegalIteratorStateError(
                "tree was modified outside this iterator",
                cause=ConcurrentModificationError(self._generation, self._tree.generation),
            )
        if not self._can_remove:
            if self._last_returned is None:
                raise IllegalIteratorStateError("next() has not been called")
            raise IllegalIteratorStateError(
                f"{self._last_returned!r} was already removed"
            )

        value = self._last_returned
        replacement = self._tree.unlink(value)
        self._generation = self._tree.generation
        self._can_remove = False
        logger.debug("%s removed %r", type(self).__name__, value)
        self._resume_after(value, replacement)

    @abstractmethod
    def _resume_after(self, value: T, replacement: Node[T]) -> None:
        raise NotImplementedError


class PreOrderIterator(_RemovingIterator[T]):
    def __init__(self, tree: 'BinarySearchTree[T]') -> None:
        super().__init__(tree)
        self._stack: List[Node[T]] = []
        if not tree.is_empty():
            self._stack.append(tree.root)
        # Stack height before the last returned node's children were pushed.
        self._children_mark = 0

    def has_next(self) -> bool:
        while self._stack and self._stack[-1] is NULL_NODE:
            self._stack.pop()
        return bool(self._stack)

    def _advance(self) -> T:
        node = self._stack.pop()
        self._children_mark = len(self._stack)
        self._stack.append(node.right)
        self._stack.append(node.left)
        return node.value

    def _resume_after(self, value: T, replacement: Node[T]) -> None:
        # The replacement subtree holds every unvisited value of the removed
        # node's subtree, so it stands in for the two children pushed above.
        del self._stack[self._children_mark:]
        self._stack.append(replacement)


class InOrderIterator(_RemovingIterator[T]):
    def __init__(self, tree: 'BinarySearchTree[T]') -> None:
        super().__init__(tree)
        self._stack: List[Node[T]] = []
        self._current: Node[T] = tree.root
        self._push_left_spine()

    def _push_left_spine(self) -> None:
        while self._current is not NULL_NODE:
            self._stack.append(self._current)
            self._current = self._current.left

    def has_next(self) -> bool:
        return not (self._current is NULL_NODE and not self._stack)

    def _advance(self) -> T:
        node = self._stack.pop()
        self._current = node.right
        self._push_left_spine()
        return node.value

    def _resume_after(self, value: T, replacement: Node[T]) -> None:
        # Rebuild the path to the smallest value greater than the removed one.
        self._stack = []
        node = self._tree.root
        while node is not NULL_NODE:
            if node.value > value:
                self._stack.append(node)
                node = node.left
            else:
                node = node.right
        self._current = NULL_NODE
