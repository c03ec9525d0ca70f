from typing import TypeVar, Generic, Iterator, List, Optional, Tuple

T = TypeVar('T')


class Node(Generic[T]):
    """A value with two owned subtrees.

    Empty subtrees are the shared ``NULL_NODE`` sentinel, never ``None``, so
    every walk compares child slots by identity.
    """

    def __init__(self, value: T) -> None:
        self.value: T = value
        self.left: Node[T] = NULL_NODE
        self.right: Node[T] = NULL_NODE

    def size(self) -> int:
        if self is NULL_NODE:
            return 0
        count = 0
        stack: List[Node[T]] = [self]
        while stack:
            node = stack.pop()
            count += 1
            if node.right is not NULL_NODE:
                stack.append(node.right)
            if node.left is not NULL_NODE:
                stack.append(node.left)
        return count

    def height(self) -> int:
        if self is NULL_NODE:
            return -1
        tallest = 0
        stack: List[Tuple[Node[T], int]] = [(self, 0)]
        while stack:
            node, depth = stack.pop()
            if depth > tallest:
                tallest = depth
            if node.right is not NULL_NODE:
                stack.append((node.right, depth + 1))
            if node.left is not NULL_NODE:
                stack.append((node.left, depth + 1))
        return tallest

    def insert(self, value: T) -> bool:
        node = self
        while True:
            if value < node.value:
                if node.left is NULL_NODE:
                    node.left = Node(value)
                    return True
                node = node.left
            elif value > node.value:
                if node.right is NULL_NODE:
                    node.right = Node(value)
                    return True
                node = node.right
            else:
                return False

    def contains(self, value: T) -> bool:
        node = self
        while node is not NULL_NODE:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def contains_non_bst(self, value: T) -> bool:
        """Linear scan that ignores ordering; only equality is used."""
        return any(item == value for item in self.pre_order_values())

    def find_with_parent(
        self, value: T
    ) -> Tuple[Optional['Node[T]'], bool, 'Node[T]']:
        """Locate ``value`` below this node.

        Returns ``(parent, is_left_child, node)``. ``parent`` is ``None``
        when the match is this node itself; ``node`` is ``NULL_NODE`` when
        the value is absent.
        """
        parent: Optional[Node[T]] = None
        is_left_child = False
        node = self
        while node is not NULL_NODE:
            if node.value < value:
                parent, is_left_child, node = node, False, node.right
            elif node.value > value:
                parent, is_left_child, node = node, True, node.left
            else:
                break
        return parent, is_left_child, node

    def detach(self) -> 'Node[T]':
        """Unlink this node from its own subtree.

        Returns the subtree that must take this node's slot in its parent.
        Only the returned subtree's links change; the caller relinks the
        parent slot.
        """
        if self.right is NULL_NODE:
            return self.left

        successor_parent = self
        successor = self.right
        while successor.left is not NULL_NODE:
            successor_parent = successor
            successor = successor.left

        if successor_parent is not self:
            successor_parent.left = successor.right
            successor.right = self.right
        successor.left = self.left

        self.left = NULL_NODE
        self.right = NULL_NODE
        return successor

    def min_node(self) -> 'Node[T]':
        node = self
        while node.left is not NULL_NODE:
            node = node.left
        return node

    def max_node(self) -> 'Node[T]':
        node = self
        while node.right is not NULL_NODE:
            node = node.right
        return node

    def in_order_values(self) -> Iterator[T]:
        stack: List[Node[T]] = []
        node = self
        while stack or node is not NULL_NODE:
            while node is not NULL_NODE:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def pre_order_values(self) -> Iterator[T]:
        if self is NULL_NODE:
            return
        stack: List[Node[T]] = [self]
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not NULL_NODE:
                stack.append(node.right)
            if node.left is not NULL_NODE:
                stack.append(node.left)

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class _NullNode(Node):
    def __init__(self) -> None:
        self.value = None
        self.left = self
        self.right = self

    def __repr__(self) -> str:
        return "NULL_NODE"


NULL_NODE: Node = _NullNode()
