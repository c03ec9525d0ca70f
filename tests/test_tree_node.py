import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from tree_node import NULL_NODE, Node


def chain(*values):
    root = Node(values[0])
    for value in values[1:]:
        root.insert(value)
    return root


class TestNullNode(unittest.TestCase):
    def test_sentinel_is_empty(self):
        self.assertEqual(NULL_NODE.size(), 0)
        self.assertEqual(NULL_NODE.height(), -1)
        self.assertIsNone(NULL_NODE.value)
        self.assertEqual(list(NULL_NODE.in_order_values()), [])
        self.assertEqual(list(NULL_NODE.pre_order_values()), [])
        self.assertFalse(NULL_NODE.contains(1))
        self.assertFalse(NULL_NODE.contains_non_bst(1))

    def test_sentinel_children_are_itself(self):
        self.assertIs(NULL_NODE.left, NULL_NODE)
        self.assertIs(NULL_NODE.right, NULL_NODE)

    def test_repr(self):
        self.assertEqual(repr(NULL_NODE), "NULL_NODE")
        self.assertEqual(repr(Node(3)), "Node(3)")


class TestNode(unittest.TestCase):
    def test_new_node_is_leaf(self):
        node = Node(7)
        self.assertIs(node.left, NULL_NODE)
        self.assertIs(node.right, NULL_NODE)
        self.assertEqual(node.size(), 1)
        self.assertEqual(node.height(), 0)

    def test_insert_places_children(self):
        root = chain(5, 3, 8)
        self.assertEqual(root.left.value, 3)
        self.assertEqual(root.right.value, 8)

    def test_insert_duplicate_returns_false(self):
        root = chain(5, 3)
        self.assertFalse(root.insert(3))
        self.assertEqual(root.size(), 2)

    def test_size_and_height(self):
        root = chain(5, 3, 8, 1, 4, 9, 10)
        self.assertEqual(root.size(), 7)
        self.assertEqual(root.height(), 3)

    def test_find_with_parent(self):
        root = chain(5, 3, 8, 4)
        parent, is_left_child, node = root.find_with_parent(4)
        self.assertEqual(parent.value, 3)
        self.assertFalse(is_left_child)
        self.assertEqual(node.value, 4)

    def test_find_with_parent_at_root(self):
        root = chain(5, 3)
        parent, _, node = root.find_with_parent(5)
        self.assertIsNone(parent)
        self.assertIs(node, root)

    def test_find_with_parent_missing(self):
        root = chain(5, 3)
        parent, is_left_child, node = root.find_with_parent(1)
        self.assertIs(node, NULL_NODE)
        self.assertEqual(parent.value, 3)
        self.assertTrue(is_left_child)

    def test_detach_leaf(self):
        self.assertIs(Node(1).detach(), NULL_NODE)

    def test_detach_without_right_child_returns_left(self):
        root = chain(5, 3, 1)
        left = root.left
        self.assertIs(root.detach(), left)

    def test_detach_uses_successor(self):
        root = chain(5, 3, 9, 7, 6, 8)
        successor = root.detach()
        self.assertEqual(successor.value, 6)
        self.assertEqual(successor.left.value, 3)
        self.assertEqual(successor.right.value, 9)
        self.assertEqual(list(successor.in_order_values()), [3, 6, 7, 8, 9])
        self.assertIs(root.left, NULL_NODE)
        self.assertIs(root.right, NULL_NODE)

    def test_min_and_max_node(self):
        root = chain(5, 3, 8, 1, 9)
        self.assertEqual(root.min_node().value, 1)
        self.assertEqual(root.max_node().value, 9)

    def test_traversals(self):
        root = chain(5, 3, 8, 1, 4)
        self.assertEqual(list(root.in_order_values()), [1, 3, 4, 5, 8])
        self.assertEqual(list(root.pre_order_values()), [5, 3, 1, 4, 8])

    def test_contains_non_bst_ignores_ordering(self):
        root = Node(5)
        # Deliberately break the ordering; only the brute-force scan finds it.
        root.left = Node(9)
        self.assertTrue(root.contains_non_bst(9))
        self.assertFalse(root.contains(9))


if __name__ == "__main__":
    unittest.main()
