import sys
import os
import unittest

from hypothesis import given, strategies as st

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from binary_search_tree import BinarySearchTree
from tree_node import NULL_NODE


def build(values):
    bst = BinarySearchTree()
    for value in values:
        bst.insert(value)
    return bst


def reference_height(node):
    if node is NULL_NODE:
        return -1
    return 1 + max(reference_height(node.left), reference_height(node.right))


def reference_pre_order(node):
    if node is NULL_NODE:
        return []
    return [node.value] + reference_pre_order(node.left) + reference_pre_order(node.right)


def assert_ordered(node, low=None, high=None):
    if node is NULL_NODE:
        return
    assert low is None or low < node.value
    assert high is None or node.value < high
    assert_ordered(node.left, low, node.value)
    assert_ordered(node.right, node.value, high)


keys = st.lists(st.integers(min_value=-200, max_value=200), max_size=60)


class TestTreeProperties(unittest.TestCase):

    @given(keys)
    def test_size_and_height(self, xs):
        bst = build(xs)
        self.assertEqual(bst.size(), len(set(xs)))
        self.assertEqual(bst.height(), reference_height(bst.root))

    @given(keys)
    def test_reinsert_fails(self, xs):
        bst = build(xs)
        for x in xs:
            self.assertFalse(bst.insert(x))
        self.assertEqual(bst.size(), len(set(xs)))

    @given(keys, keys)
    def test_contains_matches_inserted(self, xs, probes):
        bst = build(xs)
        for value in xs + probes:
            self.assertEqual(bst.contains(value), value in set(xs))
            self.assertEqual(bst.contains_non_bst(value), bst.contains(value))

    @given(keys, keys)
    def test_order_survives_removals(self, xs, removals):
        bst = build(xs)
        present = set(xs)
        for value in removals:
            before = bst.to_list()
            removed = bst.remove(value)
            self.assertEqual(removed, value in present)
            if removed:
                present.discard(value)
                self.assertFalse(bst.contains(value))
                self.assertEqual(bst.size(), len(before) - 1)
            else:
                self.assertEqual(bst.to_list(), before)
            assert_ordered(bst.root)
        self.assertEqual(bst.to_list(), sorted(present))

    @given(keys)
    def test_iterators_visit_each_value_once(self, xs):
        bst = build(xs)
        self.assertEqual(list(bst.snapshot_iterator()), sorted(set(xs)))
        self.assertEqual(list(bst.in_order_iterator()), sorted(set(xs)))
        self.assertEqual(list(bst.pre_order_iterator()), reference_pre_order(bst.root))

    @given(keys, st.data())
    def test_iterator_remove_visits_each_value_once(self, xs, data):
        bst = build(xs)
        factory = data.draw(st.sampled_from(["pre_order_iterator", "in_order_iterator"]))
        iterator = getattr(bst, factory)()
        seen = []
        kept = []
        while iterator.has_next():
            value = next(iterator)
            seen.append(value)
            if data.draw(st.booleans()):
                iterator.remove()
            else:
                kept.append(value)
        self.assertEqual(sorted(seen), sorted(set(xs)))
        self.assertEqual(bst.to_list(), sorted(kept))
        assert_ordered(bst.root)


if __name__ == "__main__":
    unittest.main()
