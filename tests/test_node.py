import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from bstree.node import Node


def _build(*keys):
    root = Node(keys[0])
    for key in keys[1:]:
        root.insert(key)
    return root


class TestNodeInsert(unittest.TestCase):

    def test_new_node_is_leaf(self):
        node = Node(10)
        self.assertEqual(node.key, 10)
        self.assertIsNone(node.left)
        self.assertIsNone(node.right)
        self.assertTrue(node.is_leaf())

    def test_smaller_value_goes_left(self):
        node = Node(10)
        self.assertTrue(node.insert(5))
        self.assertEqual(node.left.key, 5)
        self.assertIsNone(node.right)

    def test_larger_value_goes_right(self):
        node = Node(10)
        self.assertTrue(node.insert(15))
        self.assertEqual(node.right.key, 15)
        self.assertIsNone(node.left)

    def test_insert_descends_to_empty_slot(self):
        root = _build(25, 20, 30)
        root.insert(22)
        self.assertEqual(root.left.right.key, 22)
        root.insert(27)
        self.assertEqual(root.right.left.key, 27)

    def test_duplicate_returns_false(self):
        root = _build(25, 20, 30)
        self.assertFalse(root.insert(20))
        self.assertFalse(root.insert(25))
        self.assertEqual(root.in_order(), [20, 25, 30])

    def test_new_nodes_are_leaves(self):
        root = _build(25, 20)
        self.assertTrue(root.left.is_leaf())
        self.assertFalse(root.is_leaf())


class TestNodeGet(unittest.TestCase):

    def setUp(self):
        self.root = _build(25, 20, 30, 15, 22, 27, 35)

    def test_get_self(self):
        self.assertIs(self.root.get(25), self.root)

    def test_get_returns_node_holding_key(self):
        node = self.root.get(27)
        self.assertIsNotNone(node)
        self.assertEqual(node.key, 27)
        self.assertIs(node, self.root.right.left)

    def test_get_missing_returns_none(self):
        self.assertIsNone(self.root.get(100))
        self.assertIsNone(self.root.get(0))
        self.assertIsNone(self.root.get(21))

    def test_get_on_subtree_does_not_search_other_side(self):
        # 30 lives in the root's right subtree, not below 20
        self.assertIsNone(self.root.left.get(30))


class TestNodeTraversals(unittest.TestCase):

    def setUp(self):
        self.root = _build(25, 20, 30, 15, 22, 27, 35)

    def test_in_order(self):
        self.assertEqual(self.root.in_order(), [15, 20, 22, 25, 27, 30, 35])

    def test_pre_order(self):
        self.assertEqual(self.root.pre_order(), [25, 20, 15, 22, 30, 27, 35])

    def test_post_order(self):
        self.assertEqual(self.root.post_order(), [15, 22, 20, 27, 35, 30, 25])

    def test_single_node_traversals(self):
        node = Node(7)
        self.assertEqual(node.in_order(), [7])
        self.assertEqual(node.pre_order(), [7])
        self.assertEqual(node.post_order(), [7])

    def test_traversals_restart_from_scratch(self):
        first = self.root.in_order()
        second = self.root.in_order()
        self.assertEqual(first, second)
        self.assertIsNot(first, second)

    def test_pre_order_rebuilds_same_shape(self):
        keys = self.root.pre_order()
        clone = _build(*keys)
        self.assertEqual(clone.pre_order(), keys)
        self.assertEqual(clone.post_order(), self.root.post_order())

    def test_post_order_visits_children_first(self):
        order = self.root.post_order()
        self.assertLess(order.index(15), order.index(20))
        self.assertLess(order.index(22), order.index(20))
        self.assertEqual(order[-1], 25)

    def test_deep_skewed_subtree(self):
        root = Node(0)
        for i in range(1, 2000):
            root.insert(i)
        self.assertEqual(root.in_order(), list(range(2000)))
        self.assertEqual(root.post_order()[0], 1999)
        self.assertEqual(root.height(), 2000)


class TestNodeExtremes(unittest.TestCase):

    def test_min_max(self):
        root = _build(25, 20, 30, 15, 22, 27, 35)
        self.assertEqual(root.min(), 15)
        self.assertEqual(root.max(), 35)

    def test_min_max_nodes(self):
        root = _build(25, 20, 30, 15, 22, 27, 35)
        self.assertIs(root.min_node(), root.left.left)
        self.assertIs(root.max_node(), root.right.right)

    def test_min_max_of_leaf_is_own_key(self):
        node = Node(42)
        self.assertEqual(node.min(), 42)
        self.assertEqual(node.max(), 42)

    def test_max_of_left_subtree_is_predecessor(self):
        root = _build(25, 20, 30, 15, 22, 27, 35)
        self.assertEqual(root.left.max(), 22)

    def test_height(self):
        self.assertEqual(Node(1).height(), 1)
        root = _build(25, 20, 30, 15, 22, 27, 35)
        self.assertEqual(root.height(), 3)
        root.insert(36)
        self.assertEqual(root.height(), 4)

    def test_repr(self):
        self.assertEqual(repr(Node(3)), "Node(3)")
        self.assertEqual(repr(Node("a")), "Node('a')")


if __name__ == "__main__":
    unittest.main()
