"""Unit tests for traversal strategies and configuration.

Tests every traversal order on the reference tree, reversal, visitor
early stop, the bitmask form of the options and the in-order policy for
nodes with more than two children.
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from ordertreelib import (
    TreeNode,
    TraversalOrder,
    TraversalOptions,
    TraversalConfig,
    TraversalSignal,
    TraversalPlan,
    InvalidTraversalError,
    NotBinaryTreeError,
    build_tree,
)
from ordertreelib.core.traverser import (
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    BinaryInOrderTraverser,
    ChildrenOnlyTraverser,
    create_traverser,
)
from ordertreelib.config import InOrderPolicy


def reference_tree():
    #     A
    #    / \
    #   B   C
    #  / \
    # D   E
    return build_tree(("A", [("B", ["D", "E"]), "C"]))


EXPECTED_ORDERS = {
    TraversalOrder.CHILDREN_ONLY: ["B", "C"],
    TraversalOrder.BREADTH_FIRST: ["A", "B", "C", "D", "E"],
    TraversalOrder.DEPTH_FIRST_PRE_ORDER: ["A", "B", "D", "E", "C"],
    TraversalOrder.DEPTH_FIRST_POST_ORDER: ["D", "E", "B", "C", "A"],
    TraversalOrder.BINARY_IN_ORDER: ["D", "B", "E", "A", "C"],
}


def payloads(nodes):
    return [node.payload for node in nodes]


@pytest.mark.parametrize("order,expected", list(EXPECTED_ORDERS.items()))
def test_forward_order(order, expected):
    assert payloads(reference_tree().iter_descendants(order)) == expected


@pytest.mark.parametrize("order,expected", list(EXPECTED_ORDERS.items()))
def test_reverse_order_is_exact_reversal(order, expected):
    root = reference_tree()
    assert payloads(root.iter_descendants(order, reverse=True)) == list(reversed(expected))


@pytest.mark.parametrize("order,expected", list(EXPECTED_ORDERS.items()))
def test_enumerate_visits_each_node_once(order, expected):
    visited = []
    stopped = reference_tree().enumerate_descendants(order, lambda node: visited.append(node.payload))
    assert visited == expected
    assert stopped is False


class TestTraversers(unittest.TestCase):
    """Test traverser classes directly."""

    def setUp(self):
        self.root = reference_tree()

    def test_depths_breadth_first(self):
        result = [(n.payload, d) for n, d in BreadthFirstTraverser().traverse(self.root)]
        self.assertEqual(result, [("A", 0), ("B", 1), ("C", 1), ("D", 2), ("E", 2)])

    def test_depths_pre_order(self):
        result = [(n.payload, d) for n, d in DepthFirstPreOrderTraverser().traverse(self.root)]
        self.assertEqual(result, [("A", 0), ("B", 1), ("D", 2), ("E", 2), ("C", 1)])

    def test_depths_post_order(self):
        result = [(n.payload, d) for n, d in DepthFirstPostOrderTraverser().traverse(self.root)]
        self.assertEqual(result, [("D", 2), ("E", 2), ("B", 1), ("C", 1), ("A", 0)])

    def test_depths_in_order(self):
        result = [(n.payload, d) for n, d in BinaryInOrderTraverser().traverse(self.root)]
        self.assertEqual(result, [("D", 2), ("B", 1), ("E", 2), ("A", 0), ("C", 1)])

    def test_children_only_depth(self):
        result = [(n.payload, d) for n, d in ChildrenOnlyTraverser().traverse(self.root)]
        self.assertEqual(result, [("B", 1), ("C", 1)])

    def test_create_traverser(self):
        self.assertIsInstance(create_traverser(TraversalOrder.BREADTH_FIRST), BreadthFirstTraverser)
        traverser = create_traverser(TraversalOrder.BINARY_IN_ORDER, InOrderPolicy.STRICT)
        self.assertIsInstance(traverser, BinaryInOrderTraverser)
        self.assertIs(traverser.policy, InOrderPolicy.STRICT)

    def test_create_traverser_unknown(self):
        with self.assertRaises(ValueError):
            create_traverser("sideways")


class TestSingleNode(unittest.TestCase):
    """A leaf on its own."""

    def test_orders_on_leaf(self):
        leaf = TreeNode("only")
        self.assertEqual(list(leaf.iter_descendants(TraversalOrder.CHILDREN_ONLY)), [])
        for order in (TraversalOrder.BREADTH_FIRST,
                      TraversalOrder.DEPTH_FIRST_PRE_ORDER,
                      TraversalOrder.DEPTH_FIRST_POST_ORDER,
                      TraversalOrder.BINARY_IN_ORDER):
            self.assertEqual(list(leaf.iter_descendants(order)), [leaf])

    def test_subtree_traversal_excludes_ancestors(self):
        root = reference_tree()
        b = root.first_child()
        self.assertEqual(payloads(b.iter_descendants(TraversalOrder.BREADTH_FIRST)), ["B", "D", "E"])


class TestEarlyStop(unittest.TestCase):
    """Visitors can stop the traversal as soon as they ask."""

    def test_stop_signal(self):
        visited = []

        def visitor(node):
            visited.append(node.payload)
            if node.payload == "D":
                return TraversalSignal.STOP
            return TraversalSignal.CONTINUE

        stopped = reference_tree().enumerate_descendants(
            TraversalOrder.DEPTH_FIRST_PRE_ORDER, visitor)

        self.assertTrue(stopped)
        self.assertEqual(visited, ["A", "B", "D"])

    def test_true_also_stops(self):
        visited = []
        reference_tree().enumerate_descendants(
            TraversalOrder.BREADTH_FIRST,
            lambda node: visited.append(node.payload) or True)
        self.assertEqual(visited, ["A"])

    def test_stop_on_reversed_traversal(self):
        visited = []

        def visitor(node):
            visited.append(node.payload)
            return node.payload == "B"

        reference_tree().enumerate_descendants(
            TraversalOptions.DEPTH_FIRST_POST_ORDER | TraversalOptions.REVERSE, visitor)
        self.assertEqual(visited, ["A", "C", "B"])

    def test_truthy_non_signal_values_continue(self):
        """Only STOP or True end the walk."""
        visited = []
        reference_tree().enumerate_descendants(
            TraversalOrder.BREADTH_FIRST,
            lambda node: visited.append(node.payload) or "keep going")
        self.assertEqual(len(visited), 5)

    def test_visitor_exception_propagates(self):
        def visitor(node):
            raise RuntimeError("boom")

        with self.assertRaises(RuntimeError):
            reference_tree().enumerate_descendants(TraversalOrder.BREADTH_FIRST, visitor)


class TestLaziness(unittest.TestCase):

    def test_forward_iteration_is_lazy(self):
        """Only as many nodes as consumed are produced."""
        root = reference_tree()
        iterator = root.iter_descendants(TraversalOrder.DEPTH_FIRST_PRE_ORDER)
        self.assertIs(next(iterator), root)
        self.assertEqual(next(iterator).payload, "B")

    def test_single_pass(self):
        iterator = reference_tree().iter_descendants(TraversalOrder.BREADTH_FIRST)
        self.assertEqual(len(list(iterator)), 5)
        self.assertEqual(list(iterator), [])

    def test_invalid_options_fail_before_iteration(self):
        """Options are validated when the iterator is created, not when consumed."""
        with self.assertRaises(InvalidTraversalError):
            reference_tree().iter_descendants(TraversalOptions.REVERSE)


class TestOptionsForms(unittest.TestCase):
    """The same walk can be requested as an order, a bitmask or a config."""

    def test_bitmask(self):
        root = reference_tree()
        result = payloads(root.iter_descendants(TraversalOptions.BREADTH_FIRST | TraversalOptions.REVERSE))
        self.assertEqual(result, ["E", "D", "C", "B", "A"])

    def test_plain_int_bitmask(self):
        root = reference_tree()
        self.assertEqual(payloads(root.iter_descendants(1 << 1)), ["B", "C"])

    def test_config(self):
        root = reference_tree()
        result = payloads(root.iter_descendants(TraversalConfig.post_order(reverse=True)))
        self.assertEqual(result, ["A", "C", "B", "E", "D"])

    def test_reverse_argument_overrides_config(self):
        root = reference_tree()
        config = TraversalConfig.pre_order(reverse=True)
        result = payloads(root.iter_descendants(config, reverse=False))
        self.assertEqual(result, ["A", "B", "D", "E", "C"])

    def test_no_order_bit_is_invalid(self):
        with self.assertRaises(InvalidTraversalError):
            reference_tree().enumerate_descendants(TraversalOptions.REVERSE, lambda n: None)

    def test_two_order_bits_are_invalid(self):
        options = TraversalOptions.BREADTH_FIRST | TraversalOptions.CHILDREN_ONLY
        with self.assertRaises(InvalidTraversalError):
            reference_tree().enumerate_descendants(options, lambda n: None)

    def test_unknown_bits_are_invalid(self):
        with self.assertRaises(InvalidTraversalError):
            TraversalPlan((1 << 2) | (1 << 7))

    def test_non_option_value_is_invalid(self):
        with self.assertRaises(InvalidTraversalError):
            TraversalPlan("bfs")

    def test_invalid_error_is_value_error(self):
        with self.assertRaises(ValueError):
            TraversalPlan(0)


class TestInOrderPolicy(unittest.TestCase):
    """Binary in-order on nodes with more than two children."""

    def setUp(self):
        #       A
        #    /  |  \
        #   B   C   D
        #  /|\
        # E F G
        self.root = build_tree(("A", [("B", ["E", "F", "G"]), "C", "D"]))

    def test_generalized_visits_every_child(self):
        result = payloads(self.root.iter_descendants(TraversalOrder.BINARY_IN_ORDER))
        self.assertEqual(result, ["E", "B", "F", "G", "A", "C", "D"])

    def test_generalized_reversed(self):
        result = payloads(self.root.iter_descendants(TraversalConfig.in_order(reverse=True)))
        self.assertEqual(result, ["D", "C", "A", "G", "F", "B", "E"])

    def test_one_child_is_left_subtree(self):
        root = build_tree(("A", [("B", ["C"])]))
        self.assertEqual(payloads(root.iter_descendants(TraversalOrder.BINARY_IN_ORDER)),
                         ["C", "B", "A"])

    def test_strict_raises(self):
        iterator = self.root.iter_descendants(TraversalConfig.in_order(strict=True))
        with self.assertRaises(NotBinaryTreeError) as ctx:
            list(iterator)
        self.assertIs(ctx.exception.node, self.root)
        self.assertEqual(ctx.exception.child_count, 3)

    def test_strict_accepts_binary_tree(self):
        result = payloads(reference_tree().iter_descendants(TraversalConfig.in_order(strict=True)))
        self.assertEqual(result, ["D", "B", "E", "A", "C"])


@pytest.mark.slow
class TestDeepTrees(unittest.TestCase):
    """Traversal does not recurse, so very deep chains are fine."""

    def test_deep_chain(self):
        root = TreeNode(0)
        node = root
        for i in range(1, 5000):
            node = node.append_child_payload(i)

        for order in (TraversalOrder.DEPTH_FIRST_PRE_ORDER,
                      TraversalOrder.DEPTH_FIRST_POST_ORDER,
                      TraversalOrder.BINARY_IN_ORDER,
                      TraversalOrder.BREADTH_FIRST):
            self.assertEqual(sum(1 for _ in root.iter_descendants(order)), 5000)

        post = root.iter_descendants(TraversalOrder.DEPTH_FIRST_POST_ORDER)
        self.assertEqual(next(post).payload, 4999)


if __name__ == "__main__":
    unittest.main()
