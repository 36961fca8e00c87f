"""Tree traversal strategies for OrderTreeLib.

Traversers implement the ordering algorithms for walking a tree. Each one
produces a lazy sequence of ``(node, depth)`` pairs, depth being relative to
the node the walk starts from. Reversal is not handled here; it is applied
to the whole sequence by the TraversalPlan.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import TYPE_CHECKING, Deque, Iterator, List, Tuple

from ..config import InOrderPolicy, TraversalOrder
from ..errors import NotBinaryTreeError

if TYPE_CHECKING:
    from .node import TreeNode


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers only read ``children`` from nodes, so any walk sees the
    child order that was current when each node was reached.
    """

    order: TraversalOrder

    @abstractmethod
    def traverse(self, root: 'TreeNode') -> Iterator[Tuple['TreeNode', int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass


class ChildrenOnlyTraverser(TreeTraverser):
    """Visits the direct children of the starting node, excluding the node itself."""

    order = TraversalOrder.CHILDREN_ONLY

    def traverse(self, root: 'TreeNode') -> Iterator[Tuple['TreeNode', int]]:
        for child in root.children:
            yield (child, 1)


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N, left to right, before visiting nodes at
    depth N+1.
    """

    order = TraversalOrder.BREADTH_FIRST

    def traverse(self, root: 'TreeNode') -> Iterator[Tuple['TreeNode', int]]:
        # Queue stores (node, depth) tuples
        queue: Deque[Tuple['TreeNode', int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()
            yield (node, depth)

            for child in node.children:
                queue.append((child, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children. Uses an explicit stack so deep trees
    don't hit the recursion limit.
    """

    order = TraversalOrder.DEPTH_FIRST_PRE_ORDER

    def traverse(self, root: 'TreeNode') -> Iterator[Tuple['TreeNode', int]]:
        stack: List[Tuple['TreeNode', int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()
            yield (node, depth)

            # Push in reverse so the first child is popped first
            for child in reversed(node.children):
                stack.append((child, depth + 1))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent. Good for deletion or calculating
    aggregate values over subtrees.
    """

    order = TraversalOrder.DEPTH_FIRST_POST_ORDER

    def traverse(self, root: 'TreeNode') -> Iterator[Tuple['TreeNode', int]]:
        # Entries are (node, depth, children_already_pushed)
        stack: List[Tuple['TreeNode', int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()
            if expanded or node.is_leaf():
                yield (node, depth)
                continue

            stack.append((node, depth, True))
            for child in reversed(node.children):
                stack.append((child, depth + 1, False))


class BinaryInOrderTraverser(TreeTraverser):
    """In-order traversal: left subtree, node, right subtree.

    Only meaningful for binary trees. A node with a single child treats it
    as the left subtree. For nodes with more than two children the policy
    decides: GENERALIZED visits the first child's subtree, then the node,
    then the subtrees of all remaining children in order; STRICT raises
    NotBinaryTreeError when such a node is reached.
    """

    order = TraversalOrder.BINARY_IN_ORDER

    def __init__(self, policy: InOrderPolicy = InOrderPolicy.GENERALIZED):
        self.policy = policy

    def traverse(self, root: 'TreeNode') -> Iterator[Tuple['TreeNode', int]]:
        # Entries are (node, depth, visit_now)
        stack: List[Tuple['TreeNode', int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, visit_now = stack.pop()
            if visit_now:
                yield (node, depth)
                continue

            children = node.children
            if len(children) > 2 and self.policy is InOrderPolicy.STRICT:
                raise NotBinaryTreeError(node, len(children))

            # Pushed in reverse: right subtrees, then the node, then the left subtree
            for child in reversed(children[1:]):
                stack.append((child, depth + 1, False))
            stack.append((node, depth, True))
            if children:
                stack.append((children[0], depth + 1, False))


def create_traverser(order: TraversalOrder,
                     in_order_policy: InOrderPolicy = InOrderPolicy.GENERALIZED) -> TreeTraverser:
    """Create a traverser instance for a traversal order.

    Args:
        order: Which traversal order to produce
        in_order_policy: Policy used by BINARY_IN_ORDER for non-binary nodes

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If order is not recognized
    """
    if order is TraversalOrder.BINARY_IN_ORDER:
        return BinaryInOrderTraverser(in_order_policy)

    strategies = {
        TraversalOrder.CHILDREN_ONLY: ChildrenOnlyTraverser,
        TraversalOrder.BREADTH_FIRST: BreadthFirstTraverser,
        TraversalOrder.DEPTH_FIRST_PRE_ORDER: DepthFirstPreOrderTraverser,
        TraversalOrder.DEPTH_FIRST_POST_ORDER: DepthFirstPostOrderTraverser,
    }

    if order not in strategies:
        raise ValueError(
            f"Unknown traversal order: {order!r}. "
            f"Choose from: {', '.join(o.name for o in TraversalOrder)}"
        )

    return strategies[order]()
