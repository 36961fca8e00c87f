"""High-level API for OrderTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap TreeNode, TraversalPlan and the
collectors for ease of use in simple cases.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple, Union

from .config import DataRequirement, TraversalConfig, TraversalOptions, TraversalOrder
from .core.collector import create_collector
from .core.node import TreeNode
from .planning import TraversalPlan

TreeShape = Union[Any, Tuple[Any, Sequence[Any]]]


def traverse_tree(
    root: TreeNode,
    order: Union[TraversalConfig, TraversalOrder, TraversalOptions, int] = TraversalOrder.DEPTH_FIRST_PRE_ORDER,
    reverse: Optional[bool] = None,
    include_filter: Optional[Callable[[TreeNode], bool]] = None,
    max_depth: Optional[int] = None,
) -> Iterator[TreeNode]:
    """Simple interface for tree traversal.

    Args:
        root: Starting node for traversal
        order: Traversal order, bitmask or full config
        reverse: Override the reverse flag carried by ``order``
        include_filter: Only yield nodes for which this returns True
        max_depth: Only yield nodes at most this far below ``root``.
            Nodes are filtered, not pruned; the full order is still walked.

    Yields:
        TreeNode instances in traversal order

    Example:
        >>> for node in traverse_tree(root, TraversalOrder.BREADTH_FIRST):
        ...     print(node.payload)
    """
    plan = TraversalPlan(order, reverse=reverse)
    for node, depth in plan.execute(root):
        if max_depth is not None and depth > max_depth:
            continue
        if include_filter is not None and not include_filter(node):
            continue
        yield node


def collect_tree_data(
    root: TreeNode,
    data_requirement: DataRequirement = DataRequirement.PAYLOAD,
    custom_func: Optional[Callable[[TreeNode, int], Any]] = None,
    order: Union[TraversalConfig, TraversalOrder, TraversalOptions, int] = TraversalOrder.DEPTH_FIRST_PRE_ORDER,
    reverse: Optional[bool] = None,
) -> Iterator[Tuple[TreeNode, Any]]:
    """Traverse tree and collect specified data.

    Args:
        root: Starting node for traversal
        data_requirement: What to collect from each node
        custom_func: Function(node, depth) -> data, for DataRequirement.CUSTOM
        order: Traversal order, bitmask or full config
        reverse: Override the reverse flag carried by ``order``

    Yields:
        Tuples of (node, collected_data)

    Example:
        >>> for node, path in collect_tree_data(root, DataRequirement.INDEX_PATH):
        ...     print(path, node.payload)
    """
    collector = create_collector(data_requirement, custom_func)
    plan = TraversalPlan(order, reverse=reverse)
    for node, depth in plan.execute(root):
        yield (node, collector.collect(node, depth))


def count_nodes(root: TreeNode, include_filter: Optional[Callable[[TreeNode], bool]] = None) -> int:
    """Count the nodes in the subtree rooted at ``root`` (``root`` included).

    Example:
        >>> count = count_nodes(root)
        >>> print(f"Found {count} nodes")
    """
    return sum(1 for _ in traverse_tree(root, include_filter=include_filter))


def find_nodes(
    root: TreeNode,
    predicate: Callable[[TreeNode], bool],
    order: Union[TraversalConfig, TraversalOrder, TraversalOptions, int] = TraversalOrder.DEPTH_FIRST_PRE_ORDER,
    limit: Optional[int] = None,
) -> List[TreeNode]:
    """Find nodes matching a predicate.

    Args:
        root: Starting node
        predicate: Function returning True for wanted nodes
        order: Order in which matches are reported
        limit: Stop after this many matches

    Returns:
        List of matching nodes in traversal order
    """
    matches: List[TreeNode] = []

    def visit(node: TreeNode) -> bool:
        if predicate(node):
            matches.append(node)
        return limit is not None and len(matches) >= limit

    if limit is not None and limit <= 0:
        return matches
    TraversalPlan(order).enumerate(root, visit)
    return matches


def get_leaf_nodes(root: TreeNode) -> Iterator[TreeNode]:
    """Yield leaf nodes in depth-first order.

    Example:
        >>> for leaf in get_leaf_nodes(root):
        ...     print(f"Leaf: {leaf.payload}")
    """
    return traverse_tree(root, include_filter=lambda node: node.is_leaf())


def get_index_paths(root: TreeNode) -> Dict[Tuple[int, ...], TreeNode]:
    """Map every index path below ``root`` (relative to ``root``) to its node.

    The empty path maps to ``root`` itself, so
    ``root.descendant_at_index_path(path) is node`` for every entry.
    """
    paths: Dict[Tuple[int, ...], TreeNode] = {}
    stack: List[Tuple[TreeNode, Tuple[int, ...]]] = [(root, ())]
    while stack:
        node, path = stack.pop()
        paths[path] = node
        for position, child in enumerate(node.children):
            stack.append((child, path + (position,)))
    return paths


def get_tree_stats(root: TreeNode) -> Dict[str, Any]:
    """Get statistics about the subtree rooted at ``root``.

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes, max_depth,
        max_children and average_children (over internal nodes)

    Example:
        >>> stats = get_tree_stats(root)
        >>> print(f"Total nodes: {stats['total_nodes']}")
        >>> print(f"Leaf nodes: {stats['leaf_nodes']}")
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'internal_nodes': 0,
        'max_depth': 0,
        'max_children': 0,
        'average_children': 0.0,
    }
    child_total = 0

    for node, depth in TraversalPlan(TraversalOrder.BREADTH_FIRST).execute(root):
        stats['total_nodes'] += 1
        stats['max_depth'] = max(stats['max_depth'], depth)
        count = node.number_of_children()
        if count == 0:
            stats['leaf_nodes'] += 1
        else:
            stats['internal_nodes'] += 1
            child_total += count
            stats['max_children'] = max(stats['max_children'], count)

    if stats['internal_nodes']:
        stats['average_children'] = child_total / stats['internal_nodes']

    return stats


def build_tree(shape: TreeShape) -> TreeNode:
    """Build a tree from nested ``(payload, [children...])`` tuples.

    A child entry that is not a 2-tuple whose second item is a list is
    taken as a leaf payload.

    Example:
        >>> root = build_tree(("A", [("B", ["D", "E"]), "C"]))
        >>> [n.payload for n in root.iter_descendants(TraversalOrder.BREADTH_FIRST)]
        ['A', 'B', 'C', 'D', 'E']
    """
    payload, children = _split_shape(shape)
    root = TreeNode(payload)
    stack: List[Tuple[TreeNode, Sequence[Any]]] = [(root, children)]
    while stack:
        parent, child_shapes = stack.pop()
        for child_shape in child_shapes:
            child_payload, grandchildren = _split_shape(child_shape)
            child = parent.append_child_payload(child_payload)
            if grandchildren:
                stack.append((child, grandchildren))
    return root


def _split_shape(shape: TreeShape) -> Tuple[Any, Sequence[Any]]:
    if isinstance(shape, tuple) and len(shape) == 2 and isinstance(shape[1], list):
        return shape[0], shape[1]
    return shape, []
