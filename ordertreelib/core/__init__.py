"""Core components of OrderTreeLib: the node, traversers and collectors."""

from .node import TreeNode
from .traverser import (
    TreeTraverser,
    ChildrenOnlyTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    BinaryInOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    NodeCollector,
    PayloadCollector,
    IndexPathCollector,
    ChildCountCollector,
    CustomCollector,
    create_collector,
)

__all__ = [
    'TreeNode',
    'TreeTraverser',
    'ChildrenOnlyTraverser',
    'BreadthFirstTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'BinaryInOrderTraverser',
    'create_traverser',
    'DataCollector',
    'NodeCollector',
    'PayloadCollector',
    'IndexPathCollector',
    'ChildCountCollector',
    'CustomCollector',
    'create_collector',
]
