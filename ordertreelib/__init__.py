"""OrderTreeLib - Ordered N-ary Tree Container.

OrderTreeLib provides a general-purpose tree of payload-carrying nodes with
stable identity, index-path addressing, sibling and ancestor navigation,
five traversal orders (each reversible) and in-place mutation that keeps
parent and child links consistent.

    from ordertreelib import TreeNode, TraversalOrder

    root = TreeNode("A")
    b = root.append_child_payload("B")
    for node in root.iter_descendants(TraversalOrder.BREADTH_FIRST):
        print(node.index_path(), node.payload)

There is no tree object: any node is a handle into its tree, and a node
without a parent is a root.
"""

import logging

__version__ = "0.1.0"

# Core components
from .core.node import TreeNode
from .core.traverser import (
    TreeTraverser,
    ChildrenOnlyTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    BinaryInOrderTraverser,
    create_traverser,
)
from .core.collector import (
    DataCollector,
    NodeCollector,
    PayloadCollector,
    IndexPathCollector,
    ChildCountCollector,
    CustomCollector,
    create_collector,
)

# Configuration and planning
from .config import (
    TraversalOrder,
    TraversalOptions,
    TraversalConfig,
    TraversalSignal,
    InOrderPolicy,
    DataRequirement,
)
from .planning import TraversalPlan
from .errors import (
    TreeError,
    OutOfRangeError,
    CycleViolationError,
    InvalidTraversalError,
    NotBinaryTreeError,
)

# High-level API
from .api import (
    traverse_tree,
    collect_tree_data,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_index_paths,
    get_tree_stats,
    build_tree,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    '__version__',
    # Core
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
    # Config
    'TraversalOrder',
    'TraversalOptions',
    'TraversalConfig',
    'TraversalSignal',
    'InOrderPolicy',
    'DataRequirement',
    'TraversalPlan',
    # Errors
    'TreeError',
    'OutOfRangeError',
    'CycleViolationError',
    'InvalidTraversalError',
    'NotBinaryTreeError',
    # API
    'traverse_tree',
    'collect_tree_data',
    'count_nodes',
    'find_nodes',
    'get_leaf_nodes',
    'get_index_paths',
    'get_tree_stats',
    'build_tree',
]
