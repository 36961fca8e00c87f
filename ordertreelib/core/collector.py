"""Data collection strategies for OrderTreeLib.

DataCollectors define what information to extract from nodes during a
traversal, so the same walk can produce payloads, index paths or structural
summaries depending on what the caller needs.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Dict, Tuple

from ..config import DataRequirement

if TYPE_CHECKING:
    from .node import TreeNode


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    @abstractmethod
    def collect(self, node: 'TreeNode', depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Depth relative to the node the traversal started from

        Returns:
            Collected data (type depends on collector)
        """
        pass


class NodeCollector(DataCollector):
    """Returns the visited node itself."""

    def collect(self, node: 'TreeNode', depth: int) -> 'TreeNode':
        return node


class PayloadCollector(DataCollector):
    """Returns the payload stored at each node."""

    def collect(self, node: 'TreeNode', depth: int) -> Any:
        return node.payload


class IndexPathCollector(DataCollector):
    """Collects the index path from the tree root to each node.

    Paths of parents are cached so siblings don't each rescan every
    ancestor. The cache is only valid for a single traversal of an
    unchanging tree; create a new collector per walk.
    """

    def __init__(self):
        self._path_cache: Dict[int, Tuple[int, ...]] = {}

    def collect(self, node: 'TreeNode', depth: int) -> Tuple[int, ...]:
        parent = node.parent
        if parent is None:
            return ()

        parent_path = self._path_cache.get(id(parent))
        if parent_path is None:
            parent_path = parent.index_path()
            self._path_cache[id(parent)] = parent_path

        path = parent_path + (node.index_in_parent(),)
        if not node.is_leaf():
            self._path_cache[id(node)] = path
        return path


class ChildCountCollector(DataCollector):
    """Collects nodes with child count information."""

    def collect(self, node: 'TreeNode', depth: int) -> Dict[str, Any]:
        return {
            'payload': node.payload,
            'depth': depth,
            'child_count': node.number_of_children(),
            'is_leaf': node.is_leaf(),
        }


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function.

    Allows arbitrary data collection logic without subclassing.
    """

    def __init__(self, collect_func: Callable[['TreeNode', int], Any]):
        """Initialize with custom collection function.

        Args:
            collect_func: Function(node, depth) -> data
        """
        self.collect_func = collect_func

    def collect(self, node: 'TreeNode', depth: int) -> Any:
        return self.collect_func(node, depth)


def create_collector(requirement: DataRequirement,
                     custom_func: Callable[['TreeNode', int], Any] = None) -> DataCollector:
    """Create a collector for a data requirement.

    Args:
        requirement: What to collect
        custom_func: Function(node, depth) -> data, required for CUSTOM

    Returns:
        DataCollector instance

    Raises:
        ValueError: If CUSTOM is requested without a function, or the
            requirement is not recognized
    """
    if requirement is DataRequirement.CUSTOM:
        if custom_func is None:
            raise ValueError("custom_func required when data_requirement is CUSTOM")
        return CustomCollector(custom_func)

    collectors = {
        DataRequirement.NODE: NodeCollector,
        DataRequirement.PAYLOAD: PayloadCollector,
        DataRequirement.INDEX_PATH: IndexPathCollector,
        DataRequirement.CHILD_COUNT: ChildCountCollector,
    }
    if requirement not in collectors:
        raise ValueError(f"Unknown data requirement: {requirement!r}")
    return collectors[requirement]()
