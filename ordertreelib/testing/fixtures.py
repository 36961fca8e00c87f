"""Test fixtures for OrderTreeLib consumers.

These fixtures check the structural invariants of a tree from the outside,
so test suites can assert that a sequence of mutations left every link
consistent without reaching into node internals.
"""

from typing import Any, List, Optional

from ..config import TraversalOrder
from ..core.node import TreeNode
from ..planning import TraversalPlan


class TreeStructureHelper:
    """Public test fixture for tree structure verification.

    Example:
        root = build_tree(("A", [("B", ["D", "E"]), "C"]))
        helper = TreeStructureHelper(root)

        root.child_at_index(0).insert_child(root.child_at_index(1), 0)
        helper.assert_consistent()
        assert helper.outline() == "A\\n  B\\n    C\\n    D\\n    E"
    """

    def __init__(self, root: TreeNode):
        """Initialize with any node; checks cover the subtree below it.

        Args:
            root: Node whose subtree will be verified
        """
        self.root = root

    def find_problems(self, max_problems: Optional[int] = None) -> List[str]:
        """Check links, ownership, acyclicity and index paths.

        Args:
            max_problems: Stop after this many problems (None = report all)

        Returns:
            List of human-readable problems (empty if the tree is consistent)
        """
        problems: List[str] = []
        seen = set()
        tree_root = self.root.root()

        stack = [self.root]
        while stack and (max_problems is None or len(problems) < max_problems):
            node = stack.pop()
            if id(node) in seen:
                problems.append(f"{node!r} is reachable more than once")
                continue
            seen.add(id(node))

            for position, child in enumerate(node.children):
                if child.parent is not node:
                    problems.append(
                        f"{child!r} at index {position} of {node!r} "
                        f"has parent {child.parent!r}"
                    )
                    continue
                stack.append(child)

            if self._has_parent_cycle(node):
                problems.append(f"Parent links above {node!r} form a cycle")
                continue

            # OutOfRangeError is a LookupError too
            try:
                path = node.index_path()
                located = tree_root.descendant_at_index_path(path)
            except LookupError as e:
                problems.append(f"Index path of {node!r} can't be resolved: {e}")
                continue
            if located is not node:
                problems.append(f"Index path {path!r} does not re-locate {node!r}")

        if max_problems is not None:
            del problems[max_problems:]
        return problems

    @staticmethod
    def _has_parent_cycle(node: TreeNode) -> bool:
        visited = {id(node)}
        for ancestor in node.ancestors():
            if id(ancestor) in visited:
                return True
            visited.add(id(ancestor))
        return False

    def assert_consistent(self) -> None:
        """Raise AssertionError describing every problem found."""
        problems = self.find_problems()
        if problems:
            raise AssertionError(
                "Tree structure is inconsistent:\n  " + "\n  ".join(problems)
            )

    def payloads(self, order: TraversalOrder = TraversalOrder.DEPTH_FIRST_PRE_ORDER,
                 reverse: bool = False) -> List[Any]:
        """Payloads of the subtree in the given order."""
        return [node.payload for node in self.root.iter_descendants(order, reverse=reverse)]

    def outline(self, indent: str = "  ") -> str:
        """Render the subtree as an indented outline of payloads."""
        lines = []
        for node, depth in TraversalPlan(TraversalOrder.DEPTH_FIRST_PRE_ORDER).execute(self.root):
            lines.append(f"{indent * depth}{node.payload}")
        return "\n".join(lines)
