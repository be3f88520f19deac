"""Test fixtures for BSTreeLib consumers.

These fixtures provide controlled access to a tree's internal structure for
testing purposes without making node layout part of the public API.
"""

from typing import Any, List, Optional, Tuple

from .._common.sentinel import EMPTY
from ..sync.core.node import BinarySearchTreeNode
from ..sync.core.tree import BinarySearchTree


Shape = Optional[Tuple[Any, 'Shape', 'Shape']]


class TreeTestHelper:
    """Public test fixture for structural verification.

    Example:
        helper = TreeTestHelper(tree)
        assert helper.check_invariants() == []
        assert helper.shape() == (5, (3, None, None), (8, None, None))
    """

    def __init__(self, tree: BinarySearchTree):
        """Initialize with the tree under test.

        Args:
            tree: The tree to inspect
        """
        self._tree = tree

    def shape(self) -> Shape:
        """Nested ``(value, left, right)`` tuples mirroring the node layout.

        Returns:
            None for an empty tree
        """
        if self._tree.is_empty:
            return None
        return self._shape(self._tree.root)

    def _shape(self, node: Optional[BinarySearchTreeNode]) -> Shape:
        if node is None:
            return None
        return (node.value, self._shape(node.left), self._shape(node.right))

    def node_count(self) -> int:
        if self._tree.is_empty:
            return 0
        return sum(1 for _ in self._tree.root.iter_post_order())

    def visited_flags(self) -> List[bool]:
        """Visited flags of the live tree in post-order."""
        return [node.visited for node in self._tree.root.iter_post_order()]

    def check_invariants(self) -> List[str]:
        """Validate parent links, ownership and ordering.

        Returns:
            List of violations (empty if the tree is consistent)
        """
        problems = []
        root = self._tree.root

        if root.parent is not None:
            problems.append("root has a parent")
        if root.value is EMPTY and not root.is_leaf():
            problems.append("empty root has children")

        seen = set()
        for node in root.iter_post_order():
            if id(node) in seen:
                problems.append(f"node {node.value!r} reachable twice")
            seen.add(id(node))

            if node is not root and node.value is EMPTY:
                problems.append("non-root node without a payload")

            for side in ('left', 'right'):
                child = getattr(node, side)
                if child is None:
                    continue
                if child.parent is not node:
                    problems.append(
                        f"{side} child {child.value!r} of {node.value!r} has wrong parent"
                    )

            if node is not root:
                parent = node.parent
                if parent is None:
                    problems.append(f"node {node.value!r} has no parent")
                elif (parent.left is node) == (parent.right is node):
                    problems.append(
                        f"node {node.value!r} is not exactly one child of its parent"
                    )

        if self._tree.config.is_ordered and not self._tree.is_empty:
            problems.extend(self._check_ordering(root))

        return problems

    def _check_ordering(self, root: BinarySearchTreeNode) -> List[str]:
        problems = []
        compare = self._tree.config.compare
        for node in root.iter_post_order():
            if node.left is not None:
                for below in node.left.iter_post_order():
                    if compare(below.value, node.value) > 0:
                        problems.append(
                            f"{below.value!r} in left subtree of {node.value!r}"
                        )
            if node.right is not None:
                for below in node.right.iter_post_order():
                    if compare(below.value, node.value) <= 0:
                        problems.append(
                            f"{below.value!r} in right subtree of {node.value!r}"
                        )
        return problems

    def assert_consistent(self) -> None:
        """Raise AssertionError listing every violated invariant."""
        problems = self.check_invariants()
        assert not problems, "; ".join(problems)
