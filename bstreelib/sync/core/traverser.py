"""Tree traversal strategies for BSTreeLib.

Traversers implement different orders for walking a node graph. None of
them touch node state. The TraversalCursor is the exception by design: it
drives the resumable ``iterate`` protocol and therefore owns the visited
flags of the snapshot it walks.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, Iterator, List, Optional, Tuple

from ..._common.sentinel import EMPTY
from .node import BinarySearchTreeNode


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    @abstractmethod
    def traverse(self,
                 root: BinarySearchTreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BinarySearchTreeNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def values(self,
               root: BinarySearchTreeNode,
               max_depth: Optional[int] = None,
               min_depth: int = 0) -> Iterator[Any]:
        """Yield payloads in traversal order, skipping an empty root."""
        for node, _ in self.traverse(root, max_depth, min_depth):
            if node.value is not EMPTY:
                yield node.value

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth

    @staticmethod
    def _children(node: BinarySearchTreeNode) -> List[BinarySearchTreeNode]:
        return [child for child in (node.left, node.right) if child is not None]


class PreOrderTraverser(TreeTraverser):
    """Visits a node before its left and right subtrees.

    Good for copying trees: replaying the payloads through add()
    reproduces the same shape in comparator mode.
    """

    def traverse(self,
                 root: BinarySearchTreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BinarySearchTreeNode, int]]:
        stack = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)
            if self._should_explore(depth, max_depth):
                for child in reversed(self._children(node)):
                    stack.append((child, depth + 1))


class InOrderTraverser(TreeTraverser):
    """Visits left subtree, node, right subtree.

    In comparator mode this yields payloads in ascending order.
    """

    def traverse(self,
                 root: BinarySearchTreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BinarySearchTreeNode, int]]:
        stack: List[Tuple[BinarySearchTreeNode, int]] = []
        node: Optional[BinarySearchTreeNode] = root
        depth = 0
        while stack or node is not None:
            # Walk down the left spine as far as the depth limit allows
            while node is not None:
                stack.append((node, depth))
                if not self._should_explore(depth, max_depth):
                    node = None
                    break
                node = node.left
                depth += 1
            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)
            if self._should_explore(depth, max_depth):
                node, depth = node.right, depth + 1
            else:
                node = None


class PostOrderTraverser(TreeTraverser):
    """Visits left subtree, right subtree, then the node.

    Same order as the iterate() protocol, without using visited flags.
    """

    def traverse(self,
                 root: BinarySearchTreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BinarySearchTreeNode, int]]:
        stack = [(root, 0, False)]
        while stack:
            node, depth, expanded = stack.pop()
            if expanded:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue
            stack.append((node, depth, True))
            if self._should_explore(depth, max_depth):
                for child in reversed(self._children(node)):
                    stack.append((child, depth + 1, False))


class BreadthFirstTraverser(TreeTraverser):
    """Level-by-level traversal, left before right within a level."""

    def traverse(self,
                 root: BinarySearchTreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BinarySearchTreeNode, int]]:
        queue: Deque[Tuple[BinarySearchTreeNode, int]] = deque([(root, 0)])
        while queue:
            node, depth = queue.popleft()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)
            if self._should_explore(depth, max_depth):
                for child in self._children(node):
                    queue.append((child, depth + 1))


def create_traverser(strategy: str) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (pre, in, post, bfs)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'pre': PreOrderTraverser,
        'pre_order': PreOrderTraverser,
        'in': InOrderTraverser,
        'in_order': InOrderTraverser,
        'post': PostOrderTraverser,
        'post_order': PostOrderTraverser,
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower]()


class TraversalCursor:
    """Resumable post-order cursor driven by the nodes' visited flags.

    The cursor starts positioned on the start node. Each move_next() takes
    one iterate() step; the walk is over once the start node has been
    visited again. Flags are cleared on construction and by reset(), so
    the cursor must own its node graph exclusively (the tree hands it a
    private clone).

    The cursor is also a Python iterator over payloads.

    Example:
        >>> cursor = tree.cursor()
        >>> while cursor.move_next():
        ...     print(cursor.current)
    """

    def __init__(self, start: BinarySearchTreeNode):
        self._start = start
        self._current: Optional[BinarySearchTreeNode] = start
        start.clear_visited()

    @property
    def start(self) -> BinarySearchTreeNode:
        return self._start

    @property
    def node(self) -> Optional[BinarySearchTreeNode]:
        """The node the cursor is positioned on."""
        return self._current

    @property
    def current(self) -> Any:
        """Payload of the node the cursor is positioned on."""
        if self._current is None:
            return EMPTY
        return self._current.value

    @property
    def finished(self) -> bool:
        return self._current is None or self._start.visited

    def move_next(self) -> bool:
        """Advance to the next node in post-order.

        Returns:
            False once the walk has come back around to the start node
        """
        if self.finished:
            return False
        self._current = self._current.iterate()
        return self._current is not None

    def reset(self) -> None:
        """Clear every visited flag and rewind to the start node."""
        self._start.clear_visited()
        self._current = self._start

    def __iter__(self) -> 'TraversalCursor':
        return self

    def __next__(self) -> Any:
        while self.move_next():
            if self._current.value is not EMPTY:
                return self._current.value
        raise StopIteration
