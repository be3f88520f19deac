"""High-level API for BSTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the object-oriented API for ease of
use in simple cases.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from .config import Comparator, DuplicatePolicy, TreeConfig
from .core.traverser import BreadthFirstTraverser, PreOrderTraverser, create_traverser
from .core.tree import BinarySearchTree


def build_tree(
    values: Iterable[Any],
    comparator: Optional[Comparator] = None,
    allow_duplicates: bool = True
) -> BinarySearchTree:
    """Build a tree from an iterable of payloads.

    Args:
        values: Payloads to add, in insertion order
        comparator: Three-way ordering function (None = unordered fill)
        allow_duplicates: Whether comparator-equal payloads may coexist

    Returns:
        The populated tree

    Example:
        >>> tree = build_tree([5, 3, 8], comparator=lambda a, b: a - b)
        >>> list(tree.in_order())
        [3, 5, 8]
    """
    config = TreeConfig(
        comparator=comparator,
        duplicates=DuplicatePolicy.ALLOWED if allow_duplicates else DuplicatePolicy.NOT_ALLOWED
    )
    tree = BinarySearchTree(config)
    tree.extend(values)
    return tree


def count_nodes(tree: BinarySearchTree) -> int:
    """Count stored payloads (an empty root counts as zero)."""
    return len(tree)


def find_values(
    tree: BinarySearchTree,
    predicate: Callable[[Any], bool],
    strategy: str = 'post',
    max_depth: Optional[int] = None,
    min_depth: int = 0
) -> Iterator[Any]:
    """Lazily yield payloads that match a predicate.

    Args:
        tree: Tree to search
        predicate: Function that returns True for matching payloads
        strategy: Traversal order (pre, in, post, bfs)
        max_depth: Deepest level to visit (None = unlimited)
        min_depth: Shallowest level to test; the root is level 0

    Yields:
        Matching payloads in traversal order
    """
    for value in create_traverser(strategy).values(tree.root, max_depth, min_depth):
        if predicate(value):
            yield value


def get_leaf_values(tree: BinarySearchTree) -> List[Any]:
    """Payloads of leaf nodes, left to right."""
    if tree.is_empty:
        return []
    return [node.value for node, _ in PreOrderTraverser().traverse(tree.root)
            if node.is_leaf()]


def get_tree_stats(tree: BinarySearchTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        tree: Tree to inspect

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(tree)
        >>> print(f"Total nodes: {stats['total_nodes']}")
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {},
        'ordered': tree.config.is_ordered,
        'minimum': tree.minimum(),
        'maximum': tree.maximum(),
    }

    if not tree.is_empty:
        for node, depth in BreadthFirstTraverser().traverse(tree.root):
            stats['total_nodes'] += 1

            if node.is_leaf():
                stats['leaf_nodes'] += 1

            stats['max_depth'] = max(stats['max_depth'], depth)

            if depth not in stats['depths']:
                stats['depths'][depth] = 0
            stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    # A chain has one node per level; a perfect tree doubles each level
    stats['degenerate'] = (
        stats['total_nodes'] > 2 and
        stats['max_depth'] == stats['total_nodes'] - 1
    )

    return stats
