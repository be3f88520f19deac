"""High-level async API for BSTreeLib.

This module provides simple, user-friendly async functions for common
search operations on one or more trees.
"""

import asyncio
from typing import Any, Callable, Dict, List, Optional, Sequence

from .._common.config import SearchConfig
from ..sync.core.tree import BinarySearchTree
from .search import where_async as _where_async


async def where_async(
    tree: BinarySearchTree,
    predicate: Callable[[Any], bool],
    max_concurrent: Optional[int] = None,
    use_threads: bool = True,
    error_policy: Optional[Any] = None
) -> List[Any]:
    """Search a tree with the parallel fan-out search.

    Args:
        tree: Tree to search
        predicate: Function returning True for payloads to collect
        max_concurrent: Maximum predicate evaluations in flight
        use_threads: Run predicates on a worker pool
        error_policy: ErrorPolicy for failing predicates

    Returns:
        Matching payloads, in no particular order

    Example:
        >>> evens = await where_async(tree, lambda v: v % 2 == 0)
    """
    config = SearchConfig(
        max_concurrent=max_concurrent,
        use_threads=use_threads,
        error_policy=error_policy
    )
    return await _where_async(tree.root, predicate, config)


async def parallel_where(
    trees: Sequence[BinarySearchTree],
    predicate: Callable[[Any], bool],
    search_config: Optional[SearchConfig] = None
) -> Dict[int, List[Any]]:
    """Search several trees in parallel.

    Args:
        trees: Trees to search
        predicate: Function returning True for payloads to collect
        search_config: Scheduling options applied to each search

    Returns:
        Dictionary mapping each tree's position in trees to its matches
    """
    tasks = [_where_async(tree.root, predicate, search_config) for tree in trees]
    results = await asyncio.gather(*tasks)

    return dict(enumerate(results))


async def count_matches_async(
    tree: BinarySearchTree,
    predicate: Callable[[Any], bool],
    search_config: Optional[SearchConfig] = None
) -> int:
    """Count payloads satisfying predicate using the parallel search."""
    matches = await _where_async(tree.root, predicate, search_config)
    return len(matches)
