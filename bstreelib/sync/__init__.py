"""Synchronous implementation of BSTreeLib.

This package contains the tree itself: nodes, traversers, the tree
facade and the functional helpers. All components here operate in a
blocking, synchronous manner.
"""

# Core components
from .core.node import BinarySearchTreeNode, clone_payload
from .core.traverser import (
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    BreadthFirstTraverser,
    TraversalCursor,
    create_traverser,
)
from .core.tree import BinarySearchTree

# Configuration
from .config import (
    Comparator,
    DuplicatePolicy,
    TreeConfig,
    SearchConfig,
    natural_order,
    key_order,
)
from .._common.errors import (
    BSTreeError,
    DuplicateRejectedError,
    ConfigurationError,
)
from .._common.sentinel import EMPTY

# High-level API
from .api import (
    build_tree,
    count_nodes,
    find_values,
    get_leaf_values,
    get_tree_stats,
)

__all__ = [
    # Core
    'BinarySearchTreeNode',
    'clone_payload',
    'TreeTraverser',
    'PreOrderTraverser',
    'InOrderTraverser',
    'PostOrderTraverser',
    'BreadthFirstTraverser',
    'TraversalCursor',
    'create_traverser',
    'BinarySearchTree',
    # Config
    'Comparator',
    'DuplicatePolicy',
    'TreeConfig',
    'SearchConfig',
    'natural_order',
    'key_order',
    # Errors
    'BSTreeError',
    'DuplicateRejectedError',
    'ConfigurationError',
    'EMPTY',
    # API
    'build_tree',
    'count_nodes',
    'find_values',
    'get_leaf_values',
    'get_tree_stats',
]
