"""BSTreeLib - Comparator-driven binary search trees.

BSTreeLib provides a generic binary search tree that orders payloads with a
user-supplied three-way comparator, or acts as a left-filling unordered
container when no comparator is given.

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Building and mutating trees:
    from bstreelib.sync import BinarySearchTree, TreeConfig

Parallel predicate search:
    from bstreelib.aio import where_async
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.3.0"

from . import sync
from . import aio

from .sync import (
    BinarySearchTree,
    TreeConfig,
    DuplicatePolicy,
    DuplicateRejectedError,
)

__all__ = [
    "__version__",
    "sync",
    "aio",
    "BinarySearchTree",
    "TreeConfig",
    "DuplicatePolicy",
    "DuplicateRejectedError",
]
