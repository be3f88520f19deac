"""Core building blocks: the node algorithms, traversers and the tree facade."""

from .node import BinarySearchTreeNode, clone_payload
from .traverser import (
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    BreadthFirstTraverser,
    TraversalCursor,
    create_traverser,
)
from .tree import BinarySearchTree

__all__ = [
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
]
