"""Node algorithms for BSTreeLib.

The node carries the whole recursive algorithm set of the tree: placement,
lookup, four-case removal, minimum/maximum descent, structural cloning and
the resumable post-order ``iterate`` protocol. The tree facade only owns the
root and the configuration, and delegates everything else here.

Children are owned by their parent. The parent link is a weak reference:
it is used for upward traversal and removal bookkeeping only, so a removed
subtree is released as soon as nothing else refers to it.
"""

import copy
import weakref
from typing import Any, Callable, Iterator, Optional, TYPE_CHECKING

from ..._common.config import TreeConfig
from ..._common.errors import DuplicateRejectedError
from ..._common.sentinel import EMPTY

if TYPE_CHECKING:
    from .tree import BinarySearchTree


def clone_payload(value: Any) -> Any:
    """Copy a payload through its own cloning contract.

    Payloads exposing a ``clone()`` method are copied with it; anything
    else goes through ``copy.deepcopy``.
    """
    if value is EMPTY:
        return value
    clone = getattr(value, 'clone', None)
    if callable(clone):
        return clone()
    return copy.deepcopy(value)


class BinarySearchTreeNode:
    """A node in a binary search tree.

    Attributes:
        value: The payload, or EMPTY for the placeholder root of an empty tree
        left: Exclusively owned left child, or None
        right: Exclusively owned right child, or None
        visited: Transient flag driving iterate(); meaningless outside a traversal
    """

    __slots__ = ('value', 'left', 'right', 'visited', '_parent', '__weakref__')

    def __init__(self, value: Any = EMPTY, parent: Optional['BinarySearchTreeNode'] = None):
        self.value = value
        self.left: Optional[BinarySearchTreeNode] = None
        self.right: Optional[BinarySearchTreeNode] = None
        self.visited = False
        self._parent: Optional[weakref.ref] = None
        self.parent = parent

    @property
    def parent(self) -> Optional['BinarySearchTreeNode']:
        """The enclosing node, or None for the root."""
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node: Optional['BinarySearchTreeNode']) -> None:
        self._parent = weakref.ref(node) if node is not None else None

    def is_root(self) -> bool:
        return self.parent is None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def is_empty(self) -> bool:
        """True for the placeholder root of an empty tree."""
        return self.value is EMPTY

    def is_left_child_of_parent(self) -> bool:
        parent = self.parent
        return parent is not None and parent.left is self

    def depth(self) -> int:
        """Number of parent links between this node and the root."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def height(self) -> int:
        """Edge count of the longest downward path; 0 for a leaf."""
        height = 0
        stack = [(self, 0)]
        while stack:
            node, level = stack.pop()
            height = max(height, level)
            if node.left is not None:
                stack.append((node.left, level + 1))
            if node.right is not None:
                stack.append((node.right, level + 1))
        return height

    # Insertion

    def add(self, new_node: 'BinarySearchTreeNode', config: TreeConfig) -> Any:
        """Place new_node beneath this node.

        An empty root adopts the payload in place instead of linking
        new_node. Without a comparator the first free slot is taken
        left-first, continuing down the left child when both are full.
        With a comparator, payloads not greater than a node go left and
        greater ones go right.

        Args:
            new_node: Detached node carrying the payload to insert
            config: Tree configuration

        Returns:
            The inserted payload

        Raises:
            DuplicateRejectedError: If duplicates are not allowed and a
                comparator-equal payload already exists under this node
        """
        if self.is_root() and self.is_empty():
            self.value = new_node.value
            return self.value

        node = self
        if not config.is_ordered:
            while True:
                if node.left is None:
                    node._attach_left(new_node)
                    break
                if node.right is None:
                    node._attach_right(new_node)
                    break
                node = node.left
            return new_node.value

        if not config.allows_duplicates and self.contains(new_node.value, config):
            raise DuplicateRejectedError(new_node.value)

        while True:
            if config.compare(new_node.value, node.value) <= 0:
                if node.left is None:
                    node._attach_left(new_node)
                    break
                node = node.left
            else:
                if node.right is None:
                    node._attach_right(new_node)
                    break
                node = node.right
        return new_node.value

    def _attach_left(self, child: 'BinarySearchTreeNode') -> None:
        child.parent = self
        self.left = child

    def _attach_right(self, child: 'BinarySearchTreeNode') -> None:
        child.parent = self
        self.right = child

    # Lookup

    def contains(self, value: Any, config: TreeConfig) -> bool:
        """Check whether value is stored under this node.

        Uses binary descent with a comparator and a post-order scan
        with ``==`` without one.
        """
        if not config.is_ordered:
            return self.traversal_contains(lambda state: state == value)
        return self.find(value, config) is not None

    def traversal_contains(self, predicate: Callable[[Any], bool]) -> bool:
        """Post-order scan; True as soon as predicate matches a payload."""
        for node in self.iter_post_order():
            if not node.is_empty() and predicate(node.value):
                return True
        return False

    def find(self, value: Any, config: TreeConfig) -> Optional['BinarySearchTreeNode']:
        """Find the node holding value.

        Returns:
            The first matching node, or None if value is not present
        """
        if not config.is_ordered:
            for node in self.iter_post_order():
                if not node.is_empty() and node.value == value:
                    return node
            return None

        node = self
        while node is not None and not node.is_empty():
            order = config.compare(value, node.value)
            if order == 0:
                return node
            # greater values live to the right
            node = node.right if order > 0 else node.left
        return None

    def minimum(self, config: TreeConfig) -> Optional['BinarySearchTreeNode']:
        """Leftmost node of this subtree; None without a comparator."""
        if not config.is_ordered:
            return None
        node = self
        while node.left is not None:
            node = node.left
        return node

    def maximum(self, config: TreeConfig) -> Optional['BinarySearchTreeNode']:
        """Rightmost node of this subtree; None without a comparator."""
        if not config.is_ordered:
            return None
        node = self
        while node.right is not None:
            node = node.right
        return node

    def get_a_leaf(self) -> 'BinarySearchTreeNode':
        """Follow right children first, then left, down to a leaf."""
        node = self
        while not node.is_leaf():
            node = node.right if node.right is not None else node.left
        return node

    # Removal

    def remove_root(self, tree: 'BinarySearchTree') -> None:
        """Remove this node, which must be the tree's root.

        The root cannot be unlinked from a parent, so a lone root has its
        payload cleared and a root with one child hands the root slot of
        the tree to that child.
        """
        if self.is_leaf():
            self.value = EMPTY
            return

        if self.right is None:
            child = self.left
            self.left = None
            child.parent = None
            tree.root = child
            return

        if self.left is None:
            child = self.right
            self.right = None
            child.parent = None
            tree.root = child
            return

        self._take_replacement_value(tree)

    def remove_not_root(self, tree: 'BinarySearchTree') -> None:
        """Remove this node, which must have a parent."""
        parent = self.parent

        if self.is_leaf():
            parent._replace_child(self, None)
            self.parent = None
            return

        if self.left is None:
            child = self.right
            parent._replace_child(self, child)
            child.parent = parent
            self.right = None
            self.parent = None
            return

        if self.right is None:
            child = self.left
            parent._replace_child(self, child)
            child.parent = parent
            self.left = None
            self.parent = None
            return

        self._take_replacement_value(tree)

    def _take_replacement_value(self, tree: 'BinarySearchTree') -> None:
        """Two-children case: pull a payload up from below and drop its node.

        Without a comparator any leaf will do; the leaf is chosen from the
        tree's root, not from this node. With a comparator the minimum of
        the right subtree is used; it has no left child, so removing it
        never comes back here.
        """
        if not tree.config.is_ordered:
            victim = tree.root.get_a_leaf()
            self.value = victim.value
            victim.parent._replace_child(victim, None)
            victim.parent = None
            return

        candidate = self.right.minimum(tree.config)
        self.value = candidate.value
        candidate.remove_not_root(tree)

    def _replace_child(self, child: 'BinarySearchTreeNode',
                       replacement: Optional['BinarySearchTreeNode']) -> None:
        if self.left is child:
            self.left = replacement
        elif self.right is child:
            self.right = replacement
        else:
            raise RuntimeError('Replaced child does not exist in parent')

    # Cloning

    def clone(self, parent: Optional['BinarySearchTreeNode'] = None) -> 'BinarySearchTreeNode':
        """Deep-copy this subtree.

        Every payload is copied with clone_payload and every parent link
        points into the new subtree. Visited flags start cleared.

        Args:
            parent: Parent for the copy of this node (None for a new root)

        Returns:
            Root of the copied subtree
        """
        root_copy = BinarySearchTreeNode(clone_payload(self.value), parent)
        stack = [(self, root_copy)]
        while stack:
            original, duplicate = stack.pop()
            if original.left is not None:
                duplicate.left = BinarySearchTreeNode(clone_payload(original.left.value), duplicate)
                stack.append((original.left, duplicate.left))
            if original.right is not None:
                duplicate.right = BinarySearchTreeNode(clone_payload(original.right.value), duplicate)
                stack.append((original.right, duplicate.right))
        return root_copy

    # Traversal

    def iter_post_order(self) -> Iterator['BinarySearchTreeNode']:
        """Yield nodes of this subtree left, right, self without touching flags."""
        stack = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def iterate(self) -> Optional['BinarySearchTreeNode']:
        """Advance the post-order walk by one step.

        Descends into the deepest unvisited node below, or climbs to the
        parent once this node and both children are visited. The node
        returned is marked visited.

        Returns:
            The next node in post-order, or None after the root is done
        """
        node = self
        while True:
            if node.left is not None and not node.left.visited:
                node = node.left
            elif node.right is not None and not node.right.visited:
                node = node.right
            elif node.visited:
                node = node.parent
                if node is None:
                    return None
            else:
                node.visited = True
                return node

    def clear_visited(self) -> None:
        """Reset the visited flag on every node of this subtree (pre-order)."""
        stack = [self]
        while stack:
            node = stack.pop()
            node.visited = False
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(value={self.value!r}, "
                f"left={self.left is not None}, right={self.right is not None})")
