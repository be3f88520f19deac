"""BinarySearchTree facade for BSTreeLib.

The tree owns the root node and the TreeConfig. All recursive work is
delegated to BinarySearchTreeNode; this class only decides which node
operation to call and keeps the root slot up to date.
"""

from typing import Any, Callable, Iterable, Iterator, List, Optional

from ..._common.config import SearchConfig, TreeConfig
from ..._common.errors import ConfigurationError
from .node import BinarySearchTreeNode
from .traverser import (
    InOrderTraverser,
    PostOrderTraverser,
    PreOrderTraverser,
    TraversalCursor,
)


class BinarySearchTree:
    """A comparator-driven binary search tree.

    With a comparator the tree keeps the BST ordering (smaller or equal
    payloads to the left). Without one it is an unordered container that
    fills left-first and answers lookups by linear scan.

    The tree is not thread-safe. where_async() may run concurrently with
    other reads, but never with add() or remove().

    Example:
        >>> tree = BinarySearchTree(TreeConfig.natural())
        >>> tree.extend([5, 3, 8])
        >>> 3 in tree
        True
        >>> list(tree.in_order())
        [3, 5, 8]
    """

    def __init__(self, config: Optional[TreeConfig] = None):
        """Create an empty tree.

        Args:
            config: Comparator policy; defaults to an unordered tree

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        config = config if config is not None else TreeConfig()
        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(config_errors)

        self._config = config
        self.root = BinarySearchTreeNode()

    @property
    def config(self) -> TreeConfig:
        return self._config

    @property
    def is_empty(self) -> bool:
        return self.root.is_empty()

    # Mutation

    def add(self, value: Any) -> Any:
        """Insert a payload.

        Returns:
            The inserted payload

        Raises:
            DuplicateRejectedError: If the duplicate policy rejects value;
                the tree is left unchanged
        """
        new_node = BinarySearchTreeNode(value)
        return self.root.add(new_node, self._config)

    def extend(self, values: Iterable[Any]) -> None:
        """Add each payload in order. Stops at the first rejected one."""
        for value in values:
            self.add(value)

    def remove(self, value: Any) -> None:
        """Remove one node holding value. Does nothing if value is absent."""
        if self.is_empty:
            return

        sought = self.root.find(value, self._config)
        if sought is None:
            return

        if sought.is_root():
            sought.remove_root(self)
        else:
            sought.remove_not_root(self)

    def clear(self) -> None:
        """Drop every node, leaving an empty root."""
        self.root = BinarySearchTreeNode()

    # Lookup

    def contains(self, value: Any) -> bool:
        if self.is_empty:
            return False
        return self.root.contains(value, self._config)

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def find_node(self, value: Any) -> Optional[BinarySearchTreeNode]:
        """Return the live node holding value, or None."""
        if self.is_empty:
            return None
        return self.root.find(value, self._config)

    def minimum(self) -> Any:
        """Smallest payload, or None if empty or unordered."""
        if self.is_empty:
            return None
        node = self.root.minimum(self._config)
        return node.value if node is not None else None

    def maximum(self) -> Any:
        """Largest payload, or None if empty or unordered."""
        if self.is_empty:
            return None
        node = self.root.maximum(self._config)
        return node.value if node is not None else None

    def height(self) -> int:
        """Edge count of the longest root-to-leaf path; -1 when empty."""
        if self.is_empty:
            return -1
        return self.root.height()

    # Search

    def where(self,
              predicate: Callable[[Any], bool],
              error_policy: Optional[Any] = None) -> List[Any]:
        """Return every payload matching predicate, in post-order.

        Args:
            predicate: Function returning True for payloads to keep
            error_policy: ErrorPolicy consulted when predicate raises;
                without one the exception propagates

        Returns:
            Matching payloads
        """
        matches = []
        for value in self.post_order():
            try:
                matched = predicate(value)
            except Exception as e:
                if error_policy is None:
                    raise
                matched = error_policy.handle_sync(e, 'predicate', value)
            if matched:
                matches.append(value)
        return matches

    async def where_async(self,
                          predicate: Callable[[Any], bool],
                          search_config: Optional[SearchConfig] = None) -> List[Any]:
        """Return every payload matching predicate, searching subtrees concurrently.

        Result order is not guaranteed.
        """
        from ...aio.search import where_async

        return await where_async(self.root, predicate, search_config)

    # Traversal

    def post_order(self) -> Iterator[Any]:
        """Payloads left, right, self over the live tree."""
        return PostOrderTraverser().values(self.root)

    def pre_order(self) -> Iterator[Any]:
        return PreOrderTraverser().values(self.root)

    def in_order(self) -> Iterator[Any]:
        """Payloads in ascending order when a comparator is configured."""
        return InOrderTraverser().values(self.root)

    def cursor(self) -> TraversalCursor:
        """Post-order cursor over a private snapshot of the tree."""
        return TraversalCursor(self.root.clone())

    def __iter__(self) -> Iterator[Any]:
        # A fresh snapshot per iteration; the live tree's flags are never touched
        return self.cursor()

    def __len__(self) -> int:
        return sum(1 for _ in self.post_order())

    def __bool__(self) -> bool:
        return not self.is_empty

    # Cloning

    def clone(self) -> 'BinarySearchTree':
        """Deep copy sharing this tree's TreeConfig but no nodes."""
        duplicate = self.__class__(self._config)
        duplicate.root = self.root.clone()
        return duplicate

    def __copy__(self) -> 'BinarySearchTree':
        return self.clone()

    def __deepcopy__(self, memo) -> 'BinarySearchTree':
        return self.clone()

    def __repr__(self) -> str:
        mode = "ordered" if self._config.is_ordered else "unordered"
        if self.is_empty:
            return f"{self.__class__.__name__}({mode}, empty)"
        return f"{self.__class__.__name__}({mode}, size={len(self)})"
