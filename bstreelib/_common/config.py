"""Configuration system for BSTreeLib.

This module defines how users describe a tree: how payloads are ordered,
whether comparator-equal payloads may coexist, and how the parallel
predicate search is scheduled.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional


Comparator = Callable[[Any, Any], int]


class DuplicatePolicy(Enum):
    """Whether two comparator-equal payloads may coexist in a tree."""
    ALLOWED = "allowed"
    NOT_ALLOWED = "not_allowed"


def natural_order(first: Any, second: Any) -> int:
    """Three-way comparison using the payloads' own ``<`` and ``>``.

    Returns:
        Negative if first < second, zero if equal, positive otherwise
    """
    return (first > second) - (first < second)


def key_order(key: Callable[[Any], Any]) -> Comparator:
    """Build a three-way comparator that orders payloads by ``key(payload)``."""
    def _compare(first: Any, second: Any) -> int:
        return natural_order(key(first), key(second))
    _compare.__name__ = f"key_order({getattr(key, '__name__', 'key')})"
    return _compare


@dataclass(frozen=True)
class TreeConfig:
    """Comparator policy for a binary search tree.

    The comparator follows the usual three-way convention: negative when
    the first argument sorts before the second, zero when they are equal,
    positive otherwise. Smaller-or-equal payloads are placed to the left,
    greater payloads to the right.

    Without a comparator the tree is an unordered container: nodes fill
    left-biased and lookups fall back to a linear scan using ``==``.

    Instances are immutable and shared by reference between a tree and
    every clone made from it.
    """

    comparator: Optional[Comparator] = None
    duplicates: DuplicatePolicy = DuplicatePolicy.ALLOWED

    @property
    def is_ordered(self) -> bool:
        """True when a comparator is configured."""
        return self.comparator is not None

    @property
    def allows_duplicates(self) -> bool:
        return self.duplicates is DuplicatePolicy.ALLOWED

    def compare(self, first: Any, second: Any) -> int:
        """Apply the configured comparator.

        Raises:
            TypeError: If no comparator is configured
        """
        if self.comparator is None:
            raise TypeError("TreeConfig has no comparator")
        return self.comparator(first, second)

    # Convenience constructors for common configurations

    @classmethod
    def unordered(cls) -> 'TreeConfig':
        """Create config for a left-fill unordered container."""
        return cls(comparator=None)

    @classmethod
    def natural(cls, allow_duplicates: bool = True) -> 'TreeConfig':
        """Create config ordering payloads by their natural ordering.

        Args:
            allow_duplicates: Whether equal payloads may coexist

        Returns:
            TreeConfig using natural_order
        """
        return cls(
            comparator=natural_order,
            duplicates=_policy_for(allow_duplicates)
        )

    @classmethod
    def by_key(cls, key: Callable[[Any], Any], allow_duplicates: bool = True) -> 'TreeConfig':
        """Create config ordering payloads by a key function.

        Args:
            key: Function extracting a comparable key from a payload
            allow_duplicates: Whether payloads with equal keys may coexist

        Returns:
            TreeConfig using key_order(key)
        """
        return cls(
            comparator=key_order(key),
            duplicates=_policy_for(allow_duplicates)
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.comparator is not None and not callable(self.comparator):
            errors.append("comparator must be callable")

        if not isinstance(self.duplicates, DuplicatePolicy):
            errors.append(
                f"duplicates must be a DuplicatePolicy, got {self.duplicates!r}"
            )

        return errors


def _policy_for(allow_duplicates: bool) -> DuplicatePolicy:
    if allow_duplicates:
        return DuplicatePolicy.ALLOWED
    return DuplicatePolicy.NOT_ALLOWED


@dataclass
class SearchConfig:
    """Configuration for the parallel predicate search."""

    max_concurrent: Optional[int] = None   # Cap on in-flight predicate calls
    use_threads: bool = True               # Run predicates on a worker pool
    num_workers: Optional[int] = None      # Worker pool size (None = executor default)
    error_policy: Optional[Any] = None     # ErrorPolicy; None = fail fast

    @classmethod
    def inline(cls) -> 'SearchConfig':
        """Create config that evaluates predicates on the event loop thread.

        Suited to cheap predicates where thread hand-off would dominate.
        """
        return cls(use_threads=False)

    @classmethod
    def bounded(cls, max_concurrent: int = 8, num_workers: Optional[int] = None) -> 'SearchConfig':
        """Create config limiting how many predicates run at once.

        Args:
            max_concurrent: Maximum predicate evaluations in flight
            num_workers: Worker pool size

        Returns:
            SearchConfig with a concurrency bound
        """
        return cls(
            max_concurrent=max_concurrent,
            num_workers=num_workers if num_workers is not None else max_concurrent
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.max_concurrent is not None and self.max_concurrent <= 0:
            errors.append("max_concurrent must be positive")

        if self.num_workers is not None and self.num_workers <= 0:
            errors.append("num_workers must be positive")

        if self.num_workers is not None and not self.use_threads:
            errors.append("num_workers requires use_threads")

        if self.error_policy is not None and not hasattr(self.error_policy, 'handle'):
            errors.append("error_policy must provide a handle() method")

        return errors
