"""Asynchronous implementation of BSTreeLib.

This package contains the fan-out predicate search. Trees are built and
mutated with the sync package; the coroutines here only read them.
"""

from .search import ParallelPredicateSearch, where_async as search_where_async

from .error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
    ThresholdPolicy,
)

# High-level API
from .api import (
    where_async,
    parallel_where,
    count_matches_async,
)

# Configuration (re-exported from _common)
from .config import (
    SearchConfig,
    TreeConfig,
    DuplicatePolicy,
)

__all__ = [
    # Search
    'ParallelPredicateSearch',
    'search_where_async',
    # Error policies
    'ErrorPolicy',
    'FailFastPolicy',
    'ContinueOnErrorsPolicy',
    'CollectErrorsPolicy',
    'ThresholdPolicy',
    # High-level API
    'where_async',
    'parallel_where',
    'count_matches_async',
    # Configuration
    'SearchConfig',
    'TreeConfig',
    'DuplicatePolicy',
]
