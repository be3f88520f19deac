"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code that is identical between
both implementations. It should NOT be imported directly by users.

Components here include:
- Configuration classes (TreeConfig, SearchConfig)
- The exception hierarchy
- The EMPTY payload marker

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .config import (
    Comparator,
    DuplicatePolicy,
    TreeConfig,
    SearchConfig,
    natural_order,
    key_order,
)
from .errors import (
    BSTreeError,
    DuplicateRejectedError,
    ConfigurationError,
)
from .sentinel import EMPTY

__all__ = [
    'Comparator',
    'DuplicatePolicy',
    'TreeConfig',
    'SearchConfig',
    'natural_order',
    'key_order',
    'BSTreeError',
    'DuplicateRejectedError',
    'ConfigurationError',
    'EMPTY',
]
