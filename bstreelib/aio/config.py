"""Configuration re-export for the aio package."""

from .._common.config import (
    SearchConfig,
    TreeConfig,
    DuplicatePolicy,
)

__all__ = [
    'SearchConfig',
    'TreeConfig',
    'DuplicatePolicy',
]
