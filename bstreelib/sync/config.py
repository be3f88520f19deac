"""Configuration re-export for the sync package."""

from .._common.config import (
    Comparator,
    DuplicatePolicy,
    TreeConfig,
    SearchConfig,
    natural_order,
    key_order,
)

__all__ = [
    'Comparator',
    'DuplicatePolicy',
    'TreeConfig',
    'SearchConfig',
    'natural_order',
    'key_order',
]
