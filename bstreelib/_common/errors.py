"""Exception types shared by the sync and aio implementations."""

from typing import Any, List


class BSTreeError(Exception):
    def __str__(self):
        return ''.join(map(str, self.args))


class DuplicateRejectedError(BSTreeError, ValueError):
    """Raised by add() when the duplicate policy forbids an equal payload.

    The tree is left exactly as it was before the call.
    """

    def __init__(self, value: Any):
        super().__init__(value)
        self.value = value

    def __str__(self):
        return f"duplicates are not allowed: {self.value!r}"


class ConfigurationError(BSTreeError, ValueError):
    """Raised when a TreeConfig or SearchConfig fails validation."""

    def __init__(self, errors: List[str]):
        super().__init__(*errors)
        self.errors = list(errors)

    def __str__(self):
        return "Invalid configuration: " + '; '.join(self.errors)
