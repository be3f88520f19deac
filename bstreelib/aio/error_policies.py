"""
Error handling policies for BSTreeLib predicate searches.

This module provides a flexible error handling system through the Policy pattern,
allowing users to decide what happens when a user predicate raises while a tree
is being searched.
"""

from abc import ABC, abstractmethod
from typing import Any
import sys


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement different strategies for handling errors raised
    by predicates during where() and where_async().
    """

    @abstractmethod
    def handle_sync(self, error: Exception, method_name: str, value: Any, *args, **kwargs) -> Any:
        """
        Handle an error raised while evaluating a payload.

        Args:
            error: The exception that was raised
            method_name: What failed (e.g., 'predicate')
            value: The payload being evaluated when the error occurred
            *args: Additional positional arguments from the failed call
            **kwargs: Additional keyword arguments from the failed call

        Returns:
            The result to use in place of the failed call (False means
            "no match"), or re-raises the exception to stop the search.
        """
        pass

    async def handle(self, error: Exception, method_name: str, value: Any, *args, **kwargs) -> Any:
        """
        Handle an error from inside the event loop.

        Policies keep their state on the event loop thread, so the default
        simply delegates to handle_sync().
        """
        return self.handle_sync(error, method_name, value, *args, **kwargs)

    @staticmethod
    def _record(error: Exception, method_name: str, value: Any) -> dict:
        return {
            'value': value,
            'method': method_name,
            'error': error,
            'error_type': type(error).__name__,
            'error_message': str(error)
        }


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error, stopping the search.

    This is the default behavior. Useful when a failing predicate means
    the result would be wrong rather than merely incomplete.
    """

    def handle_sync(self, error: Exception, method_name: str, value: Any, *args, **kwargs) -> Any:
        """Re-raise the error immediately."""
        raise error


class ContinueOnErrorsPolicy(ErrorPolicy):
    """
    Policy that reports errors and continues the search.

    The failing payload is treated as a non-match. Errors are collected
    for later inspection.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when errors occur
        """
        self.errors = []
        self.skipped_values = []
        self.verbose = verbose

    def handle_sync(self, error: Exception, method_name: str, value: Any, *args, **kwargs) -> Any:
        """Record the error and treat the payload as a non-match."""
        self.errors.append(self._record(error, method_name, value))
        self.skipped_values.append(value)

        if self.verbose:
            print(f"\nWARNING: Error in {method_name} for {value!r}: {error}", file=sys.stderr)

        return False

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        by_type = {}
        for record in self.errors:
            by_type[record['error_type']] = by_type.get(record['error_type'], 0) + 1
        return {
            'total_errors': len(self.errors),
            'errors_by_type': by_type,
            'skipped_values': len(self.skipped_values),
            'errors': self.errors  # Full error details
        }


class CollectErrorsPolicy(ContinueOnErrorsPolicy):
    """
    Policy that collects all errors without printing, for batch processing.

    Useful for collecting all errors and presenting them at the end.
    """

    def __init__(self):
        super().__init__(verbose=False)


class ThresholdPolicy(ErrorPolicy):
    """
    Policy that tolerates errors up to a threshold, then fails fast.

    Useful when a few bad payloads are expected but many failures
    indicate a broken predicate.
    """

    def __init__(self, max_errors: int = 10, verbose: bool = True):
        """
        Initialize threshold policy.

        Args:
            max_errors: Maximum errors to tolerate before failing
            verbose: If True, print warnings for errors
        """
        self.max_errors = max_errors
        self.error_count = 0
        self.verbose = verbose
        self.errors = []

    def handle_sync(self, error: Exception, method_name: str, value: Any, *args, **kwargs) -> Any:
        """Treat the payload as a non-match if under threshold, otherwise raise."""
        self.error_count += 1
        self.errors.append(error)

        if self.error_count > self.max_errors:
            raise RuntimeError(f"Error threshold exceeded ({self.max_errors} errors)") from error

        if self.verbose:
            print(f"\nWARNING [{self.error_count}/{self.max_errors}]: Error in {method_name} for {value!r}: {error}",
                  file=sys.stderr)

        return False

    def get_statistics(self) -> dict:
        return {
            'total_errors': self.error_count,
            'max_errors': self.max_errors,
            'remaining': max(self.max_errors - self.error_count, 0),
        }
