"""Utility functions and helpers for orasql."""

from orasql.utils.decorators import (
    retry,
    retry_with_backoff,
    traced,
)

__all__ = [
    "retry",
    "retry_with_backoff",
    "traced",
]
