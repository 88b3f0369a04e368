"""Protocol definitions for orasql.

Protocols provide type-safe interfaces without requiring inheritance,
following Python's structural subtyping (duck typing with type hints).
"""

from .providers import Executor, SchemaIntrospector

__all__ = [
    "Executor",
    "SchemaIntrospector",
]
