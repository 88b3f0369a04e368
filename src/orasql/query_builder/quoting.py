"""Identifier quoting for the Oracle dialect.

Oracle folds unquoted identifiers to upper case and matches them
case-insensitively, while a double-quoted identifier is matched exactly.
Identifiers made only of lower-case safe characters are therefore
upper-cased inside the quotes, which round-trips to the same object as
the unquoted name. Anything else is quoted verbatim so mixed case and
symbols are preserved.

Quoted forms are memoized in :class:`QuotedNameCache`.
"""

import re
import threading
from typing import Any, Callable, Dict, Optional

from orasql.logging import get_logger

logger = get_logger(__name__)

_LOWERCASE_SAFE = re.compile(r"[a-z][a-z_0-9$#]*")


class QuotedNameCache:
    """Concurrency-safe, append-only map of raw name to quoted name.

    Lookups and inserts are guarded by a lock, the quoting function runs
    outside it. Two threads racing on the same name both compute the same
    string and the first insert wins, so a stored entry never changes.

    When ``max_entries`` is set and the cache is full, new names are still
    quoted but not stored.
    """

    def __init__(self, max_entries: Optional[int] = None):
        self._entries: Dict[str, str] = {}
        self._lock = threading.Lock()
        self.max_entries = max_entries

    def get(self, name: str) -> Optional[str]:
        with self._lock:
            return self._entries.get(name)

    def fetch(self, name: str, compute: Callable[[str], str]) -> str:
        """Return the cached quoted form of ``name``, computing it on a miss."""
        with self._lock:
            quoted = self._entries.get(name)
        if quoted is not None:
            return quoted

        quoted = compute(name)
        with self._lock:
            if name in self._entries:
                return self._entries[name]
            if self.max_entries is None or len(self._entries) < self.max_entries:
                self._entries[name] = quoted
        return quoted

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._entries


# Process-wide caches shared by every builder that is not given its own
QUOTED_COLUMN_NAMES = QuotedNameCache()
QUOTED_TABLE_NAMES = QuotedNameCache()


def _quote_column_name(name: str) -> str:
    if _LOWERCASE_SAFE.fullmatch(name):
        # all upper case is the one form where double quotes are meaningless
        return f'"{name.upper()}"'
    # double quotes cannot appear inside a quoted identifier
    return '"{}"'.format(name.replace('"', ''))


class IdentifierQuoter:
    """Quotes column and table identifiers.

    Args:
        column_cache: Cache for column names, the shared process-wide one by default
        table_cache: Cache for table names, the shared process-wide one by default

    Example:
        >>> quoter = IdentifierQuoter()
        >>> quoter.quote_column_name("created_at")
        '"CREATED_AT"'
        >>> quoter.quote_table_name("hr.employees@remote")
        '"HR"."EMPLOYEES"@"REMOTE"'
    """

    def __init__(
        self,
        column_cache: Optional[QuotedNameCache] = None,
        table_cache: Optional[QuotedNameCache] = None,
    ):
        self.column_cache = column_cache if column_cache is not None else QUOTED_COLUMN_NAMES
        self.table_cache = table_cache if table_cache is not None else QUOTED_TABLE_NAMES

    def quote_column_name(self, name: Any) -> str:
        """Quote a single identifier (column, sequence, index or table atom)."""
        return self.column_cache.fetch(str(name), _quote_column_name)

    def quote_table_name(self, name: Any) -> str:
        """Quote a possibly schema-qualified, possibly remote table name.

        Supports ``table``, ``schema.table``, ``table@dblink`` and
        ``schema.table@dblink``; every atom is quoted on its own.
        """
        return self.table_cache.fetch(str(name), self._quote_table_name)

    def _quote_table_name(self, name: str) -> str:
        quoted = ".".join(
            "@".join(self.quote_column_name(atom) for atom in part.split("@"))
            for part in name.split(".")
        )
        logger.debug("Quoted table name", extra={"raw_name": name, "quoted_name": quoted})
        return quoted
