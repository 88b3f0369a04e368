"""Unit tests for identifier quoting and the quoted-name cache."""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock

import pytest

from orasql.query_builder.quoting import (
    QUOTED_COLUMN_NAMES,
    QUOTED_TABLE_NAMES,
    IdentifierQuoter,
    QuotedNameCache,
)


class TestIdentifierQuoter:
    """Test column and table name quoting."""

    @pytest.fixture
    def quoter(self):
        """Quoter with private caches."""
        return IdentifierQuoter(column_cache=QuotedNameCache(), table_cache=QuotedNameCache())

    @pytest.mark.parametrize("name", ["created_at", "id", "a", "tbl$x#1", "user_2"])
    def test_lowercase_safe_names_are_upper_cased(self, quoter, name):
        """Lower-case safe identifiers fold to their upper-case form."""
        assert quoter.quote_column_name(name) == f'"{name.upper()}"'

    def test_mixed_case_name_keeps_case(self, quoter):
        assert quoter.quote_column_name("Foo123") == '"Foo123"'

    def test_name_starting_with_digit_is_quoted_verbatim(self, quoter):
        assert quoter.quote_column_name("1abc") == '"1abc"'

    def test_embedded_double_quotes_are_removed(self, quoter):
        assert quoter.quote_column_name('a"b') == '"ab"'

    def test_upper_case_name_is_quoted_as_is(self, quoter):
        assert quoter.quote_column_name("CREATED_AT") == '"CREATED_AT"'

    def test_non_string_names_are_converted(self, quoter):
        assert quoter.quote_column_name(42) == '"42"'

    def test_plain_table_name(self, quoter):
        assert quoter.quote_table_name("posts") == '"POSTS"'

    def test_schema_qualified_table_with_dblink(self, quoter):
        assert quoter.quote_table_name("schema.table@link") == '"SCHEMA"."TABLE"@"LINK"'

    def test_table_with_dblink_only(self, quoter):
        assert quoter.quote_table_name("posts@remote") == '"POSTS"@"REMOTE"'

    def test_table_segments_are_quoted_independently(self, quoter):
        assert quoter.quote_table_name("hr.Employees") == '"HR"."Employees"'

    def test_repeated_quoting_returns_cached_string(self, quoter):
        """A cache hit returns the very string stored on the first call."""
        first = quoter.quote_column_name("title")
        second = quoter.quote_column_name("title")
        assert first == second == '"TITLE"'
        assert first is second

    def test_table_quoting_fills_both_caches(self, quoter):
        quoter.quote_table_name("hr.posts")
        assert "hr.posts" in quoter.table_cache
        assert "hr" in quoter.column_cache
        assert "posts" in quoter.column_cache

    def test_default_quoter_uses_shared_caches(self):
        quoter = IdentifierQuoter()
        assert quoter.column_cache is QUOTED_COLUMN_NAMES
        assert quoter.table_cache is QUOTED_TABLE_NAMES


class TestQuotedNameCache:
    """Test the concurrency-safe cache."""

    def test_compute_runs_once_per_name(self):
        cache = QuotedNameCache()
        compute = Mock(side_effect=lambda name: f'"{name.upper()}"')

        assert cache.fetch("title", compute) == '"TITLE"'
        assert cache.fetch("title", compute) == '"TITLE"'
        compute.assert_called_once_with("title")

    def test_first_insert_wins(self):
        cache = QuotedNameCache()
        cache.fetch("title", lambda name: "first")
        assert cache.fetch("title", lambda name: "second") == "first"
        assert cache.get("title") == "first"

    def test_bounded_cache_stops_storing_but_still_quotes(self):
        cache = QuotedNameCache(max_entries=2)
        quoter = IdentifierQuoter(column_cache=cache, table_cache=QuotedNameCache())

        quoter.quote_column_name("a")
        quoter.quote_column_name("b")
        assert quoter.quote_column_name("c") == '"C"'

        assert len(cache) == 2
        assert "c" not in cache

    def test_clear(self):
        cache = QuotedNameCache()
        cache.fetch("a", str.upper)
        cache.clear()
        assert len(cache) == 0
        assert cache.get("a") is None

    def test_concurrent_quoting_is_consistent(self):
        """Threads racing on the same names all see one stable quoted form."""
        cache = QuotedNameCache()
        quoter = IdentifierQuoter(column_cache=cache, table_cache=QuotedNameCache())
        names = [f"column_{i}" for i in range(50)]

        def quote_all(_):
            return [quoter.quote_column_name(name) for name in names]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(quote_all, range(16)))

        expected = [f'"{name.upper()}"' for name in names]
        assert all(result == expected for result in results)
        assert len(cache) == len(names)
