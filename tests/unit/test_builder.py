"""Unit tests for the Oracle query builder and its factory."""

from unittest.mock import Mock, patch

import pytest

from orasql.query_builder import (
    OracleQueryBuilder,
    QueryBuilderFactory,
    QUOTED_COLUMN_NAMES,
    get_query_builder,
)
from orasql.settings import DialectSettings


class TestOracleQueryBuilder:
    """Test builder configuration and delegation."""

    @pytest.fixture
    def builder(self):
        return OracleQueryBuilder(DialectSettings())

    def test_quoting(self, builder):
        assert builder.quote_column_name("created_at") == '"CREATED_AT"'
        assert builder.quote_table_name("hr.posts") == '"HR"."POSTS"'
        assert builder.quote("it's") == "'it''s'"

    def test_shared_caches_by_default(self, builder):
        assert builder.identifiers.column_cache is QUOTED_COLUMN_NAMES

    def test_bounded_private_caches(self):
        builder = OracleQueryBuilder(DialectSettings(quote_cache_max_entries=1))
        assert builder.identifiers.column_cache is not QUOTED_COLUMN_NAMES
        assert builder.identifiers.column_cache.max_entries == 1

        builder.quote_column_name("a")
        assert builder.quote_column_name("b") == '"B"'
        assert len(builder.identifiers.column_cache) == 1

    def test_boolean_setting(self):
        builder = OracleQueryBuilder(DialectSettings(emulate_booleans=False))
        assert builder.quote(True) == "'t'"

    def test_time_zone_setting(self):
        builder = OracleQueryBuilder(DialectSettings(time_zone="Asia/Tokyo"))
        assert builder.values.tzinfo.zone == "Asia/Tokyo"

    def test_rewriting(self, builder):
        assert "ROWNUM <= 5" in builder.add_limit_offset("SELECT 1 FROM dual", limit=5)
        assert builder.distinct("a", None) == "DISTINCT a"
        assert builder.add_order_by_for_association_limiting("SELECT 1", "a desc").endswith("alias_0__ desc")

    def test_type_to_sql(self, builder):
        assert builder.type_to_sql("integer") == "NUMBER(38)"

    def test_schema_statements_are_inherited(self, builder):
        assert builder.next_sequence_value("posts_seq") == 'SELECT "POSTS_SEQ".nextval id FROM dual'

    def test_default_sequence_name_is_truncated(self, builder):
        name = builder.default_sequence_name("a_very_long_table_name_exceeding_limit")
        assert name == "a_very_long_table_name_exc_seq"
        assert len(name) == 30

    def test_default_sequence_name(self, builder):
        assert builder.default_sequence_name("posts") == "posts_seq"


class TestQueryBuilderFactory:

    def test_create_uses_dialect_settings(self):
        settings = Mock(dialect=DialectSettings(emulate_booleans=False))
        with patch("orasql.settings.get_settings", return_value=settings):
            builder = get_query_builder()

        assert builder.settings is settings.dialect
        assert builder.quote(False) == "'f'"

    def test_from_config(self):
        builder = QueryBuilderFactory.from_config({"schema": "APP", "emulate_booleans": False})
        assert builder.settings.oracle_schema == "APP"
        assert builder.settings.emulate_booleans is False

    def test_from_empty_config(self):
        assert isinstance(QueryBuilderFactory.from_config(), OracleQueryBuilder)
