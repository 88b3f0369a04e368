"""Unit tests for the Oracle adapter."""

from unittest.mock import Mock, call

import pytest

from orasql.common.exceptions import ErrorCode, OraSQLError
from orasql.operations import OracleAdapter
from orasql.query_builder.ddl import EXPLAIN_DISPLAY_SQL
from orasql.settings import DialectSettings
from orasql.types.columns import ColumnDescriptor


@pytest.fixture
def executor():
    mock = Mock()
    mock.execute.return_value = []
    return mock


@pytest.fixture
def introspector():
    mock = Mock()
    mock.columns.return_value = [
        ColumnDescriptor.from_sql_type("id", "NUMBER(38)", primary=True),
        ColumnDescriptor.from_sql_type("body", "CLOB"),
    ]
    mock.tables.return_value = ["POSTS"]
    return mock


@pytest.fixture
def adapter(executor, introspector):
    return OracleAdapter(executor, introspector, settings=DialectSettings(schema_name=None, username="scott"))


class TestSelect:

    def test_paginated_select_strips_row_number(self, adapter, executor):
        executor.execute.return_value = [{"id": 21, "raw_rn": 21}]

        assert adapter.select("SELECT * FROM posts", limit=10, offset=20) == [{"id": 21}]
        sql = executor.execute.call_args[0][0]
        assert "ROWNUM <= 30" in sql
        assert "raw_rn > 20" in sql

    def test_plain_select(self, adapter, executor):
        executor.execute.return_value = [{"id": 1}]
        assert adapter.select("SELECT * FROM posts") == [{"id": 1}]
        executor.execute.assert_called_once_with("SELECT * FROM posts")

    def test_empty_result(self, adapter):
        assert adapter.select("SELECT * FROM posts", limit=1) == []


class TestSchemaMetadata:

    def test_username_is_schema(self, adapter, introspector):
        adapter.columns("posts")
        introspector.columns.assert_called_once_with("posts", "scott")

    def test_configured_schema(self, executor, introspector):
        adapter = OracleAdapter(executor, introspector, settings=DialectSettings(schema_name="APP", username="scott"))
        assert adapter.tables() == ["POSTS"]
        introspector.tables.assert_called_once_with("APP")

    def test_introspector_required(self, executor):
        adapter = OracleAdapter(executor)
        with pytest.raises(OraSQLError) as exc_info:
            adapter.columns("posts")
        assert exc_info.value.error_code == ErrorCode.CONFIG_ERROR

    def test_prefetch_primary_key(self, adapter):
        assert adapter.prefetch_primary_key("posts").name == "id"
        assert adapter.prefetch_primary_key(None) is None

    def test_from_config(self, executor):
        adapter = OracleAdapter.from_config({"schema": "APP"}, executor)
        assert adapter.oracle_schema == "APP"


class TestSession:

    def test_current_user_is_memoized(self, adapter, executor):
        executor.execute.return_value = [{"su": "SCOTT"}]

        assert adapter.current_user == "SCOTT"
        assert adapter.current_user == "SCOTT"
        executor.execute.assert_called_once()

    def test_current_database(self, adapter, executor):
        executor.execute.return_value = [{"DB": "XE"}]
        assert adapter.current_database == "XE"

    def test_current_schema_is_not_memoized(self, adapter, executor):
        executor.execute.return_value = [{"schema": "APP"}]
        assert adapter.current_schema == "APP"
        assert adapter.current_schema == "APP"
        assert executor.execute.call_count == 2

    def test_set_current_schema(self, adapter, executor):
        adapter.set_current_schema("APP")
        executor.execute.assert_called_once_with("ALTER SESSION SET current_schema=APP")

    @pytest.mark.parametrize("flag, expected", [("Y", True), ("N", False)])
    def test_temporary_table(self, adapter, executor, flag, expected):
        executor.execute.return_value = [{"temporary": flag}]
        assert adapter.temporary_table("posts") is expected

    def test_temporary_table_unknown(self, adapter):
        assert adapter.temporary_table("missing") is False

    def test_tablespace(self, adapter, executor):
        executor.execute.return_value = [{"tablespace_name": "USERS"}]
        assert adapter.tablespace("posts") == "USERS"

    def test_database_parameters(self, adapter, executor):
        executor.execute.return_value = [
            {"parameter": "NLS_CHARACTERSET", "value": "AL32UTF8"},
            {"PARAMETER": "NLS_COMP", "VALUE": "BINARY"},
        ]

        assert adapter.charset == "AL32UTF8"
        assert adapter.collation == "BINARY"
        executor.execute.assert_called_once()

    def test_explain(self, adapter, executor):
        executor.execute.side_effect = [[], [{"plan_table_output": "Plan hash value: 1"}, {"plan_table_output": "| 0 |"}]]

        assert adapter.explain("SELECT * FROM posts") == "Plan hash value: 1\n| 0 |"
        assert executor.execute.call_args_list == [
            call("EXPLAIN PLAN FOR SELECT * FROM posts"),
            call(EXPLAIN_DISPLAY_SQL),
        ]

    def test_explain_skips_dictionary_views(self, adapter, executor):
        assert adapter.explain("SELECT * FROM all_tables") is None
        executor.execute.assert_not_called()

    def test_release_savepoint_is_noop(self, adapter, executor):
        assert adapter.release_savepoint("sp1") is None
        executor.execute.assert_not_called()


class TestWrites:

    def test_insert(self, adapter, executor):
        executor.execute.return_value = [{"id": 10000}]
        sql = "INSERT INTO posts (id, title) VALUES (:id, :title)"

        assert adapter.insert(sql, pk="id", binds={"title": "Hi"}) == 10000
        executor.exec_insert.assert_called_once_with(sql, {"title": "Hi", "id": 10000})

    def test_after_save_introspects_columns(self, adapter, executor, introspector):
        assert adapter.after_save("posts", {"id": 1, "body": "text"}) == ["body"]
        introspector.columns.assert_called_once_with("posts", "scott")
        executor.exec_insert.assert_called_once()

    def test_create_table(self, adapter, executor):
        sequence = adapter.create_table("posts", "id NUMBER(38)")
        assert sequence.name == "posts_seq"
        assert executor.execute.call_count == 2

    def test_next_sequence_value(self, adapter, executor):
        executor.execute.return_value = [{"id": 10005}]
        assert adapter.next_sequence_value("posts_seq") == 10005

    def test_default_sequence_name(self, adapter):
        assert adapter.default_sequence_name("posts") == "posts_seq"

    def test_change_column(self, adapter, executor):
        adapter.change_column("posts", "title", "string", {"limit": 100})
        executor.execute.assert_called_once_with('ALTER TABLE "POSTS" MODIFY "TITLE" VARCHAR2(100)')

    def test_change_column_default(self, adapter, executor):
        adapter.change_column_default("posts", "title", "none")
        executor.execute.assert_called_once_with('ALTER TABLE "POSTS" MODIFY "TITLE" DEFAULT \'none\'')

    def test_rename_column(self, adapter, executor):
        adapter.rename_column("posts", "title", "headline")
        executor.execute.assert_called_once_with('ALTER TABLE "POSTS" RENAME COLUMN "TITLE" TO "HEADLINE"')

    def test_remove_columns(self, adapter, executor):
        adapter.remove_columns("posts", "a", "b")
        assert executor.execute.call_count == 2

    def test_remove_index(self, adapter, executor):
        adapter.remove_index("posts", column="title")
        executor.execute.assert_called_once_with('DROP INDEX "INDEX_POSTS_ON_TITLE"')

    def test_drop_and_rename(self, adapter, executor):
        adapter.drop_table("posts")
        adapter.rename_table("drafts", "posts")
        assert call("DROP SEQUENCE posts_seq") in executor.execute.call_args_list
        assert call("RENAME drafts_seq TO posts_seq") in executor.execute.call_args_list
