"""Unit tests for INSERT with sequence prefetch."""

from unittest.mock import Mock, patch

import pytest

from orasql.common.exceptions import ErrorCode, OraSQLError
from orasql.operations.inserts import InsertExecutor, extract_table_ref_from_insert_sql
from orasql.types.values import SqlLiteral

INSERT_SQL = "INSERT INTO posts (id, title) VALUES (:id, :title)"


class TestExtractTableRef:

    @pytest.mark.parametrize(
        "sql, expected",
        [
            (INSERT_SQL, "posts"),
            ("INSERT INTO posts(id) VALUES (:id)", "posts"),
            ('INSERT INTO "POSTS" (id) VALUES (:id)', "POSTS"),
            ("INSERT INTO hr.posts (id) VALUES (:id)", "hr.posts"),
            ("INSERT INTO posts SELECT * FROM drafts", "posts"),
            ("INSERT   INTO\n  posts (id) VALUES (:id)", "posts"),
            ("INSERT /*+ APPEND */ INTO posts (id) VALUES (:id)", "APPEND"),
        ],
    )
    def test_table_name(self, sql, expected):
        assert extract_table_ref_from_insert_sql(sql) == expected

    def test_too_few_tokens(self):
        with pytest.raises(OraSQLError) as exc_info:
            extract_table_ref_from_insert_sql("INSERT INTO")
        assert exc_info.value.error_code == ErrorCode.VALIDATION_ERROR


class TestInsertExecutor:

    @pytest.fixture
    def executor(self):
        mock = Mock()
        mock.execute.return_value = [{"id": 10000}]
        mock.exec_insert.return_value = 1
        return mock

    @pytest.fixture
    def inserts(self, executor):
        return InsertExecutor(executor)

    def test_prefetches_sequence_value(self, inserts, executor):
        result = inserts.insert(INSERT_SQL, pk="id", binds={"title": "Hi"})

        assert result == 10000
        executor.execute.assert_called_once_with('SELECT "POSTS_SEQ".nextval id FROM dual')
        executor.exec_insert.assert_called_once_with(INSERT_SQL, {"title": "Hi", "id": 10000})

    def test_explicit_sequence_name(self, inserts, executor):
        inserts.insert(INSERT_SQL, pk="id", sequence_name="custom_seq")
        executor.execute.assert_called_once_with('SELECT "CUSTOM_SEQ".nextval id FROM dual')

    def test_preassigned_id(self, inserts, executor):
        assert inserts.insert(INSERT_SQL, pk="id", id_value=5, binds={"id": 5, "title": "Hi"}) == 5
        executor.execute.assert_not_called()
        executor.exec_insert.assert_called_once_with(INSERT_SQL, {"id": 5, "title": "Hi"})

    def test_sql_literal_id_is_not_assigned(self, inserts, executor):
        assert inserts.insert(INSERT_SQL, pk="id", id_value=SqlLiteral("NULL")) == 10000
        executor.execute.assert_called_once()

    def test_table_without_primary_key(self, inserts, executor):
        assert inserts.insert("INSERT INTO tags (name) VALUES (:name)", binds={"name": "x"}) == 1
        executor.execute.assert_not_called()

    def test_sequence_failure_propagates(self, inserts, executor):
        executor.execute.return_value = []
        with pytest.raises(OraSQLError):
            inserts.insert(INSERT_SQL, pk="id")
        executor.exec_insert.assert_not_called()

    def test_insert_logged_with_query_type(self, inserts):
        with patch("orasql.operations.inserts.logger") as mock_logger:
            inserts.insert(INSERT_SQL, pk="id", id_value=5, binds={"id": 5, "title": "Hi"})

        mock_logger.debug.assert_any_call("Executing statement", extra={"query_type": "INSERT", "sql": INSERT_SQL})
