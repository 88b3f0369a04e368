"""Unit tests for abstract to native type mapping."""

import pytest

from orasql.common.exceptions import ErrorCode, OraSQLError
from orasql.constants import NATIVE_DATABASE_TYPES, ColumnType
from orasql.query_builder.type_mapper import TypeMapper, coerce_column_type


class TestTypeMapper:
    """Test type_to_sql rendering."""

    @pytest.fixture
    def mapper(self):
        return TypeMapper()

    @pytest.mark.parametrize(
        "type_, expected",
        [
            ("string", "VARCHAR2(255)"),
            ("text", "CLOB"),
            ("integer", "NUMBER(38)"),
            ("float", "NUMBER"),
            ("decimal", "DECIMAL"),
            ("datetime", "DATE"),
            ("timestamp", "TIMESTAMP"),
            ("time", "DATE"),
            ("date", "DATE"),
            ("binary", "BLOB"),
            ("boolean", "NUMBER(1)"),
            ("raw", "RAW(2000)"),
            ("xml", "XMLTYPE"),
            ("primary_key", "NUMBER(38) NOT NULL PRIMARY KEY"),
        ],
    )
    def test_default_declarations(self, mapper, type_, expected):
        assert mapper.type_to_sql(type_) == expected

    def test_enum_and_string_tags_are_equivalent(self, mapper):
        assert mapper.type_to_sql(ColumnType.STRING) == mapper.type_to_sql("string")

    def test_explicit_limit(self, mapper):
        assert mapper.type_to_sql("string", limit=40) == "VARCHAR2(40)"

    @pytest.mark.parametrize("type_, expected", [("binary", "BLOB"), ("text", "CLOB")])
    def test_lob_types_ignore_length(self, mapper, type_, expected):
        """Oracle rejects BLOB(1024) with ORA-00907."""
        assert mapper.type_to_sql(type_, limit=1024, precision=5, scale=2) == expected

    def test_decimal_with_precision_and_scale(self, mapper):
        assert mapper.type_to_sql("decimal", precision=10, scale=2) == "DECIMAL(10,2)"

    def test_decimal_with_precision_only(self, mapper):
        assert mapper.type_to_sql("decimal", precision=10) == "DECIMAL(10)"

    def test_decimal_scale_without_precision_fails(self, mapper):
        with pytest.raises(OraSQLError) as exc_info:
            mapper.type_to_sql("decimal", scale=2)
        assert exc_info.value.error_code == ErrorCode.VALIDATION_ERROR

    def test_unknown_type_is_emitted_verbatim(self, mapper):
        assert mapper.type_to_sql("NVARCHAR2(30)") == "NVARCHAR2(30)"

    def test_native_types_are_a_copy(self, mapper):
        types = mapper.native_database_types()
        types[ColumnType.STRING]["limit"] = 10
        assert mapper.type_to_sql("string") == "VARCHAR2(255)"
        assert NATIVE_DATABASE_TYPES[ColumnType.STRING]["limit"] == 255

    def test_custom_native_types(self):
        mapper = TypeMapper({ColumnType.STRING: {"name": "NVARCHAR2", "limit": 100}})
        assert mapper.type_to_sql("string") == "NVARCHAR2(100)"


class TestCoerceColumnType:

    def test_string_tag(self):
        assert coerce_column_type("text") is ColumnType.TEXT

    def test_case_insensitive(self):
        assert coerce_column_type("TEXT") is ColumnType.TEXT

    def test_unknown(self):
        assert coerce_column_type("VARCHAR2") is None

    def test_none(self):
        assert coerce_column_type(None) is None
