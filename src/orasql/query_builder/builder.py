"""Oracle query builder.

Single entry point for every piece of Oracle SQL generation: identifier
and value quoting, type declarations, pagination, DISTINCT rewriting and
schema statements. The builder only produces SQL text; statements are
executed by the operations layer through an :class:`~orasql.protocols.Executor`.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from orasql.constants import ColumnType
from orasql.query_builder.ddl import SchemaStatementBuilder
from orasql.query_builder.distinct import DistinctOrderByRewriter
from orasql.query_builder.pagination import PaginationRewriter
from orasql.query_builder.quoting import QuotedNameCache, IdentifierQuoter
from orasql.query_builder.type_mapper import TypeMapper
from orasql.query_builder.values import ValueQuoter
from orasql.settings import DialectSettings
from orasql.types.columns import ColumnDescriptor
from orasql.types.pagination import PaginationSpec
from orasql.types.sequences import default_sequence_name


class OracleQueryBuilder(SchemaStatementBuilder):
    """Query builder for the Oracle dialect.

    Extends the schema statement builder with quoting, type mapping,
    pagination and DISTINCT rewriting, all configured from
    :class:`DialectSettings`.

    Args:
        settings: Dialect settings; defaults are used when omitted
        column_cache: Private cache for quoted column names
        table_cache: Private cache for quoted table names

    When ``settings.quote_cache_max_entries`` is set and no caches are
    passed, the builder gets its own bounded caches instead of the shared
    process-wide ones.

    Example:
        >>> builder = OracleQueryBuilder()
        >>> builder.quote_table_name("hr.employees")
        '"HR"."EMPLOYEES"'
        >>> builder.add_limit_offset("SELECT * FROM posts", limit=5)
        'SELECT * FROM (SELECT raw_sql_.*, ROWNUM raw_rn FROM (SELECT * FROM posts) raw_sql_ WHERE ROWNUM <= 5) WHERE raw_rn > 0'
    """

    def __init__(
        self,
        settings: Optional[DialectSettings] = None,
        column_cache: Optional[QuotedNameCache] = None,
        table_cache: Optional[QuotedNameCache] = None,
    ):
        self.settings = settings or DialectSettings()

        max_entries = self.settings.quote_cache_max_entries
        if max_entries is not None:
            if column_cache is None:
                column_cache = QuotedNameCache(max_entries)
            if table_cache is None:
                table_cache = QuotedNameCache(max_entries)

        super().__init__(
            identifier_quoter=IdentifierQuoter(column_cache=column_cache, table_cache=table_cache),
            value_quoter=ValueQuoter(
                emulate_booleans=self.settings.emulate_booleans,
                tzinfo=self.settings.tzinfo,
            ),
            type_mapper=TypeMapper(),
        )
        self.pagination = PaginationRewriter()
        self.distinct_rewriter = DistinctOrderByRewriter()

    # Quoting

    def quote_column_name(self, name: Any) -> str:
        return self.identifiers.quote_column_name(name)

    def quote_table_name(self, name: Any) -> str:
        return self.identifiers.quote_table_name(name)

    def quote(self, value: Any, column: Optional[ColumnDescriptor] = None) -> str:
        return self.values.quote(value, column)

    def quoted_date(self, value: Union[date, datetime], want_fraction: Optional[bool] = None) -> str:
        return self.values.quoted_date(value, want_fraction)

    def quote_raw(self, value: Any) -> str:
        return self.values.quote_raw(value)

    def quote_string(self, value: str) -> str:
        return self.values.quote_string(value)

    # Types

    def native_database_types(self) -> Dict[ColumnType, Any]:
        return self.types.native_database_types()

    def type_to_sql(
        self,
        type_: Union[ColumnType, str],
        limit: Optional[int] = None,
        precision: Optional[int] = None,
        scale: Optional[int] = None,
    ) -> str:
        return self.types.type_to_sql(type_, limit, precision, scale)

    # Query rewriting

    def add_limit_offset(
        self,
        sql: str,
        limit: Union[int, PaginationSpec, None] = None,
        offset: Optional[int] = None,
    ) -> str:
        return self.pagination.add_limit_offset(sql, limit, offset)

    def strip_row_number(
        self,
        columns: Sequence[str],
        rows: Sequence[Dict[str, Any]],
    ) -> Tuple[List[str], List[Dict[str, Any]]]:
        return self.pagination.strip_row_number(columns, rows)

    def distinct(self, columns: str, order_by: Optional[str] = None) -> str:
        return self.distinct_rewriter.distinct(columns, order_by)

    def add_order_by_for_association_limiting(self, sql: str, order: Optional[str]) -> str:
        return self.distinct_rewriter.add_order_by_for_association_limiting(sql, order)

    # Sequences

    def default_sequence_name(self, table_name: str) -> str:
        return default_sequence_name(table_name)

