"""Query builder module for Oracle SQL generation.

Query builders translate identifiers, values and query fragments into
SQL accepted by Oracle but do NOT execute queries - that's handled by
the operations layer through an executor.

Architecture:
    - quoting.py: Identifier quoting and the quoted-name caches
    - type_mapper.py: Abstract column types to native declarations
    - values.py: Typed values to SQL literals
    - pagination.py: LIMIT/OFFSET emulation with ROWNUM
    - distinct.py: DISTINCT + ORDER BY with FIRST_VALUE windows
    - ddl.py: Schema, sequence and session statements
    - builder.py: OracleQueryBuilder combining all of the above
    - factory.py: Builders configured from settings

Example:
    >>> from orasql.query_builder import get_query_builder
    >>>
    >>> builder = get_query_builder()
    >>> builder.distinct("posts.id", "posts.created_at desc")
    'DISTINCT posts.id, FIRST_VALUE(posts.created_at) OVER (PARTITION BY posts.id ORDER BY posts.created_at desc) AS alias_0__'
"""

from orasql.query_builder.builder import OracleQueryBuilder
from orasql.query_builder.ddl import SchemaStatementBuilder
from orasql.query_builder.distinct import DistinctOrderByRewriter, extract_order_columns
from orasql.query_builder.factory import QueryBuilderFactory, get_query_builder
from orasql.query_builder.pagination import PaginationRewriter
from orasql.query_builder.quoting import (
    QUOTED_COLUMN_NAMES,
    QUOTED_TABLE_NAMES,
    IdentifierQuoter,
    QuotedNameCache,
)
from orasql.query_builder.type_mapper import TypeMapper, coerce_column_type
from orasql.query_builder.values import ValueQuoter

__all__ = [
    "OracleQueryBuilder",
    "QueryBuilderFactory",
    "get_query_builder",
    "SchemaStatementBuilder",
    "DistinctOrderByRewriter",
    "extract_order_columns",
    "PaginationRewriter",
    "IdentifierQuoter",
    "QuotedNameCache",
    "QUOTED_COLUMN_NAMES",
    "QUOTED_TABLE_NAMES",
    "TypeMapper",
    "coerce_column_type",
    "ValueQuoter",
]
