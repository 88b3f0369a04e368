"""SQLAlchemy-backed collaborators.

- OracleSQLEngine: statement executor with pooling, tracing and retries
- SQLAlchemyIntrospector: schema introspection via ``sqlalchemy.inspect``

Example:
    >>> from orasql.engine import OracleSQLEngine, SQLAlchemyIntrospector
    >>> from orasql.operations import OracleAdapter
    >>>
    >>> engine = OracleSQLEngine()
    >>> adapter = OracleAdapter(engine, SQLAlchemyIntrospector(engine.engine))
"""

from orasql.engine.introspection import SQLAlchemyIntrospector
from orasql.engine.sql_engine import OracleSQLEngine

__all__ = [
    "OracleSQLEngine",
    "SQLAlchemyIntrospector",
]
