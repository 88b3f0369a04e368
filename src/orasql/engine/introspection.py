"""Schema introspection through SQLAlchemy's inspector."""

from typing import Any, Dict, List, Optional

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from orasql.logging import get_logger
from orasql.types.columns import ColumnDescriptor

logger = get_logger(__name__)


class SQLAlchemyIntrospector:
    """Implements :class:`~orasql.protocols.SchemaIntrospector` with ``sqlalchemy.inspect``.

    Native types are rendered with the dialect's type compiler (``VARCHAR2(255)``,
    ``NUMBER(10, 2)``...) and mapped with :meth:`ColumnDescriptor.from_sql_type`.

    Args:
        engine: SQLAlchemy engine bound to an Oracle database
        emulate_booleans: Treat NUMBER(1) as boolean
    """

    def __init__(self, engine: Engine, emulate_booleans: bool = True):
        self.engine = engine
        self.emulate_booleans = emulate_booleans

    def _sql_type(self, column: Dict[str, Any]) -> str:
        col_type = column["type"]
        try:
            return col_type.compile(dialect=self.engine.dialect)
        except Exception as exc:
            # NullType and some driver specific types cannot be compiled
            logger.debug("Type compilation failed", extra={"column": column["name"], "error": str(exc)})
            return str(col_type)

    def columns(self, table_name: str, schema: Optional[str] = None) -> List[ColumnDescriptor]:
        inspector = inspect(self.engine)
        primary = set(inspector.get_pk_constraint(table_name, schema=schema).get("constrained_columns") or [])

        descriptors = [
            ColumnDescriptor.from_sql_type(
                column["name"],
                self._sql_type(column),
                primary=column["name"] in primary,
                nullable=column.get("nullable", True),
                default=column.get("default"),
                emulate_booleans=self.emulate_booleans,
            )
            for column in inspector.get_columns(table_name, schema=schema)
        ]
        logger.debug("Columns introspected", extra={"table": table_name, "column_count": len(descriptors)})
        return descriptors

    def tables(self, schema: Optional[str] = None) -> List[str]:
        return inspect(self.engine).get_table_names(schema=schema)
