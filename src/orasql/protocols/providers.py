"""Collaborator protocol definitions.

This module defines the interfaces of the collaborators the SQL
generation core talks to: the statement executor and schema
introspection. The core only produces SQL text and, for sequence
lookups, extracts one scalar from the executor's result.
"""

from typing import Any, Dict, List, Mapping, Optional, Protocol, runtime_checkable

from orasql.types.columns import ColumnDescriptor


@runtime_checkable
class Executor(Protocol):
    """Protocol for statement executors.

    Implementations own the driver connection, transactions, retries and
    timeouts. Statements passed here are final Oracle SQL.
    """

    def execute(self, sql: str) -> List[Dict[str, Any]]:
        """Execute a statement.

        Args:
            sql: Statement to run

        Returns:
            Rows as mappings of lower-cased column name to value; an empty
            list for statements that return no rows
        """
        ...

    def exec_insert(self, sql: str, binds: Optional[Mapping[str, Any]] = None) -> Any:
        """Execute an INSERT (or other DML) with bind parameters.

        Args:
            sql: Statement with named bind placeholders
            binds: Bind values by placeholder name

        Returns:
            Driver-specific insert result (row count for the bundled engine)
        """
        ...


@runtime_checkable
class SchemaIntrospector(Protocol):
    """Protocol for schema metadata retrieval."""

    def columns(self, table_name: str, schema: Optional[str] = None) -> List[ColumnDescriptor]:
        """Return the column descriptors of ``table_name``."""
        ...

    def tables(self, schema: Optional[str] = None) -> List[str]:
        """Return the table names visible in ``schema``."""
        ...
