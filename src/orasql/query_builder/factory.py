"""Query Builder Factory.

This module provides a factory for creating Oracle query builders with
automatic configuration from environment settings.
"""

from typing import Any, Mapping, Optional

from orasql.query_builder.builder import OracleQueryBuilder
from orasql.settings import DialectSettings


class QueryBuilderFactory:
    """Factory for creating configured query builders.

    Example:
        >>> builder = QueryBuilderFactory.create()
        >>> custom = QueryBuilderFactory.from_config({"schema": "APP", "emulate_booleans": False})
    """

    @staticmethod
    def create() -> OracleQueryBuilder:
        """Create a query builder auto-configured from environment.

        Returns:
            OracleQueryBuilder using the dialect section of ``get_settings()``.
        """
        from orasql.settings import get_settings

        settings = get_settings()

        return OracleQueryBuilder(settings.dialect)

    @staticmethod
    def from_config(config: Optional[Mapping[str, Any]] = None) -> OracleQueryBuilder:
        """Create a query builder from a connection configuration mapping.

        Args:
            config: Mapping with keys such as ``schema``, ``username`` or
                ``emulate_booleans``; environment values fill the rest.
        """
        return OracleQueryBuilder(DialectSettings.from_config(config or {}))


def get_query_builder() -> OracleQueryBuilder:
    """Get a query builder auto-configured from environment settings.

    Example:
        >>> from orasql.query_builder import get_query_builder
        >>> builder = get_query_builder()
        >>> builder.quote_column_name("created_at")
        '"CREATED_AT"'
    """
    return QueryBuilderFactory.create()
