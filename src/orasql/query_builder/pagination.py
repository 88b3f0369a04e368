"""LIMIT/OFFSET emulation through ROWNUM subqueries."""

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from orasql.constants import ROW_NUMBER_ALIAS, SUBQUERY_ALIAS
from orasql.types.pagination import PaginationSpec


class PaginationRewriter:
    """Wraps a query so that only a window of its rows is returned.

    Oracle before 12c has no row limiting clause, so the window is
    selected on the ROWNUM pseudo-column of the ordered inner query.
    The row number is exposed under ``raw_rn`` and has to be removed from
    results again, see :meth:`strip_row_number`.

    Example:
        >>> PaginationRewriter().add_limit_offset("SELECT * FROM posts", limit=10, offset=20)
        'SELECT * FROM (SELECT raw_sql_.*, ROWNUM raw_rn FROM (SELECT * FROM posts) raw_sql_ WHERE ROWNUM <= 30) WHERE raw_rn > 20'
    """

    def __init__(self, row_number_alias: str = ROW_NUMBER_ALIAS, subquery_alias: str = SUBQUERY_ALIAS):
        self.row_number_alias = row_number_alias
        self.subquery_alias = subquery_alias

    def add_limit_offset(
        self,
        sql: str,
        limit: Union[int, PaginationSpec, None] = None,
        offset: Optional[int] = None,
    ) -> str:
        """Return ``sql`` restricted to the requested window.

        Args:
            sql: Query to paginate
            limit: Maximum number of rows, or a PaginationSpec carrying both bounds
            offset: Number of leading rows to skip

        Returns:
            The wrapped query, or ``sql`` unchanged when no bound is set
        """
        if isinstance(limit, PaginationSpec):
            spec = limit
        else:
            spec = PaginationSpec(limit=limit, offset=offset or 0)

        alias, rn = self.subquery_alias, self.row_number_alias
        if spec.limit is not None:
            return (
                f"SELECT * FROM (SELECT {alias}.*, ROWNUM {rn} FROM ({sql}) {alias} "
                f"WHERE ROWNUM <= {spec.upper_bound}) WHERE {rn} > {spec.offset}"
            )
        if spec.offset > 0:
            return (
                f"SELECT * FROM (SELECT {alias}.*, ROWNUM {rn} FROM ({sql}) {alias}) "
                f"WHERE {rn} > {spec.offset}"
            )
        return sql

    def strip_row_number(
        self,
        columns: Sequence[str],
        rows: Sequence[Dict[str, Any]],
    ) -> Tuple[List[str], List[Dict[str, Any]]]:
        """Drop the injected row number from a column list and its rows.

        Drivers may report the alias upper-cased, so the match ignores case.
        """
        alias = self.row_number_alias.lower()
        kept_columns = [column for column in columns if str(column).lower() != alias]
        kept_rows = [
            {key: value for key, value in row.items() if str(key).lower() != alias}
            for row in rows
        ]
        return kept_columns, kept_rows
