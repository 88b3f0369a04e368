"""DISTINCT select lists that stay distinct under ORDER BY.

Oracle requires every ORDER BY column of a DISTINCT query to be in the
select list. Adding the raw columns would split groups that differ only in
the ordering columns, so each one is reduced to a single value per group
with ``FIRST_VALUE(...) OVER (PARTITION BY <distinct columns> ...)`` and
exposed under a generated alias. The consumer's ORDER BY then has to
refer to those aliases.
"""

from typing import List, Optional, Tuple

from orasql.constants import DISTINCT_ALIAS_TEMPLATE


def extract_order_columns(order_by: Optional[str]) -> List[Tuple[str, int]]:
    """Split an ORDER BY clause into trimmed, non-blank terms with their positions."""
    if not order_by:
        return []
    terms = [term.strip() for term in order_by.split(",")]
    return [(term, index) for index, term in enumerate(t for t in terms if t)]


def _direction(term: str) -> Optional[str]:
    # everything after the first space, e.g. "DESC" or "ASC NULLS LAST"
    parts = term.split(" ", 1)
    return parts[1].strip() if len(parts) > 1 and parts[1].strip() else None


class DistinctOrderByRewriter:
    """Builds DISTINCT select lists and the matching ORDER BY.

    Example:
        >>> rewriter = DistinctOrderByRewriter()
        >>> rewriter.distinct("posts.id", "posts.created_at desc")
        'DISTINCT posts.id, FIRST_VALUE(posts.created_at) OVER (PARTITION BY posts.id ORDER BY posts.created_at desc) AS alias_0__'
        >>> rewriter.add_order_by_for_association_limiting("SELECT ...", "posts.created_at desc")
        'SELECT ... ORDER BY alias_0__ desc'
    """

    def __init__(self, alias_template: str = DISTINCT_ALIAS_TEMPLATE):
        self.alias_template = alias_template

    def alias(self, index: int) -> str:
        return self.alias_template.format(index=index)

    def distinct(self, columns: str, order_by: Optional[str] = None) -> str:
        """Select list for ``DISTINCT columns`` ordered by ``order_by``.

        Args:
            columns: Comma separated distinct columns
            order_by: ORDER BY clause text without the keywords

        Returns:
            ``DISTINCT <columns>`` followed by one FIRST_VALUE expression per order term
        """
        order_columns = extract_order_columns(order_by)
        if not order_columns:
            return f"DISTINCT {columns}"

        expressions = [
            f"FIRST_VALUE({term.split()[0]}) OVER (PARTITION BY {columns} ORDER BY {term}) "
            f"AS {self.alias(index)}"
            for term, index in order_columns
        ]
        return f"DISTINCT {columns}, " + ", ".join(expressions)

    def add_order_by_for_association_limiting(self, sql: str, order: Optional[str]) -> str:
        """Append an ORDER BY on the aliases generated by :meth:`distinct`.

        Each alias keeps the direction of its original term; a term without
        one is ordered by the bare alias. A blank ``order`` leaves ``sql``
        unchanged.
        """
        order_columns = extract_order_columns(order)
        if not order_columns:
            return sql

        terms = []
        for term, index in order_columns:
            direction = _direction(term)
            terms.append(f"{self.alias(index)} {direction}" if direction else self.alias(index))

        separator = "" if not sql or sql.endswith(" ") else " "
        return f"{sql}{separator}ORDER BY {', '.join(terms)}"
