from typing import Any, Mapping, Optional

from pydantic import Field

from orasql.types.base import OraSQLBaseModel


class PaginationSpec(OraSQLBaseModel):
    """Row bounds applied to a finished SELECT.

    When ``limit`` is set the rewritten query keeps row numbers in
    ``(offset, offset + limit]``; otherwise only the lower bound applies.
    """

    limit: Optional[int] = Field(default=None, ge=0)
    offset: int = Field(default=0, ge=0)

    @property
    def upper_bound(self) -> Optional[int]:
        if self.limit is None:
            return None
        return self.offset + self.limit

    @property
    def is_empty(self) -> bool:
        """True when the query needs no rewriting."""
        return self.limit is None and self.offset == 0

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "PaginationSpec":
        """Read ``limit``/``offset`` from query options; a missing offset is 0."""
        return cls(limit=options.get("limit"), offset=options.get("offset") or 0)
