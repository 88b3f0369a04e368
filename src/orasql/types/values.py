"""Typed values handed to the value quoter.

The kind of a value (instant, calendar date, preformatted string) is
attached explicitly when the value is wrapped instead of being inferred
from the capabilities of the object at quoting time.

A bare ``time`` is an instant on 2000-01-01, the date Oracle stores with
a time-of-day that has no date of its own.
"""

from datetime import date, datetime, time
from typing import Any, Optional

from orasql.common.exceptions import validation_error
from orasql.constants import ValueKind

DUMMY_DATE = date(2000, 1, 1)

# Python types an explicit kind may wrap
_KIND_TYPES = {
    ValueKind.INSTANT: (datetime,),
    ValueKind.CALENDAR_DATE: (date, str),
}


class SqlLiteral(str):
    """A fragment of SQL that must be emitted verbatim, never quoted."""

    __slots__ = ()


def value_kind(value: Any) -> ValueKind:
    """Classify a raw Python value.

    ``datetime`` is checked before ``date`` since it is a subclass.
    """
    if isinstance(value, (datetime, time)):
        return ValueKind.INSTANT
    if isinstance(value, date):
        return ValueKind.CALENDAR_DATE
    if isinstance(value, str):
        return ValueKind.PREFORMATTED
    return ValueKind.OTHER


class TypedValue:
    """A value paired with its kind; constructed per quoting call.

    Raises:
        OraSQLError: VALIDATION_ERROR if an explicit INSTANT or CALENDAR_DATE
            kind is given for a value of another type
    """

    __slots__ = ("value", "kind")

    def __init__(self, value: Any, kind: Optional[ValueKind] = None):
        if isinstance(value, time):
            value = datetime.combine(DUMMY_DATE, value)
        if kind is None:
            kind = value_kind(value)
        elif kind in _KIND_TYPES and not isinstance(value, _KIND_TYPES[kind]):
            raise validation_error(
                f"{type(value).__name__} value cannot be quoted as {kind.value}",
                field="kind",
                value=value,
            )
        self.value = value
        self.kind = kind

    @classmethod
    def of(cls, value: Any, kind: Optional[ValueKind] = None) -> "TypedValue":
        """Wrap ``value`` unless it is already a TypedValue."""
        if isinstance(value, TypedValue):
            return value
        return cls(value, kind)

    @property
    def is_instant(self) -> bool:
        return self.kind == ValueKind.INSTANT

    @property
    def is_calendar_date(self) -> bool:
        return self.kind == ValueKind.CALENDAR_DATE

    def is_blank(self) -> bool:
        """None, empty, or whitespace-only strings are blank."""
        if self.value is None:
            return True
        if isinstance(self.value, (str, bytes)):
            return not self.value.strip()
        return False

    def __repr__(self) -> str:
        return f"TypedValue({self.value!r}, {self.kind.value})"
