"""Rendering typed values as Oracle SQL literals.

Dispatch is on the column's abstract type first and on the value's kind
second:

    text / binary       -> empty_clob() / empty_blob()
    xml                 -> XMLTYPE('...')
    raw                 -> '4142...' (hex)
    numeric primary key -> plain integer
    datetime / time     -> TO_DATE('YYYY-MM-DD HH:MM:SS','YYYY-MM-DD HH24:MI:SS')
    date                -> DATE'YYYY-MM-DD'
    timestamp           -> TIMESTAMP'YYYY-MM-DD HH:MM:SS.NN'
    anything else       -> generic quoting

Large objects always receive an empty constructor: the real content is
written afterwards by :class:`orasql.operations.lob.LobWriter`.
"""

import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Iterable, Optional, Union

from orasql.common.exceptions import validation_error
from orasql.constants import ColumnType
from orasql.query_builder.type_mapper import coerce_column_type
from orasql.types.columns import ColumnDescriptor
from orasql.types.values import SqlLiteral, TypedValue

_SIZED_TYPE = re.compile(r"(.*?)\([0-9]+\)")

DB_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DB_DATE_FORMAT = "%Y-%m-%d"


def _hundredths(microsecond: int) -> int:
    """Microseconds to hundredths of a second, rounded half up.

    .428000 -> 43; capped at 99 so the suffix stays two digits.
    """
    return min((microsecond + 5000) // 10000, 99)


class ValueQuoter:
    """Renders Python values as Oracle literals.

    Args:
        emulate_booleans: Render booleans as 1/0 (NUMBER(1)) instead of 't'/'f'
        tzinfo: Zone that timezone-aware datetimes are converted to before
            formatting; naive datetimes are formatted as given

    Example:
        >>> quoter = ValueQuoter()
        >>> quoter.quote(datetime(2024, 1, 2, 3, 4, 5, 428000))
        "TIMESTAMP'2024-01-02 03:04:05.43'"
        >>> quoter.quote_raw("AB")
        "'4142'"
    """

    def __init__(self, emulate_booleans: bool = True, tzinfo: Optional[Any] = None):
        self.emulate_booleans = emulate_booleans
        self.tzinfo = tzinfo

    def quote(self, value: Any, column: Optional[ColumnDescriptor] = None) -> str:
        """Render ``value`` as a literal for ``column``.

        Args:
            value: Raw value, a TypedValue, or a SqlLiteral passed through verbatim
            column: Target column; None quotes by value kind alone

        Returns:
            SQL literal text
        """
        if isinstance(value, SqlLiteral):
            return str(value)

        typed = TypedValue.of(value)
        raw = typed.value
        column_type = coerce_column_type(column.type) if column is not None else None

        if column_type in (ColumnType.TEXT, ColumnType.BINARY):
            return self._empty_lob(column, column_type)

        if column_type == ColumnType.XML:
            if raw is None:
                return "NULL"
            return f"XMLTYPE('{self.quote_string(str(raw))}')"

        if column_type == ColumnType.RAW:
            if raw is None:
                return "NULL"
            return self.quote_raw(raw)

        if column is not None and column.is_numeric_key:
            return self._quote_numeric_key(raw, column)

        if column_type in (ColumnType.DATETIME, ColumnType.TIME):
            if typed.is_instant:
                formatted = self._to_time(raw).strftime(DB_DATETIME_FORMAT)
                return f"TO_DATE('{formatted}','YYYY-MM-DD HH24:MI:SS')"
            return self._quote_preformatted("DATE", typed)

        if typed.is_calendar_date or column_type == ColumnType.DATE:
            if typed.is_instant:
                return f"DATE'{self._to_time(raw).strftime(DB_DATE_FORMAT)}'"
            if typed.is_calendar_date:
                return f"DATE'{self.quoted_date(raw)}'"
            return self._quote_preformatted("DATE", typed)

        if typed.is_instant or column_type == ColumnType.TIMESTAMP:
            if typed.is_instant:
                return f"TIMESTAMP'{self.quoted_date(raw, True)}'"
            return self._quote_preformatted("TIMESTAMP", typed)

        return self._quote_generic(raw, column_type)

    def quoted_date(self, value: Union[date, datetime], want_fraction: Optional[bool] = None) -> str:
        """Database-formatted date/time text, optionally with hundredths.

        Args:
            value: date or datetime
            want_fraction: Append ``.NN``; when None it is appended for datetimes

        Returns:
            ``YYYY-MM-DD``, ``YYYY-MM-DD HH:MM:SS`` or ``YYYY-MM-DD HH:MM:SS.NN``
        """
        if want_fraction or (want_fraction is None and isinstance(value, datetime)):
            if isinstance(value, datetime):
                value = self._to_time(value)
                return f"{value.strftime(DB_DATETIME_FORMAT)}.{_hundredths(value.microsecond):02d}"
        return self._to_db(value)

    def quote_raw(self, value: Union[str, bytes, bytearray, memoryview, Iterable[int]]) -> str:
        """Render bytes as a RAW hex literal, e.g. ``'4142'``.

        Text is encoded to UTF-8 first; an iterable of ints is taken as byte codes.
        """
        if isinstance(value, str):
            data = value.encode("utf-8")
        else:
            data = bytes(value)
        return f"'{data.hex().upper()}'"

    def quote_string(self, value: str) -> str:
        """Escape a string for use inside single quotes."""
        return value.replace("'", "''")

    def _empty_lob(self, column: ColumnDescriptor, column_type: ColumnType) -> str:
        sql_type = column.sql_type
        if sql_type:
            match = _SIZED_TYPE.match(sql_type)
            name = (match.group(1) if match else sql_type).strip().lower()
            # there is no EMPTY_NCLOB(); EMPTY_CLOB() initializes NCLOB columns
            if name == "nclob":
                name = "clob"
        else:
            name = "clob" if column_type == ColumnType.TEXT else "blob"
        return f"empty_{name}()"

    def _quote_numeric_key(self, raw: Any, column: ColumnDescriptor) -> str:
        if raw is None:
            return "NULL"
        try:
            return str(int(raw))
        except (TypeError, ValueError) as exc:
            raise validation_error(
                f"Primary key value for {column.name} is not numeric",
                field=column.name,
                value=raw,
                cause=exc,
            ) from exc

    def _quote_preformatted(self, keyword: str, typed: TypedValue) -> str:
        # assume a correctly formatted DATE/TIMESTAMP string
        if typed.is_blank():
            return "NULL"
        return f"{keyword}'{self.quote_string(str(typed.value))}'"

    def _quote_generic(self, raw: Any, column_type: Optional[ColumnType]) -> str:
        if raw is None:
            return "NULL"
        if isinstance(raw, bool):
            if self.emulate_booleans:
                return "1" if raw else "0"
            return "'t'" if raw else "'f'"
        if isinstance(raw, (int, float, Decimal)):
            if column_type in (ColumnType.STRING, ColumnType.TEXT):
                return f"'{raw}'"
            return str(raw)
        if isinstance(raw, (bytes, bytearray, memoryview)):
            return self.quote_raw(raw)
        return f"'{self.quote_string(str(raw))}'"

    def _to_time(self, value: datetime) -> datetime:
        if value.tzinfo is not None and self.tzinfo is not None:
            return value.astimezone(self.tzinfo)
        return value

    def _to_db(self, value: Any) -> str:
        if isinstance(value, datetime):
            return self._to_time(value).strftime(DB_DATETIME_FORMAT)
        if isinstance(value, date):
            return value.strftime(DB_DATE_FORMAT)
        return str(value)
