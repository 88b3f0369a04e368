"""SQLAlchemy-based Oracle statement executor.

Implements the :class:`~orasql.protocols.Executor` protocol on top of a
pooled SQLAlchemy engine. Requires an Oracle driver such as ``oracledb``
(``pip install orasql[oracle]``).
"""

import time
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, TypeVar

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import QueuePool

from orasql.__version__ import __version__
from orasql.common.exceptions import (
    OraSQLError,
    configuration_error,
    connection_error,
    query_execution_error,
)
from orasql.logging import get_logger
from orasql.settings import EngineSettings
from orasql.telemetry import get_meter
from orasql.utils.decorators import retry_with_backoff as retry, traced

logger = get_logger(__name__)

T = TypeVar("T")


def _is_retryable(exc: Exception) -> bool:
    return isinstance(exc, OraSQLError) and exc.is_retryable


def _wrap_error(sql: str, exc: Exception) -> OraSQLError:
    # only dropped connections and similar driver-level failures are transient
    return query_execution_error(sql, exc, is_retryable=isinstance(exc, OperationalError))


class OracleSQLEngine:
    """SQL execution engine for Oracle.

    Features:
        - Lazy engine creation with QueuePool connection pooling
        - Rows returned as dictionaries keyed by lower-cased column name
        - OpenTelemetry spans around every statement
        - Retry with exponential backoff on OperationalError only

    Args:
        settings: Engine settings; read from the environment when omitted
        engine: Pre-built SQLAlchemy engine, bypassing ``settings.url``

    Example:
        >>> engine = OracleSQLEngine(EngineSettings(url="oracle+oracledb://scott:tiger@db:1521/?service_name=XEPDB1"))
        >>> engine.execute("SELECT sys_context('userenv', 'session_user') su FROM dual")
        [{'su': 'SCOTT'}]
    """

    def __init__(self, settings: Optional[EngineSettings] = None, engine: Optional[Engine] = None):
        self.settings = settings or EngineSettings()
        self._engine: Optional[Engine] = engine

        meter = get_meter(__name__, __version__)
        self.statement_counter = meter.create_counter(
            "orasql_statements_total",
            description="Total number of executed statements",
            unit="statements",
        )
        self.duration_histogram = meter.create_histogram(
            "orasql_statement_duration_seconds",
            description="Duration of executed statements",
            unit="seconds",
        )

    @property
    def engine(self) -> Engine:
        """Get or create SQLAlchemy engine with lazy initialization."""
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> Engine:
        """Create SQLAlchemy engine with connection pooling.

        Raises:
            OraSQLError: CONFIG_ERROR when no URL is configured,
                CONNECTION_ERROR when the engine cannot be created
        """
        if not self.settings.is_configured:
            raise configuration_error("No Oracle connection URL configured", config_key="ORASQL_ENGINE_URL")

        try:
            engine = create_engine(
                self.settings.url.get_secret_value(),
                poolclass=QueuePool,
                pool_pre_ping=True,  # Verify connections before use
                pool_size=self.settings.pool_size,
                max_overflow=self.settings.max_overflow,
                pool_timeout=self.settings.pool_timeout,
            )
            logger.info("Created Oracle engine", extra={"pool_size": self.settings.pool_size})
            return engine

        except Exception as e:
            raise connection_error("Failed to create Oracle engine", service="oracle", cause=e)

    @contextmanager
    def _get_connection(self) -> Iterator[Connection]:
        conn = self.engine.connect()
        try:
            yield conn
        finally:
            conn.close()

    def _span_attributes(self, sql: str, *, operation: str) -> Dict[str, Any]:
        """Build OpenTelemetry span attributes for SQL operations."""
        statement = (sql or "").strip()
        if len(statement) > 4096:
            statement = f"{statement[:4093]}..."

        attributes: Dict[str, Any] = {
            "db.system": "oracle",
            "db.operation": operation,
        }
        if statement:
            attributes["db.statement"] = statement
            attributes["db.statement.length"] = len(statement)
        return attributes

    def _record(self, operation: str, started: float, success: bool) -> float:
        duration = time.time() - started
        attributes = {"db.operation": operation, "success": success}
        self.statement_counter.add(1, attributes)
        self.duration_histogram.record(duration, attributes)
        return duration

    def _with_retry(self, func: Callable[..., T], *args: Any) -> T:
        """Call ``func`` under the retry policy from the engine settings."""
        retrying = retry(
            max_retries=self.settings.max_retries,
            initial_delay=self.settings.retry_delay_seconds,
            exponential_base=2,
            retry_on=(OraSQLError,),
            retry_condition=_is_retryable,
        )
        return retrying(func)(*args)

    @traced(
        span_name="orasql.engine.execute",
        attribute_getter=lambda self, sql: self._span_attributes(sql, operation="execute"),
    )
    def execute(self, sql: str) -> List[Dict[str, Any]]:
        """Execute a statement and return its rows, if any.

        The statement is passed to the driver as is; literals quoted by the
        builder may contain colons that are not bind placeholders.
        Statements that return no rows are committed.
        """
        return self._with_retry(self._execute, sql)

    def _execute(self, sql: str) -> List[Dict[str, Any]]:
        start_time = time.time()
        try:
            with self._get_connection() as conn:
                result = conn.exec_driver_sql(sql)
                if result.returns_rows:
                    rows = [
                        {str(key).lower(): value for key, value in row.items()}
                        for row in result.mappings().all()
                    ]
                else:
                    rows = []
                    conn.commit()

            duration = self._record("execute", start_time, True)
            logger.debug(
                "SQL statement executed",
                extra={"row_count": len(rows), "duration.seconds": f"{duration:.6f}"},
            )
            return rows

        except OraSQLError:
            self._record("execute", start_time, False)
            raise
        except Exception as exc:
            duration = self._record("execute", start_time, False)
            logger.error(
                "SQL statement failed",
                extra={"duration.seconds": f"{duration:.6f}", "error": str(exc)},
                exc_info=True,
            )
            raise _wrap_error(sql, exc)

    @traced(
        span_name="orasql.engine.exec_insert",
        attribute_getter=lambda self, sql, binds=None: self._span_attributes(sql, operation="exec_insert"),
    )
    def exec_insert(self, sql: str, binds: Optional[Mapping[str, Any]] = None) -> int:
        """Execute DML with named binds, commit, and return the affected row count."""
        return self._with_retry(self._exec_insert, sql, binds)

    def _exec_insert(self, sql: str, binds: Optional[Mapping[str, Any]]) -> int:
        start_time = time.time()
        try:
            with self._get_connection() as conn:
                result = conn.execute(text(sql), dict(binds or {}))
                conn.commit()
                row_count = result.rowcount

            duration = self._record("exec_insert", start_time, True)
            logger.debug(
                "SQL insert executed",
                extra={"row_count": row_count, "duration.seconds": f"{duration:.6f}"},
            )
            return row_count

        except OraSQLError:
            self._record("exec_insert", start_time, False)
            raise
        except Exception as exc:
            duration = self._record("exec_insert", start_time, False)
            logger.error(
                "SQL insert failed",
                extra={"duration.seconds": f"{duration:.6f}", "error": str(exc)},
                exc_info=True,
            )
            raise _wrap_error(sql, exc)

    @traced(
        span_name="orasql.engine.fetch_scalar",
        attribute_getter=lambda self, sql: self._span_attributes(sql, operation="fetch_scalar"),
    )
    def fetch_scalar(self, sql: str) -> Any:
        """Execute query and return single scalar value."""
        return self._with_retry(self._fetch_scalar, sql)

    def _fetch_scalar(self, sql: str) -> Any:
        start_time = time.time()
        try:
            with self._get_connection() as conn:
                value = conn.exec_driver_sql(sql).scalar_one_or_none()

            self._record("fetch_scalar", start_time, True)
            return value

        except OraSQLError:
            self._record("fetch_scalar", start_time, False)
            raise
        except Exception as exc:
            duration = self._record("fetch_scalar", start_time, False)
            logger.error(
                "Scalar fetch failed",
                extra={"duration.seconds": f"{duration:.6f}", "error": str(exc)},
                exc_info=True,
            )
            raise _wrap_error(sql, exc)

    def test_connection(self) -> bool:
        """Test if connection to the database is working."""
        try:
            return self.fetch_scalar("SELECT 1 FROM dual") == 1
        except OraSQLError as exc:
            logger.error("Oracle connection test failed", extra={"error": str(exc)})
            return False

    def dispose(self) -> None:
        """Close all pooled connections."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
