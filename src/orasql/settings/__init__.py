"""Settings module providing configuration management for orasql.

Built on Pydantic Settings; each domain has its own settings class:

    - dialect.py: SQL generation options (schema, sequences, booleans, time zone)
    - engine.py: Connection options for the SQLAlchemy executor
    - main.py: Aggregator, ``get_settings()`` singleton, ``_reload_settings()``
      and ``configure_logging()``

Configuration Sources (precedence order):
    1. Explicit keyword arguments
    2. Environment Variables
    3. ``.env`` file
    4. Default Values in code

Environment Variable Naming:
    - ORASQL_DIALECT_SCHEMA_NAME, ORASQL_DIALECT_SEQUENCE_START_VALUE, ...
    - ORASQL_ENGINE_URL, ORASQL_ENGINE_POOL_SIZE, ...
    - ORASQL_LOG_LEVEL (applied by ``configure_logging()``)

Quick Start:
    >>> from orasql.settings import get_settings
    >>> settings = get_settings()
    >>> settings.dialect.sequence_start_value
    10000
"""

from .main import _Settings, configure_logging, get_settings, _reload_settings
from .base import OraSQLBaseSettings
from .dialect import DialectSettings
from .engine import EngineSettings

__all__ = [
    "get_settings",
    "configure_logging",
    "DialectSettings",
    "EngineSettings",
    "OraSQLBaseSettings",
]
