"""Dialect configuration settings.

Options that change how SQL is generated for the Oracle engine: the
working schema, sequence defaults, boolean emulation, the time zone used
to normalize timestamps, and the bound on the quoted-name caches.
"""

from typing import Any, Mapping, Optional

import pytz
from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from orasql.constants import DEFAULT_SEQUENCE_START_VALUE
from .base import OraSQLBaseSettings


class DialectSettings(OraSQLBaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="ORASQL_DIALECT_",
        case_sensitive=False
    )

    schema_name: Optional[str] = Field(
        default=None,
        description="Working schema. Overrides the username-derived schema."
    )
    username: Optional[str] = Field(
        default=None,
        description="Connection username; used as the schema when schema_name is not set"
    )
    sequence_start_value: int = Field(
        default=DEFAULT_SEQUENCE_START_VALUE,
        ge=1,
        description="Default START WITH value for table sequences"
    )
    emulate_booleans: bool = Field(
        default=True,
        description="Render booleans as NUMBER(1) 1/0 since Oracle has no boolean column type"
    )
    time_zone: str = Field(
        default="UTC",
        description="Zone that timezone-aware values are converted to before formatting"
    )
    quote_cache_max_entries: Optional[int] = Field(
        default=None,
        ge=1,
        description="Upper bound for the quoted identifier caches; unbounded when not set"
    )

    @field_validator('time_zone')
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate that the timezone is valid."""
        try:
            pytz.timezone(v)
            return v
        except pytz.exceptions.UnknownTimeZoneError:
            raise ValueError(f"Unknown timezone: {v}. Use pytz timezone names like 'Europe/London'")

    @property
    def tzinfo(self):
        """The configured zone as a pytz timezone."""
        return pytz.timezone(self.time_zone)

    @property
    def oracle_schema(self) -> Optional[str]:
        """Schema objects are looked up in.

        In Oracle, schemas are usually created under the username, but a
        separate schema can still be configured.
        """
        if self.schema_name:
            return self.schema_name
        if self.username:
            return self.username
        return None

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "DialectSettings":
        """Build settings from a connection configuration mapping.

        Recognizes the ``schema`` key used by connection configurations in
        addition to the field names.

        Args:
            config: Mapping such as ``{"schema": "APP", "username": "scott"}``

        Returns:
            DialectSettings with the mapping applied over the environment
        """
        values = {k: v for k, v in config.items() if k in cls.model_fields}
        if "schema" in config and "schema_name" not in values:
            values["schema_name"] = config["schema"]
        return cls(**values)
