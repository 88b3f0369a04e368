from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from orasql.logging import setup_logging

from .base import OraSQLBaseSettings
from .dialect import DialectSettings
from .engine import EngineSettings


class _Settings(OraSQLBaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="ORASQL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__"
    )

    dialect: DialectSettings = Field(
        default_factory=DialectSettings,
        description="SQL generation options for the Oracle dialect"
    )
    engine: EngineSettings = Field(
        default_factory=EngineSettings,
        description="Connection and pooling options for the statement executor"
    )
    log_level: str = Field(
        default="INFO",
        description="Base log level for the orasql logger"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level


# Singleton instance
_settings: Optional[_Settings] = None


def get_settings(force_reload: bool = False) -> _Settings:
    """Get the singleton settings instance for the application.

    The settings are loaded from environment variables (and a ``.env``
    file when present) on first access.

    Args:
        force_reload: If True, creates a new Settings instance even if
                     one already exists. Useful for testing or when
                     environment variables have changed.

    Returns:
        Settings: The singleton Settings instance

    Example:
        ```python
        settings = get_settings()
        assert settings is get_settings()
        ```

    Note:
        This function is thread-safe for reading but not for the initial
        creation. In practice, settings are typically loaded once at
        application startup before threading begins.
    """
    global _settings

    if _settings is None or force_reload:
        _settings = _Settings()

    return _settings


def _reload_settings() -> _Settings:
    """Force reload of settings.

    This is primarily for testing purposes where you need to reset
    the singleton instance.
    """
    global _settings
    _settings = None
    return get_settings(force_reload=True)


def configure_logging(settings: Optional[_Settings] = None) -> None:
    """Configure the orasql logger from the settings' ``log_level``.

    Call once at application startup; ``ORASQL_LOG_LEVEL`` then controls
    the verbosity without code changes.

    Args:
        settings: Settings to read; the singleton from :func:`get_settings`
            when omitted

    Example:
        ```python
        from orasql.settings import configure_logging

        configure_logging()
        ```
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)
