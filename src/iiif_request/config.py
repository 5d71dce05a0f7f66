"""iiif-request configuration using pydantic-settings.

All configuration is strongly typed and supports environment variables
and .env files.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_LOG_FORMATS = ("console", "json")


class ConfigError(Exception):
    """Raised when a configuration value is missing or invalid.

    Example:
        >>> Settings(LOG_FORMAT="xml", _env_file=None).require_log_format()
        Traceback (most recent call last):
        ...
        ConfigError: LOG_FORMAT has unsupported value 'xml'. Set it in .env file
        or LOG_FORMAT environment variable to one of: console, json.
    """

    def __init__(self, key_name: str, value: str, choices: tuple[str, ...]) -> None:
        """Initialize configuration error.

        Args:
            key_name: Name of the offending setting (also its env var).
            value: The rejected value.
            choices: Accepted values.
        """
        self.key_name = key_name
        self.value = value
        self.choices = choices
        message = (
            f"{key_name} has unsupported value {value!r}. "
            f"Set it in .env file or {key_name} environment variable "
            f"to one of: {', '.join(choices)}."
        )
        super().__init__(message)


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "console" or "json"

    # Request defaults used when a path omits quality/format
    DEFAULT_QUALITY: str = "default"
    DEFAULT_FORMAT: str = "jpg"

    # Raise on invalid requests instead of reporting them
    STRICT_VALIDATION: bool = False

    def require_log_format(self) -> str:
        """Get the log format, raising ConfigError if it is not supported.

        Returns:
            The configured log format.

        Raises:
            ConfigError: If LOG_FORMAT is not "console" or "json".
        """
        if self.LOG_FORMAT not in SUPPORTED_LOG_FORMATS:
            raise ConfigError("LOG_FORMAT", self.LOG_FORMAT, SUPPORTED_LOG_FORMATS)
        return self.LOG_FORMAT


# Singleton instance for import convenience
settings = Settings()
