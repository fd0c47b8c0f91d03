"""Client configuration and settings."""

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class OramaSettings(BaseSettings):
    """Connection settings loaded from ``ORAMA_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ORAMA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Service
    url: str = "http://localhost:8080"
    timeout: float = 30.0  # Seconds, applied per request

    # Credentials
    master_api_key: SecretStr | None = None
    read_api_key: SecretStr | None = None
    write_api_key: SecretStr | None = None

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> OramaSettings:
    """Get cached settings instance.

    Returns:
        OramaSettings: Client settings instance.
    """
    return OramaSettings()
