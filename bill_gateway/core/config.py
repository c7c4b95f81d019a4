"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Process settings loaded from environment variables.

    All settings can be overridden via environment variables
    or a .env file. Alipay credentials live in alipay.properties
    and are loaded separately by ``bill_gateway.core.credentials``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Credentials file override (takes precedence over the search order)
    config_path: str | None = None

    # Alipay OpenAPI
    alipay_api_timeout: float = 15.0
    verify_response_signature: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
