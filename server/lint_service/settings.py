"""
lintface Server Settings

Configuration management using pydantic settings.
Loads from environment variables with LINTFACE_ prefix.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Server configuration settings.

    Environment variables:
    - LINTFACE_HOST: Bind address (default: 127.0.0.1)
    - LINTFACE_PORT: Bind port (default: 8080)
    - LINTFACE_LOG_LEVEL: Logging level (default: INFO)
    - LINTFACE_LEGACY_ENVELOPE: Report failures as a single line-0 diagnostic
      with status 200 instead of a structured error (default: false)
    - LINTFACE_CONFIG_PATH: Engine YAML config file (optional)
    """

    model_config = SettingsConfigDict(
        env_prefix="LINTFACE_",
        env_file=".env",
        extra="ignore",
    )

    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "INFO"

    # Pre-structured-error clients only understand diagnostic arrays
    legacy_envelope: bool = False

    config_path: Optional[str] = None


# Global settings instance
settings = Settings()
