# src/cacheprobe/config/settings.py
"""Application configuration using pydantic-settings.
Includes HTTP listener, Redis target and logging settings.
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Base configuration class with common settings
class BaseAppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


class RedisConfig(BaseAppSettings):
    host: str = Field("localhost", validation_alias="REDIS_HOST")
    port: int = Field(6379, validation_alias="REDIS_PORT")
    db: int = Field(0, validation_alias="REDIS_DB")
    tls: bool = Field(False, validation_alias="REDIS_TLS")
    password: Optional[str] = Field(None, validation_alias="REDIS_PASSWORD")

    # Passed straight to the client, which owns retry and keepalive behaviour
    connect_timeout: float = Field(5.0, validation_alias="REDIS_CONNECT_TIMEOUT")
    command_timeout: float = Field(5.0, validation_alias="REDIS_COMMAND_TIMEOUT")
    socket_keepalive: bool = Field(True, validation_alias="REDIS_SOCKET_KEEPALIVE")
    retry_on_timeout: bool = Field(True, validation_alias="REDIS_RETRY_ON_TIMEOUT")
    max_retries: int = Field(1, validation_alias="REDIS_MAX_RETRIES")

    @property
    def auth_enabled(self) -> bool:
        return bool(self.password)


class ServerConfig(BaseAppSettings):
    host: str = Field("0.0.0.0", validation_alias="HOST")
    port: int = Field(3000, validation_alias="PORT")


class LoggingConfig(BaseAppSettings):
    level: str = Field("INFO", validation_alias="LOG_LEVEL")


class Settings(BaseAppSettings):
    redis: RedisConfig = Field(default_factory=RedisConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    cors_origins: str = Field(default="*", validation_alias="CORS_ORIGINS")

    # Override model_config to add nested delimiter
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> Settings:
    """Helper to get a settings instance"""
    return Settings()
