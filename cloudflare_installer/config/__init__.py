"""Configuration module - orchestrates all configuration components."""

from functools import cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cloudflare_installer.config.http import HTTPConfig
from cloudflare_installer.config.runtime import RuntimeConfig


class Config(BaseSettings):
    """Main configuration container that orchestrates all config components."""

    # HTTP configurations
    http: HTTPConfig = Field(default_factory=HTTPConfig)

    # Runtime configurations
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)


@cache
def get_config() -> Config:
    """Get the process-wide configuration instance."""
    return Config()


__all__ = ["Config", "HTTPConfig", "RuntimeConfig", "get_config"]
