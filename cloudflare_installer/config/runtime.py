"""Runtime configuration settings."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class RuntimeConfig(BaseSettings):
    """Runtime configuration settings."""

    debug: bool = Field(False, alias="DEBUG")
    log_level: LogLevel = Field("WARNING", alias="LOG_LEVEL")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def effective_log_level(self) -> str:
        """Log level to configure, with DEBUG taking precedence."""
        if self.debug:
            return "DEBUG"
        return self.log_level
