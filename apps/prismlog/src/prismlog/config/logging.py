"""
Logging Configuration.

Process-level defaults read from the environment, used when a console is
configured without explicit options.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .options import LogFormat, LoggerOptions


class LoggingSettings(BaseSettings):
    """Default logger settings.

    Prefix: PRISMLOG_
    """

    model_config = SettingsConfigDict(
        env_prefix="PRISMLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    format: LogFormat = Field(default="cli", description="Output format")
    level: Optional[str] = Field(default=None, description="Filter floor level key")
    timestamp: Optional[str] = Field(default=None, description="Timestamp mode or strftime pattern")

    def to_options(self) -> LoggerOptions:
        return LoggerOptions(format=self.format, level=self.level, timestamp=self.timestamp)
