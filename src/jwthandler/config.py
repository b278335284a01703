"""Configuration for jwthandler.

The library itself needs no configuration to decode tokens. These settings
only control how its logging is set up by applications that want the same
structured output, and are read from environment variables with the
``JWTHANDLER_`` prefix.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from safir.logging import LogLevel, Profile, configure_logging

from .constants import LOGGER_NAME

__all__ = ["Config"]


class Config(BaseSettings):
    """Configuration for jwthandler logging."""

    model_config = SettingsConfigDict(
        env_prefix="JWTHANDLER_", case_sensitive=False
    )

    log_level: LogLevel = Field(
        LogLevel.INFO,
        title="Log level",
        description="Level at which to log messages from the library",
    )

    profile: Profile = Field(
        Profile.production,
        title="Logging profile",
        description=(
            "Use production for JSON logs and development for human-readable"
            " logs"
        ),
    )

    logger_name: str = Field(
        LOGGER_NAME,
        title="Logger name",
        description="Root name of the logger to configure",
    )

    def configure_logging(self) -> None:
        """Configure logging based on the jwthandler configuration."""
        configure_logging(
            name=self.logger_name,
            profile=self.profile,
            log_level=self.log_level,
        )
