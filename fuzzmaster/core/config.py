"""Configuration Management - Session Settings.

Provides validated settings for a fuzzing session. Values load from
FUZZMASTER_-prefixed environment variables or a .env file, so a campaign
can be reproduced by pinning the rng seed in the environment.
"""

from enum import Enum
from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fuzzmaster.core.constants import (
    FALLBACK_PACKET_SIZE,
    MAX_CASE_SIZE,
    RANDOM_MAX_LENGTH,
    RANDOM_MIN_LENGTH,
)
from fuzzmaster.core.types import FuzzStrategy, Protocol


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    log_format: str = Field(default="json", description="Log format: json or console")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Accept only the two supported renderers."""
        v = v.lower()
        if v not in ("json", "console"):
            raise ValueError(f"log_format must be 'json' or 'console', got {v!r}")
        return v

    @property
    def json_format(self) -> bool:
        return self.log_format == "json"


class FuzzerSettings(BaseSettings):
    """Fuzzing session settings.

    Usage:
        from fuzzmaster.core.config import get_settings
        settings = get_settings()
        session = FuzzingSession.from_settings(settings)
    """

    model_config = SettingsConfigDict(
        env_prefix="FUZZMASTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    protocol: Protocol = Field(default=Protocol.HTTP, description="Target protocol")
    strategy: FuzzStrategy = Field(
        default=FuzzStrategy.MUTATION, description="Case generation strategy"
    )
    rng_seed: int | None = Field(
        default=None, description="Seed for reproducible case streams"
    )

    random_min_length: int = Field(
        default=RANDOM_MIN_LENGTH,
        ge=0,
        le=MAX_CASE_SIZE,
        description="Minimum length of Random strategy cases",
    )
    random_max_length: int = Field(
        default=RANDOM_MAX_LENGTH,
        ge=0,
        le=MAX_CASE_SIZE,
        description="Maximum length of Random strategy cases",
    )
    fallback_packet_size: int = Field(
        default=FALLBACK_PACKET_SIZE,
        ge=0,
        le=MAX_CASE_SIZE,
        description="Packet size for protocols without a dedicated generator",
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("protocol", "strategy", mode="before")
    @classmethod
    def normalize_enum_name(cls, v: Any) -> Any:
        """Accept enum values case-insensitively ("HTTP", "Mutation")."""
        if isinstance(v, str):
            v = v.lower()
        return v

    @model_validator(mode="after")
    def check_random_length_range(self) -> "FuzzerSettings":
        """Ensure the Random strategy length range is not inverted."""
        if self.random_min_length > self.random_max_length:
            raise ValueError(
                "random_min_length must not exceed random_max_length "
                f"({self.random_min_length} > {self.random_max_length})"
            )
        return self

    def get_summary(self) -> str:
        """Get configuration summary."""
        return f"""
FuzzMaster Configuration
========================
Protocol: {self.protocol.value} (port {self.protocol.default_port})
Strategy: {self.strategy.label} - {self.strategy.description}
RNG Seed: {self.rng_seed if self.rng_seed is not None else "random"}

Random Strategy Length: {self.random_min_length}-{self.random_max_length}
Fallback Packet Size: {self.fallback_packet_size}

Logging:
  - Level: {self.logging.log_level.value}
  - Format: {self.logging.log_format}
"""


_settings: FuzzerSettings | None = None


def get_settings(force_reload: bool = False) -> FuzzerSettings:
    """Get application settings (singleton).

    Args:
        force_reload: Force reload settings from environment

    Returns:
        FuzzerSettings instance

    """
    global _settings
    if _settings is None or force_reload:
        _settings = FuzzerSettings()
    return _settings
