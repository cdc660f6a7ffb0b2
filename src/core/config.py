"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) so remotes and
  devices read their tunables the same way.
- Keeps defaults in one place: the catalogue examples reproduce the classic
  numbers (volume 30, channel 1, steps of 10 and 1) unless overridden.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) without polluting the domain.
    - One configuration contract shared by services and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="PATTERNS_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Minimum level for the loguru stderr sink.",
    )

    volume_step: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Volume delta applied by volume_up/volume_down.",
    )
    channel_step: int = Field(
        default=1,
        ge=1,
        description="Channel delta applied by channel_up/channel_down.",
    )

    default_volume: int = Field(
        default=30,
        ge=0,
        le=100,
        description="Volume a freshly built device starts with.",
    )
    default_channel: int = Field(
        default=1,
        description="Channel a freshly built device starts on.",
    )
