"""
Configuration for the GamePass proxy.

Settings come from environment variables (prefix GAMEPASS_PROXY_) and an
optional .env file in the working directory. The listening port also
honours the conventional bare PORT variable used by hosting platforms.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class ProxySettings(BaseSettings):
    """Runtime settings for the API server and its upstream clients."""

    model_config = SettingsConfigDict(
        env_prefix="GAMEPASS_PROXY_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    host: str = Field(default="0.0.0.0", description="Interface to bind.")
    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("GAMEPASS_PROXY_PORT", "PORT"),
        description="Listening port.",
    )

    games_base_url: str = Field(
        default="https://games.roblox.com",
        min_length=8,
        description="Base URL of the game-pass listing service.",
    )
    economy_base_url: str = Field(
        default="https://economy.roblox.com",
        min_length=8,
        description="Base URL of the asset details service.",
    )
    listing_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for the listing request (seconds).",
    )
    detail_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout for each per-pass detail request (seconds).",
    )
    listing_page_limit: int = Field(
        default=100,
        ge=1,
        le=100,
        description="Page size requested from the listing service.",
    )
    user_agent: str = Field(
        default="Roblox/WinInet",
        min_length=1,
        description="User-Agent sent to upstream services.",
    )

    fanout_max_workers: Optional[int] = Field(
        default=None,
        ge=1,
        description="Cap on concurrent detail lookups; unset means one per pass.",
    )

    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed by CORS.",
    )

    log_level: str = Field(default="INFO", description="Root log level.")
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path of a rotating log file.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> ProxySettings:
    """Process-wide settings, read once."""
    return ProxySettings()
