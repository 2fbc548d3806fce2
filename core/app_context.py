# core/app_context.py
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional

from core.config import ProxySettings, get_settings
from data_sources.roblox_api import RobloxEconomyAPI, RobloxGamesAPI


@dataclass
class AppContext:
    """
    Aggregates the services the API routes use.

    - settings: runtime configuration
    - games_api: game-pass listing client
    - economy_api: per-asset price/availability client

    Call close() on shutdown to release the HTTP sessions.
    """
    settings: ProxySettings
    games_api: RobloxGamesAPI
    economy_api: RobloxEconomyAPI

    def close(self) -> None:
        """Close the upstream client sessions."""
        logger = logging.getLogger(__name__)
        logger.info("Closing AppContext resources...")

        for client in (self.games_api, self.economy_api):
            try:
                client.close()
            except Exception as e:
                logger.error(f"Error closing {client.__class__.__name__}: {e}")

        logger.info("AppContext resources closed")


def create_app_context(settings: Optional[ProxySettings] = None) -> AppContext:
    settings = settings or get_settings()

    games_api = RobloxGamesAPI(
        base_url=settings.games_base_url,
        timeout=settings.listing_timeout_seconds,
        user_agent=settings.user_agent,
        page_limit=settings.listing_page_limit,
    )
    economy_api = RobloxEconomyAPI(
        base_url=settings.economy_base_url,
        timeout=settings.detail_timeout_seconds,
        user_agent=settings.user_agent,
    )

    return AppContext(
        settings=settings,
        games_api=games_api,
        economy_api=economy_api,
    )
