"""
Roblox API clients for game pass listings and economy details.

Two upstream services are involved:
- games.roblox.com lists the passes attached to a game (names, icons).
- economy.roblox.com holds the authoritative price and sale flag per asset.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from core.models import ItemDetail, ItemId, ListingStub
from data_sources.base_api import (
    BaseAPIClient,
    TimeoutType,
    UpstreamMalformedPayload,
)

logger = logging.getLogger(__name__)

GAMES_BASE_URL = "https://games.roblox.com"
ECONOMY_BASE_URL = "https://economy.roblox.com"


class RobloxGamesAPI(BaseAPIClient):
    """
    Client for the games listing service.

    Only the game-passes listing is used: one page of up to `page_limit`
    entries sorted ascending.
    """

    def __init__(
        self,
        base_url: str = GAMES_BASE_URL,
        timeout: TimeoutType = 10,
        user_agent: Optional[str] = None,
        page_limit: int = 100,
    ):
        super().__init__(base_url=base_url, user_agent=user_agent, timeout=timeout)
        self.page_limit = page_limit

    def fetch_listings(self, game_id: ItemId) -> List[ListingStub]:
        """
        Get the game passes listed for a game.

        An absent or malformed payload means "no passes" and yields an empty
        list. Transport and HTTP failures propagate as UpstreamError.

        Args:
            game_id: Universe/game id as given by the caller

        Returns:
            List of ListingStub, in upstream order
        """
        try:
            payload = self.get(
                f"v1/games/{game_id}/game-passes",
                params={"limit": self.page_limit, "sortOrder": "Asc"},
            )
        except UpstreamMalformedPayload as e:
            logger.info(f"Unreadable listing payload for game {game_id}: {e}")
            return []

        entries = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(entries, list):
            logger.info(f"No game pass data in listing for game {game_id}")
            return []

        stubs: List[ListingStub] = []
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            stub = ListingStub.from_api(entry)
            if stub is None:
                logger.debug(f"Skipping listing entry without id: {entry!r}")
                continue
            stubs.append(stub)
        return stubs


class RobloxEconomyAPI(BaseAPIClient):
    """Client for the economy asset-details service."""

    def __init__(
        self,
        base_url: str = ECONOMY_BASE_URL,
        timeout: TimeoutType = 5,
        user_agent: Optional[str] = None,
    ):
        super().__init__(base_url=base_url, user_agent=user_agent, timeout=timeout)

    def fetch_detail(self, item_id: ItemId) -> ItemDetail:
        """
        Get price and sale status for a single asset.

        Raises:
            UpstreamError: on non-2xx, timeout, network failure, or a body
                that is not a JSON object
        """
        payload: Any = self.get(f"v2/assets/{item_id}/details")
        if not isinstance(payload, dict):
            raise UpstreamMalformedPayload(
                f"Expected an object from asset details for {item_id}, "
                f"got {type(payload).__name__}"
            )
        return ItemDetail.from_api(payload, item_id=item_id)


__all__ = [
    "RobloxGamesAPI",
    "RobloxEconomyAPI",
    "GAMES_BASE_URL",
    "ECONOMY_BASE_URL",
]
