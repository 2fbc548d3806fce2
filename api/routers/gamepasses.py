"""
api.routers.gamepasses - Game pass lookup endpoints.

Provides the for-sale game passes of a game (listing enriched with prices)
and the details of a single game pass.

Handlers are plain `def` so FastAPI runs them in its threadpool; the
blocking upstream calls then never stall the event loop.
"""

from __future__ import annotations

import logging
from typing import Union

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_app_context
from api.middleware import error_response
from api.models import (
    ErrorResponse,
    GamePassDetail,
    GamePassListing,
    GamePassResponse,
    GamePassesErrorResponse,
    GamePassesResponse,
)
from core.app_context import AppContext
from core.enrichment import enrich_listings

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "/gamepasses/{game_id}",
    response_model=GamePassesResponse,
    responses={500: {"model": GamePassesErrorResponse}},
)
def get_gamepasses(
    game_id: str,
    ctx: AppContext = Depends(get_app_context),
) -> Union[GamePassesResponse, JSONResponse]:
    """
    Get every game pass of a game that is currently for sale.

    The listing is fetched first; each pass is then priced through the
    economy API in parallel. Passes whose lookup fails are treated as not
    for sale and dropped.
    """
    logger.info(f"[API] Fetching gamepasses for game: {game_id}")

    try:
        stubs = ctx.games_api.fetch_listings(game_id)

        if not stubs:
            logger.info(f"[API] No gamepasses found for game {game_id}")
            return GamePassesResponse(success=True, game_id=game_id, count=0, gamepasses=[])

        logger.info(f"[API] Found {len(stubs)} gamepasses")

        for_sale = enrich_listings(
            stubs,
            ctx.economy_api.fetch_detail,
            max_workers=ctx.settings.fanout_max_workers,
        )

        logger.info(f"[API] Returning {len(for_sale)} gamepasses for sale")

        return GamePassesResponse(
            success=True,
            game_id=game_id,
            count=len(for_sale),
            gamepasses=[GamePassListing.from_listing(listing) for listing in for_sale],
        )

    except Exception as e:
        logger.error(f"[API] Error fetching gamepasses: {e}")
        return error_response(500, str(e), gameId=game_id)


@router.get(
    "/gamepass/{pass_id}",
    response_model=GamePassResponse,
    responses={500: {"model": ErrorResponse}},
)
def get_gamepass(
    pass_id: str,
    ctx: AppContext = Depends(get_app_context),
) -> Union[GamePassResponse, JSONResponse]:
    """Get price and sale status for a single game pass."""
    logger.info(f"[API] Fetching details for gamepass: {pass_id}")

    try:
        detail = ctx.economy_api.fetch_detail(pass_id)
        return GamePassResponse(success=True, gamepass=GamePassDetail.from_detail(detail))

    except Exception as e:
        logger.error(f"[API] Error fetching gamepass {pass_id}: {e}")
        return error_response(500, str(e))
