"""
api.models - Pydantic models for API response schemas.

Field names are snake_case in Python and camelCase on the wire
(gameId, displayName, isForSale, iconImageAssetId).
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.models import EnrichedListing, ItemDetail

ItemIdField = Union[int, str]


class CamelModel(BaseModel):
    """Base model serialising field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ==============================================================================
# Service Models
# ==============================================================================


class ServiceInfoResponse(CamelModel):
    """Response model for the root endpoint."""

    status: str = Field(..., description="Service status", examples=["online"])
    service: str = Field(..., description="Service name")
    endpoints: dict[str, str] = Field(
        ..., description="Available endpoints and what they return"
    )


class HealthResponse(CamelModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status", examples=["healthy"])
    timestamp: str = Field(
        ..., description="ISO-8601 UTC time of the check",
        examples=["2025-11-30T12:00:00.000Z"],
    )


# ==============================================================================
# Game Pass Models
# ==============================================================================


class GamePassListing(CamelModel):
    """A game pass enriched with its price and sale status."""

    id: ItemIdField = Field(..., description="Game pass id", examples=[1234567])
    name: str = Field(..., description="Game pass name")
    display_name: str = Field(..., description="Display name (falls back to name)")
    description: str = Field(default="", description="Description")
    price: int = Field(default=0, description="Price in Robux", examples=[100])
    is_for_sale: bool = Field(default=False, description="Currently purchasable")
    icon_image_asset_id: int = Field(default=0, description="Icon asset id")

    @classmethod
    def from_listing(cls, listing: EnrichedListing) -> "GamePassListing":
        return cls(**listing.to_dict())


class GamePassesResponse(CamelModel):
    """Response model for the game passes of a game."""

    success: bool = Field(..., description="Whether the lookup succeeded")
    game_id: str = Field(..., description="Game id as requested")
    count: int = Field(..., ge=0, description="Number of passes for sale")
    gamepasses: list[GamePassListing] = Field(
        default_factory=list, description="Game passes currently for sale"
    )


class GamePassDetail(CamelModel):
    """Price and sale status of a single game pass."""

    id: ItemIdField = Field(..., description="Asset id", examples=[999])
    name: str = Field(default="", description="Game pass name")
    description: str = Field(default="", description="Description")
    price: int = Field(default=0, description="Price in Robux")
    is_for_sale: bool = Field(default=False, description="Currently purchasable")

    @classmethod
    def from_detail(cls, detail: ItemDetail) -> "GamePassDetail":
        return cls(
            id=detail.asset_id,
            name=detail.name,
            description=detail.description,
            price=detail.price,
            is_for_sale=detail.is_for_sale,
        )


class GamePassResponse(CamelModel):
    """Response model for a single game pass lookup."""

    success: bool = Field(..., description="Whether the lookup succeeded")
    gamepass: GamePassDetail = Field(..., description="Game pass details")


# ==============================================================================
# Error Models
# ==============================================================================


class ErrorResponse(CamelModel):
    """Error envelope returned with HTTP 500."""

    success: bool = Field(default=False, description="Always false")
    error: str = Field(..., description="Error message")


class GamePassesErrorResponse(ErrorResponse):
    """Error envelope for the game passes listing, echoing the game id."""

    game_id: str = Field(..., description="Game id as requested")
