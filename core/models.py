"""
Request-scoped records passed between the upstream clients, the
enrichment fan-out and the API layer.

Nothing here is persisted; instances live for a single HTTP request.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional, Union

ItemId = Union[int, str]


def _text(value: Any, default: str = "") -> str:
    if value is None:
        return default
    return str(value)


def _int(value: Any, default: int = 0) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class ListingStub:
    """Minimal game pass record returned by the bulk listing endpoint."""
    id: ItemId
    name: str
    display_name: str = ""
    description: str = ""
    icon_image_asset_id: int = 0

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Optional["ListingStub"]:
        """
        Build a stub from one entry of the listing payload.

        Missing optional fields fall back to defaults (displayName -> name).
        Returns None for entries without an id.
        """
        item_id = data.get("id")
        if item_id is None or isinstance(item_id, bool):
            return None
        name = _text(data.get("name"))
        return cls(
            id=item_id,
            name=name,
            display_name=_text(data.get("displayName")) or name,
            description=_text(data.get("description")),
            icon_image_asset_id=_int(data.get("iconImageAssetId")),
        )


@dataclass(frozen=True)
class ItemDetail:
    """Authoritative per-item record from the economy details endpoint."""
    asset_id: ItemId
    name: str = ""
    description: str = ""
    price: int = 0
    is_for_sale: bool = False

    @classmethod
    def from_api(cls, data: Mapping[str, Any], item_id: ItemId) -> "ItemDetail":
        """
        Build a detail record from the economy payload.

        Field renames or nulls upstream degrade to defaults instead of
        failing; item_id stands in for a missing AssetId.
        """
        asset_id = data.get("AssetId")
        return cls(
            asset_id=item_id if asset_id is None else asset_id,
            name=_text(data.get("Name")),
            description=_text(data.get("Description")),
            price=_int(data.get("PriceInRobux")),
            is_for_sale=bool(data.get("IsForSale") or False),
        )


@dataclass(frozen=True)
class EnrichedListing:
    """A listing stub merged with the price/availability of its detail."""
    id: ItemId
    name: str
    display_name: str
    description: str
    price: int
    is_for_sale: bool
    icon_image_asset_id: int

    @classmethod
    def merge(cls, stub: ListingStub, detail: Optional[ItemDetail]) -> "EnrichedListing":
        """
        Combine stub and detail. Price and sale flag come from the detail;
        a missing detail (failed lookup) yields price 0 / not for sale.
        """
        return cls(
            id=stub.id,
            name=stub.name,
            display_name=stub.display_name or stub.name,
            description=stub.description,
            price=detail.price if detail is not None else 0,
            is_for_sale=detail.is_for_sale if detail is not None else False,
            icon_image_asset_id=stub.icon_image_asset_id,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
