"""Tests for core.models record builders."""

import pytest

from core.models import EnrichedListing, ItemDetail, ListingStub

pytestmark = pytest.mark.unit


class TestListingStub:

    def test_from_api_full_entry(self):
        listing = ListingStub.from_api({
            "id": 10, "name": "VIP", "displayName": "VIP Room",
            "description": "x", "iconImageAssetId": 55, "sellerName": "ignored",
        })
        assert listing == ListingStub(id=10, name="VIP", display_name="VIP Room",
                                      description="x", icon_image_asset_id=55)

    def test_display_name_falls_back_to_name(self):
        assert ListingStub.from_api({"id": 1, "name": "VIP"}).display_name == "VIP"
        assert ListingStub.from_api({"id": 1, "name": "VIP", "displayName": ""}).display_name == "VIP"

    def test_null_description_and_icon(self):
        listing = ListingStub.from_api({"id": 1, "name": "VIP", "description": None,
                                        "iconImageAssetId": None})
        assert listing.description == ""
        assert listing.icon_image_asset_id == 0

    def test_missing_id_returns_none(self):
        assert ListingStub.from_api({"name": "orphan"}) is None


class TestItemDetail:

    def test_from_api(self):
        detail = ItemDetail.from_api(
            {"AssetId": 9, "Name": "N", "Description": "D", "PriceInRobux": 40, "IsForSale": True},
            item_id=9,
        )
        assert detail == ItemDetail(asset_id=9, name="N", description="D", price=40, is_for_sale=True)

    def test_missing_asset_id_uses_requested_id(self):
        assert ItemDetail.from_api({}, item_id="77").asset_id == "77"

    def test_unparseable_price_defaults_to_zero(self):
        detail = ItemDetail.from_api({"PriceInRobux": "free", "IsForSale": None}, item_id=1)
        assert detail.price == 0
        assert detail.is_for_sale is False


class TestEnrichedListing:

    def test_merge_without_detail_defaults(self):
        listing = EnrichedListing.merge(ListingStub(id=3, name="C"), None)

        assert listing.price == 0
        assert listing.is_for_sale is False
        assert listing.display_name == "C"

    def test_to_dict_uses_field_names(self):
        listing = EnrichedListing.merge(
            ListingStub(id=3, name="C", display_name="See"),
            ItemDetail(asset_id=3, price=5, is_for_sale=True),
        )
        assert listing.to_dict() == {
            "id": 3,
            "name": "C",
            "display_name": "See",
            "description": "",
            "price": 5,
            "is_for_sale": True,
            "icon_image_asset_id": 0,
        }
