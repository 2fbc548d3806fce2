"""
api.tests.conftest - Pytest fixtures for API tests.

Provides a test client whose app context holds mocked upstream clients.
"""

from __future__ import annotations

from typing import Generator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from core.models import ItemDetail, ListingStub
from data_sources.base_api import UpstreamHTTPError


DETAILS = {
    101: ItemDetail(asset_id=101, name="VIP", description="VIP perks", price=250, is_for_sale=True),
    102: ItemDetail(asset_id=102, name="Speed Coil", description="", price=75, is_for_sale=True),
    103: ItemDetail(asset_id=103, name="Retired Hat", description="", price=0, is_for_sale=False),
}


def fake_fetch_detail(item_id):
    """Economy lookup stand-in: known ids resolve, anything else is a 404."""
    try:
        return DETAILS[int(item_id)]
    except (KeyError, ValueError):
        raise UpstreamHTTPError("API error 404: Asset not found", status_code=404)


@pytest.fixture
def listing_stubs() -> list[ListingStub]:
    """Listing of a game with two passes for sale and one retired."""
    return [
        ListingStub(id=101, name="VIP", display_name="VIP Access", description="VIP perks",
                    icon_image_asset_id=9001),
        ListingStub(id=102, name="Speed Coil", display_name="Speed Coil"),
        ListingStub(id=103, name="Retired Hat", display_name="Retired Hat"),
    ]


@pytest.fixture
def mock_games_api(listing_stubs: list[ListingStub]) -> MagicMock:
    api = MagicMock()
    api.fetch_listings.return_value = listing_stubs
    return api


@pytest.fixture
def mock_economy_api() -> MagicMock:
    api = MagicMock()
    api.fetch_detail.side_effect = fake_fetch_detail
    return api


@pytest.fixture
def mock_app_context(mock_games_api: MagicMock, mock_economy_api: MagicMock) -> MagicMock:
    """Create a mock app context with the upstream clients mocked."""
    ctx = MagicMock()
    ctx.games_api = mock_games_api
    ctx.economy_api = mock_economy_api
    ctx.settings.fanout_max_workers = None
    ctx.close = MagicMock()
    return ctx


@pytest.fixture
def client(mock_app_context: MagicMock) -> Generator[TestClient, None, None]:
    """Create a test client with mocked dependencies."""
    # Import here so settings are read after test env setup
    from api.main import app
    from api.dependencies import get_app_context

    app.dependency_overrides[get_app_context] = lambda: mock_app_context

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
