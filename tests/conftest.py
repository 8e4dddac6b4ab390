"""Shared fixtures."""
import copy
from datetime import datetime, timezone

import pytest


SHOP_PAYLOAD = {
    "status": 200,
    "data": {
        "hash": "abc123",
        "date": "2025-01-05T00:00:00Z",
        "vbuckIcon": "https://fortnite-api.com/images/vbuck.png",
        "entries": [
            {
                "offerId": "v2:/bundle-1",
                "regularPrice": 2000,
                "finalPrice": 1600,
                "inDate": "2025-01-04T00:00:00Z",
                "outDate": "2025-01-06T23:59:59.999Z",
                "bundle": {"name": "Ninja Pack", "image": "https://img.example/bundle.png"},
                "banner": {"value": "New!", "backendValue": "New"},
                "layout": {"name": "Jam Pack & Friends", "category": "Bundles"},
                "newDisplayAsset": {
                    "renderImages": [{"image": "https://img.example/render.png"}]
                },
                "brItems": [
                    {
                        "name": "Ninja",
                        "description": "Ready for <anything>.",
                        "type": {"value": "outfit", "displayValue": "Outfit"},
                        "rarity": {"value": "legendary", "displayValue": "Legendary"},
                        "images": {"icon": "https://img.example/ninja-icon.png"},
                    },
                    {"name": "Dual Katanas", "type": {"displayValue": "Pickaxe"}},
                ],
            },
            {
                "offerId": "v2:/track-1",
                "regularPrice": 500,
                "finalPrice": 500,
                "layout": {"category": "Jam Tracks"},
                "tracks": [{"title": "Song \"One\"", "artist": "Band"}, {"artist": "Nobody"}],
            },
        ],
    },
}


@pytest.fixture
def shop_payload():
    """A fresh copy of a realistic shop payload."""
    return copy.deepcopy(SHOP_PAYLOAD)


@pytest.fixture
def fixed_now():
    """Clock returning 2030-01-02 00:00 UTC."""
    return lambda: datetime(2030, 1, 2, tzinfo=timezone.utc)
