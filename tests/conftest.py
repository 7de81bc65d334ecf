from __future__ import annotations

from typing import Callable

import pytest

from property_cli.models import Listing


BASE = {
    "squareFootage": 2000,
    "lighting": "medium",
    "price": 300000,
    "rooms": 3,
    "bathrooms": 2,
    "location": [37.7749, -122.4194],
    "description": "A beautiful modern home",
    "ammenities": {"yard": True, "garage": True, "pool": False, "patio": True, "fireplace": False},
}


@pytest.fixture
def listing_data() -> dict:
    return {**BASE, "ammenities": dict(BASE["ammenities"])}


@pytest.fixture
def make_listing() -> Callable[..., Listing]:
    def _make(**overrides: object) -> Listing:
        data = {**BASE, "ammenities": dict(BASE["ammenities"])}
        amenities = overrides.pop("amenities", None)
        if amenities:
            data["ammenities"].update(amenities)
        data.update(overrides)
        return Listing.model_validate(data)

    return _make


@pytest.fixture
def three_listings(make_listing) -> list:
    return [
        make_listing(),
        make_listing(
            squareFootage=3000,
            price=500000,
            rooms=4,
            bathrooms=3,
            description="A spacious family home",
        ),
        make_listing(squareFootage=1500, price=250000, rooms=2, bathrooms=1, amenities={"pool": True}),
    ]
