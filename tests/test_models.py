from __future__ import annotations

import pytest
from pydantic import ValidationError

from property_cli.models import Listing


def test_listing_accepts_wire_keys(listing_data):
    listing = Listing.model_validate(listing_data)
    assert listing.square_footage == 2000
    assert listing.location == (37.7749, -122.4194)
    assert listing.latitude == 37.7749
    assert listing.has_amenity("garage")
    assert not listing.has_amenity("pool")


def test_listing_dumps_wire_keys(listing_data):
    dumped = Listing.model_validate(listing_data).to_json_dict()
    assert dumped == listing_data


def test_listing_is_immutable(make_listing):
    listing = make_listing()
    with pytest.raises(ValidationError):
        listing.price = 1
    with pytest.raises(TypeError):
        listing.amenities["pool"] = True
    assert not listing.has_amenity("pool")


def test_listing_copies_input_amenities(listing_data):
    listing = Listing.model_validate(listing_data)
    listing_data["ammenities"]["pool"] = True
    assert not listing.has_amenity("pool")
    assert isinstance(listing.to_json_dict()["ammenities"], dict)


@pytest.mark.parametrize(
    "field,value",
    [
        ("squareFootage", 999),
        ("price", 1_500_001),
        ("rooms", 0),
        ("bathrooms", 6),
        ("lighting", "dim"),
    ],
)
def test_listing_rejects_out_of_range(listing_data, field, value):
    listing_data[field] = value
    with pytest.raises(ValidationError):
        Listing.model_validate(listing_data)


def test_listing_rejects_unknown_amenity(listing_data):
    listing_data["ammenities"]["sauna"] = True
    with pytest.raises(ValidationError):
        Listing.model_validate(listing_data)
