"""Data models for synthetic property listings."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Literal, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


AMENITY_TYPES: Tuple[str, ...] = ("yard", "garage", "pool", "patio", "fireplace")
LIGHTING_OPTIONS: Tuple[str, ...] = ("low", "medium", "high")

# Inclusive (min, max) bounds for generated numeric fields
RANGES: Dict[str, Tuple[int, int]] = {
    "sqft": (1000, 5000),
    "price": (200_000, 1_500_000),
    "rooms": (1, 6),
    "baths": (1, 5),
}

# Comparable field names as exposed on the command line / JSON -> model attribute
NUMBER_FIELDS: Dict[str, str] = {
    "squareFootage": "square_footage",
    "price": "price",
    "rooms": "rooms",
    "bathrooms": "bathrooms",
}

Lighting = Literal["low", "medium", "high"]


class Listing(BaseModel):
    """A single synthetic property listing.

    Serialized with camelCase keys; the amenity map keeps the historical
    ``ammenities`` key so existing data files stay readable.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    square_footage: int = Field(alias="squareFootage", ge=RANGES["sqft"][0], le=RANGES["sqft"][1])
    lighting: Lighting
    price: int = Field(ge=RANGES["price"][0], le=RANGES["price"][1])
    rooms: int = Field(ge=RANGES["rooms"][0], le=RANGES["rooms"][1])
    bathrooms: int = Field(ge=RANGES["baths"][0], le=RANGES["baths"][1])
    location: Tuple[float, float]
    description: str
    amenities: Mapping[str, bool] = Field(default_factory=dict, alias="ammenities", validate_default=True)

    @field_validator("amenities")
    @classmethod
    def _known_amenities(cls, value: Mapping[str, bool]) -> Mapping[str, bool]:
        unknown = [k for k in value if k not in AMENITY_TYPES]
        if unknown:
            raise ValueError(f"unknown amenities: {', '.join(unknown)}")
        # read-only view; Listing is frozen all the way down
        return MappingProxyType(dict(value))

    @field_serializer("amenities")
    def _dump_amenities(self, value: Mapping[str, bool]) -> Dict[str, bool]:
        return dict(value)

    @property
    def latitude(self) -> float:
        return self.location[0]

    @property
    def longitude(self) -> float:
        return self.location[1]

    def has_amenity(self, name: str) -> bool:
        return bool(self.amenities.get(name, False))

    def to_json_dict(self) -> dict:
        """Dump using the on-disk key names."""
        return self.model_dump(mode="json", by_alias=True)
