"""Domain models for property listings."""

from .listing import (
    AMENITY_TYPES,
    LIGHTING_OPTIONS,
    NUMBER_FIELDS,
    RANGES,
    Listing,
)

__all__ = ["AMENITY_TYPES", "LIGHTING_OPTIONS", "NUMBER_FIELDS", "RANGES", "Listing"]
