"""Single-criterion predicates and the option mini-formats that feed them."""

from __future__ import annotations

import math
from typing import Iterable, List, Tuple, Union

from property_cli.errors import CriterionError
from property_cli.models import AMENITY_TYPES, NUMBER_FIELDS, Listing
from property_cli.utils.geo import calculate_distance


OPERATORS = ("eq", "lt", "gt")

Number = Union[int, float]


def _attr(field: str) -> str:
    if field in NUMBER_FIELDS:
        return NUMBER_FIELDS[field]
    if field in NUMBER_FIELDS.values():
        return field
    raise CriterionError(f"Unknown numeric field: {field}", criterion=field)


def compare_number(field: str, operator: str, value: Number, listing: Listing) -> bool:
    actual = getattr(listing, _attr(field))
    if operator == "eq":
        return actual == value
    if operator == "lt":
        return actual < value
    if operator == "gt":
        return actual > value
    return False


def validate_amenities(names: Iterable[str]) -> List[str]:
    out = []
    for name in names:
        if name not in AMENITY_TYPES:
            raise CriterionError(
                f"Invalid amenity: {name}. Available options: {', '.join(AMENITY_TYPES)}",
                criterion="amenities",
            )
        out.append(name)
    return out


def has_amenities(required: Iterable[str], listing: Listing) -> bool:
    return all(listing.has_amenity(name) for name in required)


def matches_description(text: str, listing: Listing) -> bool:
    return text.lower() in listing.description.lower()


def within_radius(lat: float, lon: float, radius_km: float, listing: Listing) -> bool:
    return calculate_distance(lat, lon, listing.latitude, listing.longitude) <= radius_km


def as_number(value: float) -> Number:
    """Collapse integral floats to ``int`` so ``2500.0`` reads back as ``2500``."""
    return int(value) if float(value).is_integer() else value


def _to_number(raw: str) -> Number:
    value = float(raw.strip())
    if not math.isfinite(value):
        raise ValueError(raw)
    return as_number(value)


def parse_comparison_option(option: str) -> Tuple[str, Number]:
    """Parse ``operator,value`` (e.g. ``gt,2500``)."""
    # extra comma-separated fields after the value are ignored
    parts = (option or "").split(",")
    operator = parts[0].strip()
    raw = parts[1] if len(parts) > 1 else ""
    if operator not in OPERATORS:
        raise CriterionError("Invalid operator. Use eq, lt, or gt")
    try:
        value = _to_number(raw)
    except ValueError:
        raise CriterionError("Invalid number value") from None
    return operator, value


def parse_location_option(option: str) -> Tuple[float, float, float]:
    """Parse ``latitude,longitude,radiusInKm``."""
    parts = (option or "").split(",")
    try:
        if len(parts) != 3:
            raise ValueError(option)
        lat, lon, radius = (float(p.strip()) for p in parts)
        if not all(math.isfinite(v) for v in (lat, lon, radius)):
            raise ValueError(option)
    except ValueError:
        raise CriterionError(
            "Invalid location format. Use: latitude,longitude,radiusInKm", criterion="location"
        ) from None
    return lat, lon, radius
