from __future__ import annotations

from typing import Iterable, List, Literal, Optional, Sequence, Union

from pydantic import BaseModel

from property_cli.errors import CriterionError
from property_cli.models import Listing
from property_cli.utils.formatting import format_currency

from .predicates import (
    as_number,
    compare_number,
    has_amenities,
    matches_description,
    parse_comparison_option,
    parse_location_option,
    validate_amenities,
    within_radius,
)


class Comparison(BaseModel):
    operator: Literal["eq", "lt", "gt"]
    value: Union[int, float]


class LocationRadius(BaseModel):
    latitude: float
    longitude: float
    radius_km: float


# criterion name -> (listing field, label used in summaries)
_NUMERIC = (
    ("square_feet", "squareFootage", "square feet"),
    ("price", "price", "price"),
    ("rooms", "rooms", "rooms"),
    ("bathrooms", "bathrooms", "bathrooms"),
)


class SearchCriteria(BaseModel):
    square_feet: Optional[Comparison] = None
    price: Optional[Comparison] = None
    rooms: Optional[Comparison] = None
    bathrooms: Optional[Comparison] = None
    amenities: List[str] = []
    description: Optional[str] = None
    location: Optional[LocationRadius] = None

    @classmethod
    def from_options(
        cls,
        square_feet: Optional[str] = None,
        price: Optional[str] = None,
        rooms: Optional[str] = None,
        bathrooms: Optional[str] = None,
        amenities: Optional[Sequence[str]] = None,
        description: Optional[str] = None,
        location: Optional[str] = None,
    ) -> "SearchCriteria":
        """Build criteria from raw command-line strings.

        Every criterion is validated here so nothing is filtered until all
        of them are known to be good. Raises ``CriterionError`` naming the
        offending criterion.
        """
        raw = {"square_feet": square_feet, "price": price, "rooms": rooms, "bathrooms": bathrooms}
        fields: dict = {}
        for name, option in raw.items():
            if option is None:
                continue
            try:
                op, value = parse_comparison_option(option)
            except CriterionError as exc:
                raise CriterionError(str(exc), criterion=name) from None
            fields[name] = Comparison(operator=op, value=value)
        if amenities:
            fields["amenities"] = validate_amenities(amenities)
        if description:
            fields["description"] = description
        if location is not None:
            lat, lon, radius = parse_location_option(location)
            fields["location"] = LocationRadius(latitude=lat, longitude=lon, radius_km=radius)
        return cls(**fields)


class FilterEngine:
    """AND together every active criterion; absent criteria don't constrain."""

    def __init__(self, criteria: SearchCriteria) -> None:
        validate_amenities(criteria.amenities)
        self.criteria = criteria

    def matches(self, listing: Listing) -> bool:
        c = self.criteria
        for name, field, _ in _NUMERIC:
            cmp: Optional[Comparison] = getattr(c, name)
            if cmp is not None and not compare_number(field, cmp.operator, cmp.value, listing):
                return False
        if c.amenities and not has_amenities(c.amenities, listing):
            return False
        if c.description and not matches_description(c.description, listing):
            return False
        if c.location is not None and not within_radius(
            c.location.latitude, c.location.longitude, c.location.radius_km, listing
        ):
            return False
        return True

    def apply(self, listings: Iterable[Listing]) -> List[Listing]:
        return [l for l in listings if self.matches(l)]

    def describe(self) -> List[str]:
        c = self.criteria
        lines: List[str] = []
        for name, _, label in _NUMERIC:
            cmp = getattr(c, name)
            if cmp is None:
                continue
            shown = format_currency(cmp.value) if name == "price" else cmp.value
            lines.append(f"Filtering by {label} {cmp.operator} {shown}")
        if c.amenities:
            lines.append(f"Filtering by amenities: {', '.join(c.amenities)}")
        if c.description:
            lines.append(f'Filtering by description containing: "{c.description}"')
        if c.location is not None:
            loc = c.location
            lines.append(
                f"Filtering by location: {as_number(loc.radius_km)}km radius from "
                f"[{as_number(loc.latitude)}, {as_number(loc.longitude)}]"
            )
        return lines
