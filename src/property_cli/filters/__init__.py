"""Search predicates and the engine that combines them."""

from .engine import Comparison, FilterEngine, LocationRadius, SearchCriteria
from .predicates import (
    compare_number,
    has_amenities,
    matches_description,
    parse_comparison_option,
    parse_location_option,
    validate_amenities,
    within_radius,
)

__all__ = [
    "Comparison",
    "FilterEngine",
    "LocationRadius",
    "SearchCriteria",
    "compare_number",
    "has_amenities",
    "matches_description",
    "parse_comparison_option",
    "parse_location_option",
    "validate_amenities",
    "within_radius",
]
