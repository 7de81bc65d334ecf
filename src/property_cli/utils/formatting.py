"""Console rendering for listings."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Union

from tabulate import tabulate

from property_cli.models import Listing


def format_currency(amount: Union[int, float]) -> str:
    if isinstance(amount, float) and amount.is_integer():
        amount = int(amount)
    if isinstance(amount, int):
        return f"${amount:,}"
    return "$" + f"{amount:,.2f}".rstrip("0").rstrip(".")


def listing_to_row(listing: Listing) -> Dict[str, object]:
    return {
        "sqft": listing.square_footage,
        "price": format_currency(listing.price),
        "rooms": listing.rooms,
        "baths": listing.bathrooms,
        "lighting": listing.lighting,
    }


def render_table(listings: Sequence[Listing], indexes: Optional[Iterable[int]] = None) -> str:
    """Tabulate listings; ``indexes`` labels the rows (defaults to positions)."""
    labels = list(indexes) if indexes is not None else list(range(len(listings)))
    rows: List[Dict[str, object]] = []
    for label, listing in zip(labels, listings):
        row: Dict[str, object] = {"index": label}
        row.update(listing_to_row(listing))
        rows.append(row)
    return tabulate(rows, headers="keys", tablefmt="github")


def render_details(listing: Listing) -> str:
    lines = [
        "",
        "Property Details:",
        "----------------",
        f"Square Footage: {listing.square_footage}",
        f"Lighting: {listing.lighting}",
        f"Price: {format_currency(listing.price)}",
        f"Rooms: {listing.rooms}",
        f"Bathrooms: {listing.bathrooms}",
        f"Location: {listing.latitude}, {listing.longitude}",
        f"Description: {listing.description}",
        "",
        "Amenities:",
    ]
    for name, present in listing.amenities.items():
        lines.append(f"- {name}: {'✓' if present else '✗'}")
    return "\n".join(lines)
