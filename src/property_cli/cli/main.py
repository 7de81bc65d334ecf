from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional

from property_cli import __version__
from property_cli.config import Settings
from property_cli.errors import PropertyCliError
from property_cli.filters import FilterEngine, SearchCriteria
from property_cli.repositories.json_store import JsonListingStore
from property_cli.utils.formatting import render_details, render_table
from property_cli.utils.log import setup_logging

logger = logging.getLogger(__name__)


def _error(prefix: str, exc: Exception) -> None:
    print(f"{prefix}: {exc}", file=sys.stderr)


def cmd_generate(store: JsonListingStore, args: argparse.Namespace) -> None:
    try:
        count = int(args.count)
    except ValueError:
        count = 0
    try:
        store.generate(count)
    except ValueError as exc:
        _error("Error generating properties", exc)
        return
    print(f"Generated {count} properties.")
    print(render_table(store.get_all(), store.keys()))


def cmd_list(store: JsonListingStore, args: argparse.Namespace) -> None:
    if not len(store):
        print("No properties available. Generate some using the generate command.")
        return
    print(render_table(store.get_all(), store.keys()))


def cmd_details(store: JsonListingStore, args: argparse.Namespace) -> None:
    # index is the key assigned at generation time, not a row in a search result
    try:
        listing = store.get(int(args.index))
    except ValueError:
        listing = None
    if listing is None:
        _error("Error", PropertyCliError("Invalid property index"))
        return
    print(render_details(listing))


def cmd_search(store: JsonListingStore, args: argparse.Namespace) -> None:
    try:
        criteria = SearchCriteria.from_options(
            square_feet=args.square_feet,
            price=args.price,
            rooms=args.rooms,
            bathrooms=args.bathrooms,
            amenities=args.amenities,
            description=args.description,
            location=args.location,
        )
    except PropertyCliError as exc:
        logger.debug("Rejected criterion %s", getattr(exc, "criterion", None))
        _error("Error", exc)
        return
    engine = FilterEngine(criteria)
    for line in engine.describe():
        print(line)
    matched = engine.apply(store.get_all())
    if not matched:
        print("No properties found matching your criteria.")
        return
    print(f"\nFound {len(matched)} matching properties:")
    print(render_table(matched))


COMMANDS: Dict[str, Callable[[JsonListingStore, argparse.Namespace], None]] = {
    "generate": cmd_generate,
    "list": cmd_list,
    "details": cmd_details,
    "search": cmd_search,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="property-cli", description="A CLI tool for managing property data"
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("--data-file", help="Path to the properties JSON file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("generate", help="Generate random properties")
    p.add_argument("count", help="Number of properties to generate")

    sub.add_parser("list", help="List all properties")

    p = sub.add_parser("details", help="Show detailed information about a property")
    p.add_argument("index", help="Index of the property")

    p = sub.add_parser("search", help="Search properties by criteria")
    p.add_argument("-sf", "--square-feet", metavar="OP,VALUE", help="Filter by square feet (eq,lt,gt,value)")
    p.add_argument("-p", "--price", metavar="OP,VALUE", help="Filter by price (eq,lt,gt,value)")
    p.add_argument("-r", "--rooms", metavar="OP,VALUE", help="Filter by rooms (eq,lt,gt,value)")
    p.add_argument("-b", "--bathrooms", metavar="OP,VALUE", help="Filter by bathrooms (eq,lt,gt,value)")
    p.add_argument("-a", "--amenities", nargs="+", metavar="NAME", help="Required amenities (space-separated)")
    p.add_argument("-d", "--description", metavar="TEXT", help="Text to search in description")
    p.add_argument(
        "-l",
        "--location",
        metavar="LAT,LON,RADIUS",
        help="Filter by location (latitude,longitude,radiusInKm); use --location=... for a negative latitude",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    if args.data_file:
        settings.data_file = args.data_file
    setup_logging(args.verbose, settings.log_level)

    store = JsonListingStore(settings=settings)
    COMMANDS[args.command](store, args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
