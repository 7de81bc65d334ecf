"""Synthetic listing generation backed by Faker."""

from __future__ import annotations

from typing import Dict, Iterator, Optional

from faker import Faker

from property_cli.models import AMENITY_TYPES, LIGHTING_OPTIONS, RANGES, Listing


class ListingGenerator:
    """Produce random listings within the documented field ranges.

    Passing ``seed`` makes the sequence reproducible.
    """

    def __init__(self, seed: Optional[int] = None, faker: Optional[Faker] = None) -> None:
        self.faker = faker or Faker()
        if seed is not None:
            self.faker.seed_instance(seed)

    def _int(self, key: str) -> int:
        lo, hi = RANGES[key]
        return self.faker.random_int(min=lo, max=hi)

    def _amenities(self) -> Dict[str, bool]:
        return {name: self.faker.pybool() for name in AMENITY_TYPES}

    def generate(self) -> Listing:
        return Listing(
            square_footage=self._int("sqft"),
            lighting=self.faker.random_element(LIGHTING_OPTIONS),
            price=self._int("price"),
            rooms=self._int("rooms"),
            bathrooms=self._int("baths"),
            location=(float(self.faker.latitude()), float(self.faker.longitude())),
            description=self.faker.paragraph(),
            amenities=self._amenities(),
        )

    def generate_many(self, count: int) -> Iterator[Listing]:
        for _ in range(count):
            yield self.generate()
