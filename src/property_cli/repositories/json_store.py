"""JSON-file persistence for generated listings.

Listings are kept in memory keyed by the integer index assigned at
generation time. On disk the keys become decimal strings:

    {"0": {"squareFootage": 2000, ...}, "1": {...}}
"""

from __future__ import annotations

import json
import logging
from itertools import islice
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

from pydantic import ValidationError

from property_cli.config import Settings
from property_cli.models import Listing
from property_cli.services.generator import ListingGenerator

logger = logging.getLogger(__name__)


def _parse_document(data: object) -> Dict[int, Listing]:
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object keyed by index")
    out: Dict[int, Listing] = {}
    for key, value in data.items():
        index = int(key)
        if index < 0:
            raise ValueError(f"negative index: {key}")
        if index in out:
            raise ValueError(f"duplicate index: {key}")
        out[index] = Listing.model_validate(value)
    return out


class JsonListingStore:
    """In-memory listing map backed by a single JSON document.

    Not safe for concurrent writers: two processes saving the same file
    end up with whichever wrote last.
    """

    def __init__(
        self,
        path: Union[str, Path, None] = None,
        generator: Optional[ListingGenerator] = None,
        settings: Optional[Settings] = None,
        autoload: bool = True,
    ) -> None:
        self.settings = settings or Settings()
        self.path = Path.cwd() / path if path is not None else self.settings.data_path()
        self.generator = generator or ListingGenerator(seed=self.settings.seed)
        self.chunk_size = max(1, self.settings.chunk_size)
        self._listings: Dict[int, Listing] = {}
        if autoload:
            self.load()

    def __len__(self) -> int:
        return len(self._listings)

    def load(self) -> None:
        if not self.path.exists():
            logger.debug("No data file at %s", self.path)
            return
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            listings = _parse_document(data)
        except (OSError, ValueError, ValidationError) as exc:
            # json.JSONDecodeError is a ValueError
            logger.error("Error loading properties from %s: %s", self.path, exc)
            return
        self._listings = listings
        logger.info("Loaded %d properties from file.", len(self._listings))

    def save(self) -> None:
        data = {str(k): v.to_json_dict() for k, v in self._listings.items()}
        try:
            self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as exc:
            logger.error("Error saving properties to %s: %s", self.path, exc)
            return
        logger.info("Saved %d properties to file.", len(self._listings))

    def clear(self) -> None:
        self._listings.clear()

    def generate(self, count: int) -> None:
        """Replace all listings with ``count`` fresh ones keyed 0..count-1, then save."""
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise ValueError("Please provide a valid positive number")
        self.clear()
        stream = islice(self.generator.generate_many(count), count)
        start = 0
        for batch in iter(lambda: list(islice(stream, self.chunk_size)), []):
            for offset, listing in enumerate(batch):
                self._listings[start + offset] = listing
            start += len(batch)
            logger.debug("Generated %d/%d properties", start, count)
        if start < count:
            logger.warning("Generator produced %d of %d requested properties", start, count)
        self.save()

    def items(self) -> Iterator[Tuple[int, Listing]]:
        for key in sorted(self._listings):
            yield key, self._listings[key]

    def keys(self) -> List[int]:
        return sorted(self._listings)

    def get_all(self) -> List[Listing]:
        return [listing for _, listing in self.items()]

    def get(self, index: int) -> Optional[Listing]:
        return self._listings.get(index)
