from __future__ import annotations

from typing import Optional


class PropertyCliError(Exception):
    """Base class for errors reported to the user at the command boundary."""


class CriterionError(PropertyCliError, ValueError):
    """A search criterion could not be parsed or validated."""

    def __init__(self, message: str, criterion: Optional[str] = None) -> None:
        super().__init__(message)
        self.criterion = criterion
