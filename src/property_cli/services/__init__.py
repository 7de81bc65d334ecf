"""Service layer for listing generation."""

from .generator import ListingGenerator

__all__ = ["ListingGenerator"]
