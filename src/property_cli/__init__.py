"""Generate, store and search synthetic real-estate listings."""

__version__ = "1.0.0"
