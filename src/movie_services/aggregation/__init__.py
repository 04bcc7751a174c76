"""Read-side composition across peer services."""

from .aggregator import MovieAggregator

__all__ = ["MovieAggregator"]
