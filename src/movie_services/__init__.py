"""Movie info, review, and aggregation microservices."""

__version__ = "0.1.0"
