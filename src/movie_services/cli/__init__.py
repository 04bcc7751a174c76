"""Command-line interface for the movie services."""
