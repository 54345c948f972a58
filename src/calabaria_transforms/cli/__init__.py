"""Command line interface for calabaria-transforms."""
