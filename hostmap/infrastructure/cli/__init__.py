"""Command-line interface for hostmap."""
