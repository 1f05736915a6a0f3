"""hostmap - hostname-to-site domain management."""

__version__ = "0.1.0"
