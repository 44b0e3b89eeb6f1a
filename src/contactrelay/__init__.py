"""Contact form relay service."""

__version__ = "0.1.0"
