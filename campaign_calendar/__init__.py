"""Campaign scheduling calendar service."""

__version__ = "0.1.0"
