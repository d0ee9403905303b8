"""Implementation packages for DiffKit."""

__version__ = "0.1.0"
