"""Bakery POS backend."""

__version__ = "0.1.0"
