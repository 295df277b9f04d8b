"""Toy real-estate listing platform simulation."""

__version__ = "0.1.0"
