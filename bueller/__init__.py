"""Bueller: queue-driven issue automation."""

__version__ = "0.1.0"
