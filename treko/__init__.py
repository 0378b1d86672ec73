"""Treko inventory panel: product catalogue client and development store."""

__version__ = "0.1.0"
