"""Bake SVG shape and group transforms into raw coordinates."""

__version__ = "0.1.0"
