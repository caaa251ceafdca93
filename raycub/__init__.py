"""Parsing and validation of .cub raycaster scene files, with small text and list utilities."""

__version__ = "0.1.0"