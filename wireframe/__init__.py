"""Isometric wireframe viewer for height-map files: parsing, projection, drawing and a pygame window."""

__version__ = "0.1.0"