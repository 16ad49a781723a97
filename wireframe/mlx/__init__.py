"""In-memory pixel images, XPM loading and named colours."""

__version__ = "0.1.0"