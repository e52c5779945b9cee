"""Height-map parsing, line rasterisation, in-memory RGBA images and XPM42 loading."""

__version__ = "0.1.0"