"""A small 2D space shooter and transform demos drawn with pygame."""

__version__ = "0.1.0"