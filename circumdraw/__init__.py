"""Grayscale drawing board that draws the circle through three placed markers."""

__version__ = "0.1.0"
__all__ = ["__version__"]