"""Prewitt edge detection and 2x2 max/min pooling for RGBA images, plus a vector-add check."""

__version__ = "0.1.0"
__all__ = ["cli", "image", "operations", "pipeline", "vector_add"]