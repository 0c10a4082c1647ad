"""Raster graphics algorithms: circles, seed fills, clipping, transforms, curves and animation."""

__version__ = "0.1.0"

__all__ = ["animation", "circle", "cli", "clipping", "curves", "fill", "transform"]