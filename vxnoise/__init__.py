"""Seeded simplex and fractal simplex noise in 2D and 3D, point-wise and lane-batched."""

__version__ = "0.1.0"

__all__ = ["__version__"]