"""Matrices, transforms, rays, materials, bounding boxes, BSP trees, an orbit camera and slider controls."""

__version__ = "1.0.0"

__all__ = [
    "bsp",
    "camera",
    "controls",
    "geometry",
    "material",
    "matrix",
    "ray",
    "transforms",
]