"""Trauma-based camera shake for 2D and 3D transforms, with simplex noise and camera controls."""

__version__ = "7.0.0"
__all__ = ["demo2d", "flycam", "shake", "simplex", "thirdperson", "transform"]