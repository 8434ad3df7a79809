"""Vectors, quaternion products and affine transforms for 3D graphics."""

__version__ = "0.1.0"

__all__ = ["vec3", "vec4", "vec4_interp", "quat", "affine"]