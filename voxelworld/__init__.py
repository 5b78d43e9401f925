"""Voxel chunks, greedy meshing, camera and frustum maths, vertex layouts and shader file parsing."""

__version__ = "0.1.0"