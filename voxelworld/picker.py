"""Ray from the camera used to pick blocks."""

from __future__ import annotations

import numpy as np

from voxelworld.camera import Camera


class MousePicker:
    """Tracks a point along the camera's view direction."""

    def __init__(self, camera: Camera):
        self.camera = camera
        self.current_ray = np.zeros(3, dtype=np.float64)

    def update(self) -> None:
        """Recompute the current ray one unit in front of the camera."""
        self.current_ray = self.calc_mouse_ray(1.0)

    def calc_mouse_ray(self, scaling: float) -> np.ndarray:
        """Point `scaling` units along the view direction from the camera position."""
        return scaling * self.camera.front + self.camera.position