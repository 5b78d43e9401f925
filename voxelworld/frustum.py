"""View frustum planes recovered from a camera's projection and view matrices."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from voxelworld.camera import Camera

_RULE = "=============="


def _zeros() -> np.ndarray:
    return np.zeros(3, dtype=np.float64)


@dataclass
class Plane:
    """A plane given by a normal and a point on it."""

    normal: np.ndarray = field(default_factory=_zeros)
    point: np.ndarray = field(default_factory=_zeros)

    def describe(self) -> str:
        x, y, z = (float(v) for v in self.point)
        return f"pt: {x:g},{y:g},{z:g}\n"


@dataclass
class AABB:
    """An axis-aligned box spanned by its lowest and highest corners."""

    base_pt: np.ndarray = field(default_factory=_zeros)
    upper_pt: np.ndarray = field(default_factory=_zeros)


@dataclass
class Frustum:
    """The six bounding planes of a view volume."""

    top: Plane = field(default_factory=Plane)
    bottom: Plane = field(default_factory=Plane)
    right: Plane = field(default_factory=Plane)
    left: Plane = field(default_factory=Plane)
    far: Plane = field(default_factory=Plane)
    near: Plane = field(default_factory=Plane)

    def describe(self) -> str:
        """A text listing of each plane's point, framed by rule lines."""
        planes = (self.top, self.bottom, self.right, self.left, self.far, self.near)
        body = "".join(plane.describe() for plane in planes)
        return f"{_RULE}\n{body}{_RULE}\n"


def ndc_to_world(inv_pv, ndc) -> np.ndarray:
    """Map a normalized-device-coordinate point to world space with an inverse PV matrix."""
    point = np.append(np.asarray(ndc, dtype=np.float64).reshape(3), 1.0)
    res = np.asarray(inv_pv, dtype=np.float64) @ point
    res = res / res[3]
    return res[:3]


def frustum_from_camera(camera: Camera, aspect: float) -> Frustum:
    """Build the frustum planes for a camera and viewport aspect ratio."""
    inv_pv = np.linalg.inv(camera.perspective_matrix(aspect) @ camera.view_matrix())

    a = ndc_to_world(inv_pv, (-1.0, -1.0, -1.0))
    b = ndc_to_world(inv_pv, (1.0, -1.0, -1.0))
    c = ndc_to_world(inv_pv, (-1.0, 1.0, -1.0))
    d = ndc_to_world(inv_pv, (1.0, 1.0, -1.0))
    e = ndc_to_world(inv_pv, (-1.0, -1.0, 1.0))
    f = ndc_to_world(inv_pv, (1.0, -1.0, 1.0))
    g = ndc_to_world(inv_pv, (-1.0, 1.0, 1.0))
    h = ndc_to_world(inv_pv, (1.0, 1.0, 1.0))

    frustum = Frustum()
    frustum.near = Plane(np.cross(c - a, b - a), a)
    frustum.far = Plane(-frustum.near.normal, e)
    frustum.left = Plane(np.cross(g - e, a - e), e)
    frustum.right = Plane(np.cross(f - b, d - b), b)
    frustum.top = Plane(np.cross(h - g, c - g), g)
    frustum.left = Plane(np.cross(d - e, a - e), d)
    return frustum