"""Virtual trackball that turns mouse drags into rotations."""

from __future__ import annotations

import math

import numpy as np

from renderkit.glmath import identity, rotate

_FLT_EPSILON = float(np.finfo(np.float32).eps)


def _project_on_sphere(screen_point) -> np.ndarray:
    """Map a point in [0, 1]^2 screen space onto the unit sphere."""
    sx, sy = (float(c) for c in screen_point[:2])
    proj = np.array([2.0 * sx - 1.0, -(2.0 * sy - 1.0), 0.0])
    length = min(float(np.linalg.norm(proj)), 1.0)
    proj[2] = math.sqrt(1.001 - length * length)
    return proj / np.linalg.norm(proj)


class VirtualTrackball:
    """Accumulates rotations from successive mouse drags."""

    def __init__(self):
        self._point_cur = np.zeros(3)
        self._point_prev = np.zeros(3)
        self._rotation = identity()
        self._rotation_delta = identity()
        self._dragging = False

    @property
    def rotation_delta(self) -> np.ndarray:
        """Rotation of the drag in progress (or the last finished one)."""
        return self._rotation_delta.copy()

    def _start_dragging(self, screen_point) -> None:
        self._rotation = self._rotation @ self._rotation_delta
        self._rotation_delta = identity()
        self._point_cur = _project_on_sphere(screen_point)
        self._point_prev = self._point_cur

    def drag_to(self, screen_point, speed: float, key_pressed: bool) -> np.ndarray:
        """Rotation matrix for the drag from its start point to ``screen_point``."""
        if key_pressed and not self._dragging:
            self._start_dragging(screen_point)
            self._dragging = True
            return identity()

        self._dragging = key_pressed
        if not key_pressed:
            return identity()

        self._point_cur = _project_on_sphere(screen_point)
        shift = float(np.linalg.norm(self._point_cur - self._point_prev))

        rot = identity()
        if shift > _FLT_EPSILON:
            axis = np.cross(self._point_prev, self._point_cur)
            rot = rotate(identity(), shift * speed, axis)

        self._rotation_delta = rot
        return rot.copy()

    def rotation_matrix(self) -> np.ndarray:
        """Current overall rotation, including the drag in progress."""
        return self._rotation @ self._rotation_delta