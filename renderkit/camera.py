"""Cameras and the positioners that drive them."""

from __future__ import annotations

import abc
import math
from dataclasses import dataclass

import numpy as np

from renderkit.glmath import (
    identity,
    look_at,
    quat_from_euler,
    quat_from_mat4,
    quat_multiply,
    quat_normalize,
    quat_to_mat4,
    translate,
    yaw_pitch_roll,
)


def _vec(v, n: int = 3) -> np.ndarray:
    return np.array(v, dtype=float)[:n]


class CameraPositioner(abc.ABC):
    """Source of a camera's view matrix and position."""

    @abc.abstractmethod
    def view_matrix(self) -> np.ndarray: ...

    @abc.abstractmethod
    def position(self) -> np.ndarray: ...


class Camera:
    """Camera whose view comes from a positioner."""

    def __init__(self, positioner: CameraPositioner, projection=None):
        self.positioner = positioner
        self.projection = identity() if projection is None else np.asarray(projection, dtype=float)

    def view_matrix(self) -> np.ndarray:
        return self.positioner.view_matrix()

    def position(self) -> np.ndarray:
        return self.positioner.position()


@dataclass
class Movement:
    """Movement keys currently held down."""

    forward: bool = False
    backward: bool = False
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    fast_speed: bool = False


class FirstPersonPositioner(CameraPositioner):
    """Free-flying camera steered by the mouse and movement keys."""

    def __init__(self, pos=None, target=None, up=None):
        self.movement = Movement()
        self.mouse_speed = 4.0
        self.acceleration = 150.0
        self.damping = 0.2
        self.max_speed = 10.0
        self.fast_coef = 10.0

        self.move_speed = np.zeros(3)
        self._mouse_pos = np.zeros(2)
        if pos is None:
            self.camera_position = np.array([0.0, 10.0, 10.0])
            self.orientation = np.array([1.0, 0.0, 0.0, 0.0])
            self._up = np.array([0.0, 0.0, 1.0])
        else:
            if target is None or up is None:
                raise ValueError("pos, target and up must be given together")
            self.camera_position = _vec(pos)
            self.orientation = quat_from_mat4(look_at(pos, target, up))
            self._up = _vec(up)

    def update(self, delta_seconds: float, mouse_pos, mouse_pressed: bool) -> None:
        """Advance the camera by ``delta_seconds``."""
        mouse_pos = _vec(mouse_pos, 2)
        if mouse_pressed:
            delta = mouse_pos - self._mouse_pos
            delta_quat = quat_from_euler(
                (-self.mouse_speed * delta[1], self.mouse_speed * delta[0], 0.0)
            )
            self.orientation = quat_normalize(quat_multiply(delta_quat, self.orientation))
            self.set_up_vector(self._up)
        self._mouse_pos = mouse_pos

        v = quat_to_mat4(self.orientation)
        forward = -v[2, :3]
        right = v[0, :3].copy()
        up = np.cross(right, forward)

        mv = self.movement
        accel = np.zeros(3)
        if mv.forward:
            accel += forward
        if mv.backward:
            accel -= forward
        if mv.left:
            accel -= right
        if mv.right:
            accel += right
        if mv.up:
            accel += up
        if mv.down:
            accel -= up
        if mv.fast_speed:
            accel *= self.fast_coef

        dt = float(delta_seconds)
        if not accel.any():
            self.move_speed = self.move_speed - self.move_speed * min((1.0 / self.damping) * dt, 1.0)
        else:
            self.move_speed = self.move_speed + accel * self.acceleration * dt
            max_speed = self.max_speed * self.fast_coef if mv.fast_speed else self.max_speed
            speed = float(np.linalg.norm(self.move_speed))
            if speed > max_speed:
                self.move_speed = self.move_speed / speed * max_speed

        self.camera_position = self.camera_position + self.move_speed * dt

    def view_matrix(self) -> np.ndarray:
        t = translate(identity(), -self.camera_position)
        return quat_to_mat4(self.orientation) @ t

    def position(self) -> np.ndarray:
        return self.camera_position.copy()

    def reset_mouse_position(self, p) -> None:
        self._mouse_pos = _vec(p, 2)

    def set_up_vector(self, up) -> None:
        """Re-orient the camera to keep its view direction with ``up`` as up."""
        view = self.view_matrix()
        direction = -view[2, :3]
        self.orientation = quat_from_mat4(
            look_at(self.camera_position, self.camera_position + direction, up)
        )

    def look_at(self, pos, target, up) -> None:
        self.camera_position = _vec(pos)
        self.orientation = quat_from_mat4(look_at(pos, target, up))


def clip_angle(d: float) -> float:
    """Bring an angle difference in degrees into about [-180, 180]."""
    if d < -180.0:
        return d + 360.0
    if d > 180.0:
        return d - 360.0
    return d


def clip_angles(angles) -> np.ndarray:
    """Each angle taken modulo 360 degrees, keeping its sign."""
    return np.fmod(_vec(angles), 360.0)


def angle_delta(current, desired) -> np.ndarray:
    """Shortest per-axis difference ``current - desired`` in degrees."""
    d = clip_angles(current) - clip_angles(desired)
    return np.array([clip_angle(float(x)) for x in d])


class MoveToPositioner(CameraPositioner):
    """Camera that glides towards a desired position and angles."""

    def __init__(self, pos, angles):
        self.damping_linear = 10.0
        self.damping_euler_angles = np.array([5.0, 5.0, 5.0])
        self.position_current = _vec(pos)
        self.position_desired = _vec(pos)
        # pitch, pan, roll in degrees
        self.angles_current = _vec(angles)
        self.angles_desired = _vec(angles)
        self._transform = identity()

    def update(self, delta_seconds: float, mouse_pos=None, mouse_pressed: bool = False) -> None:
        """Move a step towards the desired state; mouse input is ignored."""
        dt = float(delta_seconds)
        self.position_current = self.position_current + self.damping_linear * dt * (
            self.position_desired - self.position_current
        )
        self.angles_current = clip_angles(self.angles_current)
        self.angles_desired = clip_angles(self.angles_desired)
        self.angles_current = self.angles_current - (
            angle_delta(self.angles_current, self.angles_desired) * self.damping_euler_angles * dt
        )
        self.angles_current = clip_angles(self.angles_current)

        pitch, pan, roll = (math.radians(float(a)) for a in self.angles_current)
        self._transform = translate(yaw_pitch_roll(pan, pitch, roll), -self.position_current)

    def view_matrix(self) -> np.ndarray:
        return self._transform.copy()

    def position(self) -> np.ndarray:
        return self.position_current.copy()