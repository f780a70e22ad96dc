"""Small 3D math toolkit: 4x4 matrices, quaternions and random helpers.

Matrices are 4x4 numpy arrays in mathematical (row, column) order and act
on column vectors, so ``m @ v`` transforms ``v``. Quaternions are numpy
arrays ordered ``(w, x, y, z)``.
"""

from __future__ import annotations

import math
import random

import numpy as np


def _vec(v) -> np.ndarray:
    return np.asarray(v, dtype=float)


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def identity() -> np.ndarray:
    """Return the 4x4 identity matrix."""
    return np.eye(4)


def translate(m, v) -> np.ndarray:
    """Return ``m`` multiplied by a translation by ``v``."""
    t = np.eye(4)
    t[:3, 3] = _vec(v)[:3]
    return _vec(m) @ t


def scale(v) -> np.ndarray:
    """Return a scaling matrix with factors ``v``."""
    s = np.eye(4)
    s[0, 0], s[1, 1], s[2, 2] = _vec(v)[:3]
    return s


def rotate(m, angle: float, axis) -> np.ndarray:
    """Return ``m`` multiplied by a rotation of ``angle`` radians about ``axis``."""
    x, y, z = _normalize(_vec(axis)[:3])
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    r = np.eye(4)
    r[:3, :3] = [
        [c + t * x * x, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, c + t * y * y, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, c + t * z * z],
    ]
    return _vec(m) @ r


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection mapping depth to [-1, 1]."""
    f = 1.0 / math.tan(fovy / 2.0)
    p = np.zeros((4, 4))
    p[0, 0] = f / aspect
    p[1, 1] = f
    p[2, 2] = -(far + near) / (far - near)
    p[2, 3] = -(2.0 * far * near) / (far - near)
    p[3, 2] = -1.0
    return p


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = _vec(eye)[:3]
    f = _normalize(_vec(center)[:3] - eye)
    s = _normalize(np.cross(f, _vec(up)[:3]))
    u = np.cross(s, f)
    m = np.eye(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -np.dot(s, eye)
    m[1, 3] = -np.dot(u, eye)
    m[2, 3] = np.dot(f, eye)
    return m


def yaw_pitch_roll(yaw: float, pitch: float, roll: float) -> np.ndarray:
    """Rotation from Euler angles: yaw about Y, pitch about X, roll about Z."""
    ch, sh = math.cos(yaw), math.sin(yaw)
    cp, sp = math.cos(pitch), math.sin(pitch)
    cb, sb = math.cos(roll), math.sin(roll)
    # columns of the rotation, laid out as rows and transposed below
    columns = np.array(
        [
            [ch * cb + sh * sp * sb, sb * cp, -sh * cb + ch * sp * sb, 0.0],
            [-ch * sb + sh * sp * cb, cb * cp, sb * sh + ch * sp * cb, 0.0],
            [sh * cp, -sp, ch * cp, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return columns.T


def quat_from_euler(angles) -> np.ndarray:
    """Quaternion from Euler angles ``(pitch, yaw, roll)`` in radians."""
    half = _vec(angles)[:3] * 0.5
    cx, cy, cz = np.cos(half)
    sx, sy, sz = np.sin(half)
    return np.array(
        [
            cx * cy * cz + sx * sy * sz,
            sx * cy * cz - cx * sy * sz,
            cx * sy * cz + sx * cy * sz,
            cx * cy * sz - sx * sy * cz,
        ]
    )


def quat_multiply(a, b) -> np.ndarray:
    """Hamilton product ``a * b``."""
    aw, ax, ay, az = _vec(a)
    bw, bx, by, bz = _vec(b)
    return np.array(
        [
            aw * bw - ax * bx - ay * by - az * bz,
            aw * bx + ax * bw + ay * bz - az * by,
            aw * by - ax * bz + ay * bw + az * bx,
            aw * bz + ax * by - ay * bx + az * bw,
        ]
    )


def quat_normalize(q) -> np.ndarray:
    """Return ``q`` scaled to unit length."""
    return _normalize(_vec(q))


def quat_to_mat4(q) -> np.ndarray:
    """Rotation matrix of a unit quaternion."""
    w, x, y, z = _vec(q)
    m = np.eye(4)
    m[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ]
    return m


def quat_from_mat4(m) -> np.ndarray:
    """Unit quaternion of the rotation part of ``m``."""
    r = _vec(m)
    squares = [
        r[0, 0] + r[1, 1] + r[2, 2],
        r[0, 0] - r[1, 1] - r[2, 2],
        r[1, 1] - r[0, 0] - r[2, 2],
        r[2, 2] - r[0, 0] - r[1, 1],
    ]
    biggest = int(np.argmax(squares))
    value = math.sqrt(squares[biggest] + 1.0) * 0.5
    mult = 0.25 / value
    if biggest == 0:
        q = [value, (r[2, 1] - r[1, 2]) * mult, (r[0, 2] - r[2, 0]) * mult, (r[1, 0] - r[0, 1]) * mult]
    elif biggest == 1:
        q = [(r[2, 1] - r[1, 2]) * mult, value, (r[1, 0] + r[0, 1]) * mult, (r[0, 2] + r[2, 0]) * mult]
    elif biggest == 2:
        q = [(r[0, 2] - r[2, 0]) * mult, (r[1, 0] + r[0, 1]) * mult, value, (r[2, 1] + r[1, 2]) * mult]
    else:
        q = [(r[1, 0] - r[0, 1]) * mult, (r[0, 2] + r[2, 0]) * mult, (r[2, 1] + r[1, 2]) * mult, value]
    return np.array(q)


def transform_point(m, p) -> np.ndarray:
    """Apply ``m`` to point ``p`` with w = 1, without perspective division."""
    return (_vec(m) @ np.append(_vec(p)[:3], 1.0))[:3]


def clamp_length(v, max_length: float) -> np.ndarray:
    """Shorten ``v`` to ``max_length`` if it is longer."""
    v = _vec(v)
    length = float(np.linalg.norm(v))
    return _normalize(v) * max_length if length > max_length else v


def clamp(v, a, b):
    """Clamp ``v`` into ``[a, b]``."""
    if v < a:
        return a
    if v > b:
        return b
    return v


def random01() -> float:
    """Uniform random number in [0, 1]."""
    return random.random()


def random_float(lo: float, hi: float) -> float:
    """Uniform random number between ``lo`` and ``hi``."""
    return lo + (hi - lo) * random01()


def random_vec(lo, hi) -> np.ndarray:
    """Random 3D vector with each component between ``lo`` and ``hi``."""
    lo = _vec(lo)
    hi = _vec(hi)
    return np.array([random_float(lo[i], hi[i]) for i in range(3)])


def rand_vec() -> np.ndarray:
    """Random 3D vector inside the cube [-5, 5]^3."""
    return random_vec((-5.0, -5.0, -5.0), (5.0, 5.0, 5.0))