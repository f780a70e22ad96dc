"""Anti-aliased infinite grid colouring with level-of-detail fading."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass
class GridParameters:
    """Appearance of the grid."""

    size: float = 100.0  # extents in world units
    cell_size: float = 0.025
    color_thin: tuple[float, float, float, float] = (0.5, 0.5, 0.5, 1.0)
    color_thick: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)  # every tenth line
    min_pixels_between_cells: float = 2.0


def _sat(x):
    return np.clip(x, 0.0, 1.0)


def _mod(x, y):
    return x - y * np.floor(x / y)


def _lod_alpha(uv: np.ndarray, lod: float, dudv: np.ndarray) -> float:
    return float(np.max(1.0 - np.abs(_sat(_mod(uv, lod) / dudv) * 2.0 - 1.0)))


def grid_color(uv, cam_pos, dudv, params: GridParameters | None = None) -> np.ndarray:
    """RGBA colour of the grid at world-plane coordinate ``uv``.

    ``dudv`` holds the screen-space derivative magnitudes of ``uv`` per
    pixel (both positive).
    """
    params = params or GridParameters()
    uv = np.array(uv, dtype=float)[:2]
    cam_pos = np.array(cam_pos, dtype=float)[:2]
    dudv = np.array(dudv, dtype=float)[:2]
    if np.any(dudv <= 0.0):
        raise ValueError("dudv components must be positive")

    lod_level = max(
        0.0,
        math.log10(float(np.linalg.norm(dudv)) * params.min_pixels_between_cells / params.cell_size) + 1.0,
    )
    lod_fade = lod_level - math.floor(lod_level)

    lod0 = params.cell_size * 10.0 ** math.floor(lod_level)
    lod1 = lod0 * 10.0
    lod2 = lod1 * 10.0

    # each anti-aliased line covers up to 4 pixels
    dudv = dudv * 4.0
    uv = uv + dudv * 0.5

    lod0a = _lod_alpha(uv, lod0, dudv)
    lod1a = _lod_alpha(uv, lod1, dudv)
    lod2a = _lod_alpha(uv, lod2, dudv)

    uv = uv - cam_pos

    thick = np.array(params.color_thick, dtype=float)
    thin = np.array(params.color_thin, dtype=float)
    if lod2a > 0.0:
        c = thick
        alpha = lod2a
    elif lod1a > 0.0:
        c = thick * (1.0 - lod_fade) + thin * lod_fade
        alpha = lod1a
    else:
        c = thin
        alpha = lod0a * (1.0 - lod_fade)

    opacity = 1.0 - float(_sat(np.linalg.norm(uv) / params.size))
    c = c.copy()
    c[3] *= alpha * opacity
    return c