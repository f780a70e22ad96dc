"""Scalar tone-mapping curves."""

from __future__ import annotations

import enum
import math


class ToneMappingMode(enum.IntEnum):
    NONE = 0
    REINHARD = 1
    UCHIMURA = 2
    KHRONOS_PBR = 3


def _smoothstep(edge0: float, edge1: float, x: float) -> float:
    t = min(max((x - edge0) / (edge1 - edge0), 0.0), 1.0)
    return t * t * (3.0 - 2.0 * t)


def _step(edge: float, x: float) -> float:
    return 0.0 if x < edge else 1.0


def uchimura(x: float, p: float, a: float, m: float, l: float, c: float, b: float) -> float:
    """Uchimura 2017 ("HDR theory and practice") tone curve.

    ``p`` max brightness, ``a`` contrast, ``m`` linear section start,
    ``l`` linear section length, ``c`` black tightness, ``b`` pedestal.
    """
    l0 = ((p - m) * l) / a
    s0 = m + l0
    s1 = m + a * l0
    c2 = (a * p) / (p - s1)
    cp = -c2 / p

    w0 = 1.0 - _smoothstep(0.0, m, x)
    w2 = _step(m + l0, x)
    w1 = 1.0 - w0 - w2

    toe = m * math.pow(x / m, c) + b
    shoulder = p - (p - s1) * math.exp(cp * (x - s0))
    linear = m + a * (x - m)

    return toe * w0 + linear * w1 + shoulder * w2


def reinhard2(v: float, max_white: float) -> float:
    """Extended Reinhard operator with a white point."""
    return v * (1.0 + (v / (max_white * max_white))) / (1.0 + v)


def pbr_neutral(color: float, start_compression: float, desaturation: float) -> float:
    """Khronos PBR Neutral tone mapper applied to one channel."""
    start_compression -= 0.04

    offset = color - 6.25 * color * color if color < 0.08 else 0.04
    color -= offset

    peak = color
    if peak < start_compression:
        return color

    d = 1.0 - start_compression
    new_peak = 1.0 - d * d / (peak + d - start_compression)
    color *= new_peak / peak

    g = 1.0 - 1.0 / (desaturation * (peak - new_peak) + 1.0)
    return color * (1.0 - g) + new_peak * g