"""Light-adaptation settings and the half-float helpers they rely on."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

_HALF = struct.Struct("<e")
_U16 = struct.Struct("<H")
_HALF_POS_INF = 0x7C00
_HALF_NEG_INF = 0xFC00


def pack_half(value: float) -> int:
    """Encode ``value`` as IEEE 754 binary16 bits; too large values become infinity."""
    value = float(value)
    try:
        raw = _HALF.pack(value)
    except OverflowError:
        return _HALF_NEG_INF if value < 0.0 else _HALF_POS_INF
    return _U16.unpack(raw)[0]


def unpack_half(bits: int) -> float:
    """Decode IEEE 754 binary16 ``bits`` into a float."""
    if not 0 <= bits <= 0xFFFF:
        raise ValueError(f"half-float bits out of range: {bits!r}")
    return _HALF.unpack(_U16.pack(bits))[0]


@dataclass
class PingPong(Generic[T]):
    """Two resources where one is read and the other written, swapped every frame."""

    front: T
    back: T

    def swap(self) -> None:
        """Exchange the read and write resources."""
        self.front, self.back = self.back, self.front

    def __iter__(self):
        yield self.front
        yield self.back


@dataclass
class AdaptationSettings:
    """User-tunable settings of the HDR pipeline with eye adaptation."""

    adaptation_speed: float = 3.0
    bloom_strength: float = 0.01
    num_bloom_passes: int = 2
    enable_bloom: bool = True
    draw_curves: bool = False
    draw_wireframe: bool = False
    # the adapted luminance starts bright so the scene fades in from glare
    initial_luminance: float = 50.0

    def __post_init__(self) -> None:
        if self.num_bloom_passes < 1:
            raise ValueError("num_bloom_passes must be at least 1")
        if math.isnan(self.adaptation_speed):
            raise ValueError("adaptation_speed must be a number")

    def step_speed(self, delta_seconds: float) -> float:
        """Adaptation rate for one frame lasting ``delta_seconds``."""
        return float(delta_seconds) * self.adaptation_speed

    def initial_pixel(self) -> int:
        """Half-float bits of the initial adapted luminance texel."""
        return pack_half(self.initial_luminance)