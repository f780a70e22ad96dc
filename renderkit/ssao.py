"""Screen-space ambient occlusion settings and blur-pass scheduling."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

_SSAO_LAYOUT = struct.Struct("<4I5f")
_COMBINE_LAYOUT = struct.Struct("<3I2f")


class DrawMode(enum.IntEnum):
    """What ends up on screen."""

    COLOR_SSAO = 0
    COLOR = 1
    SSAO = 2


@dataclass(frozen=True)
class BlurPass(Generic[T]):
    """One blur dispatch reading ``tex_in`` and writing ``tex_out``."""

    tex_in: T
    tex_out: T


def blur_passes(source: T, ping: T, pong: T, target: T, num_passes: int) -> list[BlurPass[T]]:
    """Ping-pong blur schedule from ``source`` to ``target``.

    The first pass reads ``source`` into ``ping``; every extra pass bounces
    between ``ping`` and ``pong``; the last pass writes ``ping`` into
    ``target``. The schedule holds ``2 * num_passes`` dispatches.
    """
    if num_passes < 1:
        raise ValueError("num_passes must be at least 1")
    passes = [BlurPass(source, ping)]
    for _ in range(num_passes - 1):
        passes.append(BlurPass(ping, pong))
        passes.append(BlurPass(pong, ping))
    passes.append(BlurPass(ping, target))
    return passes


def is_horizontal_pass(index: int) -> bool:
    """Odd-numbered passes blur horizontally, even-numbered ones vertically."""
    if index < 0:
        raise ValueError("pass index must not be negative")
    return bool(index & 1)


def dispatch_groups(width: int, height: int, group_size: int = 16) -> tuple[int, int]:
    """Number of compute work groups covering a ``width`` x ``height`` image."""
    if group_size < 1:
        raise ValueError("group_size must be positive")
    if width < 0 or height < 0:
        raise ValueError("image dimensions must not be negative")
    return 1 + width // group_size, 1 + height // group_size


@dataclass
class SSAOParams:
    """Parameters of the SSAO compute pass."""

    tex_depth: int = 0
    tex_rotation: int = 0
    tex_out: int = 0
    sampler: int = 0
    z_near: float = 0.01
    z_far: float = 1000.0
    radius: float = 0.03
    att_scale: float = 0.95
    dist_scale: float = 1.7

    def blur_depth_threshold(self, depth_threshold: float = 30.0) -> float:
        """Depth threshold of the bilateral blur, scaled by the far plane."""
        return self.z_far * depth_threshold

    def pack(self) -> bytes:
        """Push-constant bytes in declaration order."""
        return _SSAO_LAYOUT.pack(
            self.tex_depth,
            self.tex_rotation,
            self.tex_out,
            self.sampler,
            self.z_near,
            self.z_far,
            self.radius,
            self.att_scale,
            self.dist_scale,
        )


@dataclass
class CombineParams:
    """Parameters of the pass combining scene colour with occlusion."""

    tex_color: int = 0
    tex_ssao: int = 0
    sampler: int = 0
    scale: float = 1.5
    bias: float = 0.16

    def pack(self) -> bytes:
        """Push-constant bytes in declaration order."""
        return _COMBINE_LAYOUT.pack(self.tex_color, self.tex_ssao, self.sampler, self.scale, self.bias)