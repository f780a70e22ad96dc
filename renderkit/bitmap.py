"""In-memory R/RG/RGB/RGBA bitmaps with byte or float components."""

from __future__ import annotations

import enum


class BitmapType(enum.Enum):
    TWO_D = 0
    CUBE = 1


class BitmapFormat(enum.Enum):
    UNSIGNED_BYTE = 0
    FLOAT = 1


_BYTES_PER_COMPONENT = {BitmapFormat.UNSIGNED_BYTE: 1, BitmapFormat.FLOAT: 4}


def bytes_per_component(fmt) -> int:
    """Storage size of one component in ``fmt``."""
    return _BYTES_PER_COMPONENT[BitmapFormat(fmt)]


class Bitmap:
    """Pixel storage of ``w`` x ``h`` x ``d`` pixels with ``comp`` components."""

    def __init__(
        self,
        w: int = 0,
        h: int = 0,
        comp: int = 3,
        fmt: BitmapFormat = BitmapFormat.UNSIGNED_BYTE,
        *,
        depth: int = 1,
        data=None,
    ):
        self.w = w
        self.h = h
        self.d = depth
        self.comp = comp
        self.fmt = BitmapFormat(fmt)
        self.type = BitmapType.TWO_D
        size = w * h * depth * comp * bytes_per_component(self.fmt)
        if data is None:
            self.data = bytearray(size)
        else:
            raw = bytes(data)
            if len(raw) < size:
                raise ValueError(f"expected at least {size} bytes of pixel data, got {len(raw)}")
            self.data = bytearray(raw[:size])

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.w and 0 <= y < self.h * self.d):
            raise IndexError(f"pixel ({x}, {y}) outside a {self.w}x{self.h} bitmap")
        return self.comp * (y * self.w + x)

    def set_pixel(self, x: int, y: int, c) -> None:
        """Store the first ``comp`` components of the RGBA colour ``c``."""
        ofs = self._offset(x, y)
        values = list(c)[: min(self.comp, 4)]
        if self.fmt is BitmapFormat.FLOAT:
            with memoryview(self.data) as raw, raw.cast("f") as floats:
                for i, v in enumerate(values):
                    floats[ofs + i] = float(v)
        else:
            for i, v in enumerate(values):
                self.data[ofs + i] = int(v * 255.0)

    def get_pixel(self, x: int, y: int) -> tuple[float, float, float, float]:
        """RGBA colour of a pixel; missing components read as 0."""
        ofs = self._offset(x, y)
        n = min(self.comp, 4)
        if self.fmt is BitmapFormat.FLOAT:
            with memoryview(self.data) as raw, raw.cast("f") as floats:
                values = [floats[ofs + i] for i in range(n)]
        else:
            values = [self.data[ofs + i] / 255.0 for i in range(n)]
        values.extend([0.0] * (4 - n))
        return tuple(values)