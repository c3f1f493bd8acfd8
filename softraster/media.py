"""Frame timing and decoded images."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass, field
from typing import Callable

from PIL import Image as PILImage

_CHANNELS_BY_MODE = {"RGB": 3, "RGBA": 4}


class Timer:
    """Measures seconds elapsed between successive calls to :meth:`dt`."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start = clock()

    def reset(self) -> None:
        """Restart timing from now."""
        self._start = self._clock()

    def dt(self) -> float:
        """Seconds since the last reset; the timer is reset afterwards."""
        now = self._clock()
        elapsed = now - self._start
        self._start = now
        return elapsed


@dataclass
class Image:
    """An image with 3 (RGB) or 4 (RGBA) channels of 8-bit pixel data."""

    width: int = 0
    height: int = 0
    channels: int = 0
    data: bytearray = field(default_factory=bytearray)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        self.data = bytearray(self.data)
        expected = self.width * self.height * self.channels
        if len(self.data) != expected:
            raise ValueError(f"image data holds {len(self.data)} bytes, expected {expected}")

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> Image:
        """Decode an RGB or RGBA image file.

        Raises ValueError for any other pixel format.
        """
        with PILImage.open(path) as img:
            channels = _CHANNELS_BY_MODE.get(img.mode)
            if channels is None:
                raise ValueError(f"unsupported pixel format {img.mode!r}")
            width, height = img.size
            return cls(width, height, channels, bytearray(img.tobytes()))

    def _offset(self, x: int, y: int) -> int:
        if self.width == 0 or self.height == 0:
            raise IndexError("image is empty")
        cx = min(max(x, 0), self.width - 1)
        cy = min(max(y, 0), self.height - 1)
        return (cy * self.width + cx) * self.channels

    def at(self, x: int, y: int) -> tuple[int, ...]:
        """Channel values of the pixel at (x, y), coordinates clamped to the image."""
        offset = self._offset(x, y)
        return tuple(self.data[offset:offset + self.channels])

    def channel_at(self, x: int, y: int, index: int) -> int:
        """One channel of the pixel at (x, y), coordinates clamped to the image."""
        if not 0 <= index < self.channels:
            raise IndexError(f"channel index out of range: {index}")
        return self.data[self._offset(x, y) + index]

    def alpha_at(self, x: int, y: int) -> int:
        """Alpha of the pixel at (x, y); 255 when the image has no alpha channel."""
        if not self.has_alpha():
            return 255
        return self.data[self._offset(x, y) + 3]

    def has_alpha(self) -> bool:
        return self.channels == 4