"""Depth buffer for hidden-surface removal."""

from __future__ import annotations

FAR_DEPTH = 1.0


class ZBuffer:
    """A width x height grid of depths, indexed as ``zb[x, y]``."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.create(width, height)

    def create(self, width: int, height: int) -> None:
        """(Re)allocate the buffer at the given size, filled with the far depth."""
        if width < 0 or height < 0:
            raise ValueError(f"invalid z-buffer size {width}x{height}")
        self.width = width
        self.height = height
        self._depth = [FAR_DEPTH] * (width * height)

    def _index(self, key: tuple[int, int]) -> int:
        x, y = key
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"z-buffer coordinate out of range: {key!r}")
        return y * self.width + x

    def __getitem__(self, key: tuple[int, int]) -> float:
        return self._depth[self._index(key)]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self._depth[self._index(key)] = float(value)

    def clear(self) -> None:
        """Reset every depth to the far plane (1.0)."""
        self._depth = [FAR_DEPTH] * (self.width * self.height)