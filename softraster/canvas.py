"""Off-screen RGB canvas with keyboard and mouse state."""

from __future__ import annotations

import os
from enum import IntEnum

from PIL import Image as PILImage

KEY_COUNT = 256


class MouseButton(IntEnum):
    """Mouse buttons tracked by a canvas."""

    LEFT = 0
    MIDDLE = 1
    RIGHT = 2


class MouseButtonState(IntEnum):
    """State of a mouse button."""

    UP = 0
    DOWN = 1
    PRESSED = 2


def _key_code(key: int | str) -> int:
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError(f"a key must be a single character, got {key!r}")
        key = ord(key.upper())
    if not 0 <= key < KEY_COUNT:
        raise IndexError(f"key code out of range: {key!r}")
    return key


class Canvas:
    """A width x height back buffer of 8-bit RGB pixels, black when cleared."""

    def __init__(self, width: int, height: int, title: str = "") -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid canvas size {width}x{height}")
        self.width = width
        self.height = height
        self.title = title
        self._image = bytearray(width * height * 3)
        self._keys = [False] * KEY_COUNT
        self.buttons = {button: MouseButtonState.UP for button in MouseButton}
        self.mouse_x = 0
        self.mouse_y = 0
        self.mouse_wheel = 0

    def _pixel_offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel out of range: ({x}, {y})")
        return (y * self.width + x) * 3

    def draw(self, x: int, y: int, r: int, g: int, b: int) -> None:
        """Set the pixel at (x, y)."""
        offset = self._pixel_offset(x, y)
        self._image[offset:offset + 3] = bytes((r, g, b))

    def draw_index(self, index: int, r: int, g: int, b: int) -> None:
        """Set the pixel at linear index ``y * width + x``."""
        if not 0 <= index < self.width * self.height:
            raise IndexError(f"pixel index out of range: {index}")
        offset = index * 3
        self._image[offset:offset + 3] = bytes((r, g, b))

    def pixel(self, x: int, y: int) -> tuple[int, int, int]:
        """Return the (r, g, b) of the pixel at (x, y)."""
        offset = self._pixel_offset(x, y)
        r, g, b = self._image[offset:offset + 3]
        return r, g, b

    def clear(self) -> None:
        """Set every pixel to black."""
        self._image = bytearray(self.width * self.height * 3)

    @property
    def back_buffer(self) -> bytes:
        """A snapshot of the raw RGB bytes, row by row."""
        return bytes(self._image)

    def key_pressed(self, key: int | str) -> bool:
        """Whether ``key`` (a key code or a single character) is held down."""
        return self._keys[_key_code(key)]

    def press_key(self, key: int | str) -> None:
        self._keys[_key_code(key)] = True

    def release_key(self, key: int | str) -> None:
        self._keys[_key_code(key)] = False

    def mouse_button_pressed(self, button: MouseButton) -> bool:
        """Whether ``button`` is down or being held."""
        return self.buttons[MouseButton(button)] in (
            MouseButtonState.DOWN,
            MouseButtonState.PRESSED,
        )

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the back buffer to an image file; the format follows the suffix."""
        if self.width == 0 or self.height == 0:
            raise ValueError("cannot save an empty canvas")
        PILImage.frombytes("RGB", (self.width, self.height), bytes(self._image)).save(path)