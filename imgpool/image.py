"""RGBA raster images backed by numpy arrays."""

from __future__ import annotations

import os
from typing import Optional, Tuple, Union

import numpy as np
from PIL import Image as _PILImage
from PIL import UnidentifiedImageError

PathLike = Union[str, "os.PathLike[str]"]

CHANNELS = 4


class Image:
    """An 8-bit RGBA image stored as a ``(height, width, 4)`` uint8 array."""

    def __init__(self, data: np.ndarray, path: Optional[PathLike] = None) -> None:
        array = np.asarray(data)
        if array.ndim != 3 or array.shape[2] != CHANNELS:
            raise ValueError(
                f"image data must have shape (height, width, {CHANNELS}), got {array.shape}"
            )
        if array.dtype != np.uint8:
            raise ValueError(f"image data must be uint8, got {array.dtype}")
        self.data = array
        self.path = path

    @classmethod
    def load(cls, path: PathLike) -> "Image":
        """Read an image file, converting it to four-channel RGBA."""
        try:
            with _PILImage.open(path) as source:
                rgba = source.convert("RGBA")
                array = np.array(rgba, dtype=np.uint8)
        except UnidentifiedImageError as exc:
            raise ValueError(f"cannot read image file {os.fspath(path)!r}") from exc
        return cls(array, path)

    @classmethod
    def blank(cls, width: int, height: int) -> "Image":
        """Create a zero-filled image of the given size."""
        if width < 0 or height < 0:
            raise ValueError(f"image size must be non-negative, got {width}x{height}")
        return cls(np.zeros((height, width, CHANNELS), dtype=np.uint8))

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    @property
    def component_count(self) -> int:
        """Number of bytes in the pixel buffer."""
        return int(self.data.size)

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """Return the ``(r, g, b, a)`` values at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside image of size {self.width}x{self.height}"
            )
        r, g, b, a = (int(v) for v in self.data[y, x])
        return r, g, b, a

    def save(self, path: PathLike) -> None:
        """Write the image as a PNG file."""
        _PILImage.fromarray(np.ascontiguousarray(self.data)).save(path, format="PNG")
        self.path = path

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height}, path={self.path!r})"