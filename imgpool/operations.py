"""Convolution and 2x2 pooling over RGBA images."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .image import Image

PREWITT_KERNEL = (
    (-1, 0, 1),
    (-1, 0, 1),
    (-1, 0, 1),
)

_RED_WEIGHT = np.float32(0.2126)
_GREEN_WEIGHT = np.float32(0.7152)
_BLUE_WEIGHT = np.float32(0.0722)


def clamp(value: float) -> int:
    """Clamp ``value`` to the range 0..255, truncating toward zero."""
    if value < 0:
        return 0
    if value > 255:
        return 255
    return int(value)


def greyscale(r: float, g: float, b: float) -> float:
    """Luminance of an RGB triple using single-precision weights."""
    total = (
        np.float32(r) * _RED_WEIGHT
        + np.float32(g) * _GREEN_WEIGHT
        + np.float32(b) * _BLUE_WEIGHT
    )
    return float(total)


def _kernel_array(kernel: Sequence[Sequence[int]]) -> np.ndarray:
    weights = np.asarray(kernel)
    if weights.shape != (3, 3):
        raise ValueError(f"kernel must be 3x3, got shape {weights.shape}")
    return weights.astype(np.int64)


def convolve(image: Image, kernel: Sequence[Sequence[int]]) -> Image:
    """Apply a 3x3 kernel to the interior pixels and return a grey result.

    Border pixels are not computed, so the result is two pixels narrower and
    two pixels shorter than the input. Each channel's absolute response is
    combined into luminance, clamped to 0..255 and written to r, g and b with
    an opaque alpha.
    """
    weights = _kernel_array(kernel)
    width, height = image.width, image.height
    if width < 3 or height < 3:
        raise ValueError(f"convolution needs at least 3x3 pixels, got {width}x{height}")

    rgb = image.data[:, :, :3].astype(np.int64)
    out_h, out_w = height - 2, width - 2
    acc = np.zeros((out_h, out_w, 3), dtype=np.int64)
    for ky, row in enumerate(weights):
        for kx, weight in enumerate(row):
            if weight:
                acc += rgb[ky:ky + out_h, kx:kx + out_w] * weight

    magnitude = np.abs(acc).astype(np.float32)
    grey = (
        magnitude[:, :, 0] * _RED_WEIGHT
        + magnitude[:, :, 1] * _GREEN_WEIGHT
        + magnitude[:, :, 2] * _BLUE_WEIGHT
    )
    values = np.clip(grey, 0, 255).astype(np.uint8)

    result = Image.blank(out_w, out_h)
    result.data[:, :, 0] = values
    result.data[:, :, 1] = values
    result.data[:, :, 2] = values
    result.data[:, :, 3] = 255
    return result


def _pool(image: Image, reducer) -> Image:
    out_w, out_h = image.width // 2, image.height // 2
    result = Image.blank(out_w, out_h)
    if out_w and out_h:
        blocks = image.data[: out_h * 2, : out_w * 2, :3].reshape(out_h, 2, out_w, 2, 3)
        result.data[:, :, :3] = reducer(blocks, axis=(1, 3))
    result.data[:, :, 3] = 255
    return result


def max_pool(image: Image) -> Image:
    """Downsample by taking each channel's maximum over 2x2 blocks.

    A trailing odd row or column is dropped; alpha is set opaque.
    """
    return _pool(image, np.max)


def min_pool(image: Image) -> Image:
    """Downsample by taking each channel's minimum over 2x2 blocks.

    A trailing odd row or column is dropped; alpha is set opaque.
    """
    return _pool(image, np.min)