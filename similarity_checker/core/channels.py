"""Channel extraction — split an image into alpha, red, green and blue buffers.

Buffers are flat, row-major uint8 arrays of width*height values. Images that
are not RGBA go through Pillow's RGBA conversion first (RGB gets alpha 255).
No rounding and no colour-space work happens here.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from PIL import Image

from similarity_checker.core.types import ChannelSet

# Column of each channel in a Pillow RGBA array
_RGBA_INDEX = {'alpha': 3, 'red': 0, 'green': 1, 'blue': 2}


def image_size(image: Image.Image) -> tuple[int, int]:
    """Return (width, height)."""
    return image.width, image.height


def _rgba_pixels(image: Image.Image) -> np.ndarray:
    if image.mode != 'RGBA':
        image = image.convert('RGBA')
    return np.asarray(image, dtype=np.uint8).reshape(-1, 4)


def _frozen(column: np.ndarray) -> np.ndarray:
    buf = np.ascontiguousarray(column)
    buf.setflags(write=False)
    return buf


def extract_channels(image: Image.Image) -> ChannelSet:
    """Split an image into its four channel buffers."""
    pixels = _rgba_pixels(image)
    return ChannelSet(**{name: _frozen(pixels[:, idx]) for name, idx in _RGBA_INDEX.items()})


def _unpack_argb(pixel: int | Sequence[int]) -> tuple[int, int, int, int]:
    """Turn an (a, r, g, b) tuple or a packed 0xAARRGGBB int into (r, g, b, a)."""
    if isinstance(pixel, (int, np.integer)):
        value = int(pixel) & 0xFFFFFFFF
        return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, (value >> 24) & 0xFF
    a, r, g, b = pixel
    return r, g, b, a


def image_from_argb(width: int, height: int, pixels: Sequence[int | Sequence[int]]) -> Image.Image:
    """Build an RGBA image from row-major ARGB pixels.

    Each pixel is either an (alpha, red, green, blue) tuple or a packed
    32-bit 0xAARRGGBB integer.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f'Image dimensions must be positive, got ({width}, {height})')
    if len(pixels) != width * height:
        raise ValueError(f'Expected {width * height} pixels for a {width}x{height} image, got {len(pixels)}')

    rgba = np.array([_unpack_argb(p) for p in pixels], dtype=np.uint8).reshape(height, width, 4)
    return Image.fromarray(rgba)
