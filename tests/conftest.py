"""Shared image fixtures, built in memory with Pillow and numpy."""

import numpy as np
import pytest
from PIL import Image


def solid(width: int, height: int, rgba: tuple[int, int, int, int]) -> Image.Image:
    return Image.new('RGBA', (width, height), rgba)


@pytest.fixture
def gradient() -> Image.Image:
    """32x16 RGBA image with distinct, non-constant content in every channel."""
    rng = np.random.default_rng(7)
    arr = rng.integers(0, 256, size=(16, 32, 4), dtype=np.uint8)
    return Image.fromarray(arr)


@pytest.fixture
def noisy(gradient: Image.Image) -> Image.Image:
    """The gradient with +/-2 of rendering noise per component."""
    rng = np.random.default_rng(11)
    arr = np.asarray(gradient).astype(int) + rng.integers(-2, 3, size=(16, 32, 4))
    return Image.fromarray(np.clip(arr, 0, 255).astype(np.uint8))
