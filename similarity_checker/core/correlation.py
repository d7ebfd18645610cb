"""Normalized cross-correlation between two channel buffers.

    corr(A, B) = Σ(Aᵢ − Ā)(Bᵢ − B̄) / sqrt(Σ(Aᵢ − Ā)² · Σ(Bᵢ − B̄)²)

A constant buffer has zero variance and the formula divides by zero. In that
case the score is 1.0 when both buffers are identical and 0.0 otherwise.
"""

from __future__ import annotations

import math

import numpy as np


def _is_constant(buf: np.ndarray) -> bool:
    return buf.size == 0 or bool(buf.min() == buf.max())


def _degenerate(a: np.ndarray, b: np.ndarray) -> float:
    return 1.0 if np.array_equal(a, b) else 0.0


def cross_correlation(a: np.ndarray, b: np.ndarray) -> float:
    """Return the correlation of two equal-length buffers, clamped to [-1.0, 1.0]."""
    a = np.asarray(a)
    b = np.asarray(b)
    if a.shape != b.shape:
        raise ValueError(f'Channel buffers differ in length: {a.size} != {b.size}')

    if _is_constant(a) or _is_constant(b):
        return _degenerate(a, b)
    # sqrt(x * x) can round below x
    if np.array_equal(a, b):
        return 1.0

    da = a.astype(np.float64) - a.mean(dtype=np.float64)
    db = b.astype(np.float64) - b.mean(dtype=np.float64)
    denominator = math.sqrt(float(np.dot(da, da)) * float(np.dot(db, db)))
    if denominator == 0.0 or not math.isfinite(denominator):
        return _degenerate(a, b)

    score = float(np.dot(da, db)) / denominator
    return max(-1.0, min(1.0, score))
