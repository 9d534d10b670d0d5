# MIT License (see LICENSE)
"""
Small numeric helpers for 2D vectors.

Vectors are numpy float64 arrays of shape (2,); trails are arrays of
shape (n, 2).
"""
from __future__ import annotations
import math

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Lets callers pass tuples or lists for positions and velocities.
    """
    return np.array(x, dtype=np.float64)


def vec2(x) -> np.ndarray:
    """Like f64, but insists on exactly two components."""
    v = f64(x)
    if v.shape != (2,):
        raise ValueError(f"Expected a 2D vector, got shape {v.shape}")
    return v


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return math.sqrt(norm2(v))


def is_finite(x: float) -> bool:
    """True for real, finite scalars (rejects NaN and +/-inf)."""
    return math.isfinite(float(x))


def empty_trail() -> np.ndarray:
    """A zero-length trail with the right shape and dtype."""
    return np.zeros((0, 2), dtype=np.float64)


def to_list(arr) -> list[float]:
    """Convert a numpy array or tuple to a plain list of floats (JSON-safe)."""
    if isinstance(arr, np.ndarray):
        return arr.tolist()
    return [float(a) for a in arr]
