# MIT License (see LICENSE)
"""
Utility functions for 3D vector math.

Positions, velocities and accelerations are numpy arrays of shape (3,).
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Lets particles be created from tuples or lists.
    """
    return np.array(x, dtype=np.float64)


def vec3(x) -> np.ndarray:
    """Convert to a float64 array and require exactly three components."""
    v = f64(x)
    if v.shape != (3,):
        raise ValueError(f"Expected a 3-vector, got shape {v.shape}")
    return v


def norm2(v: np.ndarray) -> np.float64:
    """
    Squared magnitude of a 3D vector.

    Returned as np.float64 (not float) so that negative powers of an exact
    zero yield inf rather than raising ZeroDivisionError.
    """
    return v[0] * v[0] + v[1] * v[1] + v[2] * v[2]
