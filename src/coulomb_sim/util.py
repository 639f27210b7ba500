# MIT License (see LICENSE)
"""
Utility functions for vector math and numeric operations.

Low-level 3D vector helpers used by the force solver and integrators.
All functions operate on vectors represented as numpy arrays of shape (3,).
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.
    
    Used throughout the codebase to ensure consistent numeric precision
    and allow tuple/list inputs for positions and velocities.
    """
    return np.array(x, dtype=np.float64)


def vec3(x) -> np.ndarray:
    """Convert array-like to a float64 vector, checking it has 3 components."""
    v = f64(x)
    if v.shape != (3,):
        raise ValueError(f"Expected a 3-component vector, got shape {v.shape}")
    return v


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 3D vector. Avoids sqrt for performance."""
    return float(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 3D vector."""
    return float(np.sqrt(norm2(v)))


def unit(v: np.ndarray, eps: float = 1e-12) -> np.ndarray:
    """
    Return a unit (normalized) vector in the same direction as v.
    
    Returns zero vector if |v| < eps to avoid division by zero.
    """
    n = norm(v)
    if n < eps:
        return np.zeros(3, dtype=np.float64)
    return v / n
