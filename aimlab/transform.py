"""4x4 matrix helpers and the Transform holder for environment pieces.

Matrices are numpy arrays in mathematical (row, column) order and act on
column vectors: ``matrix @ (x, y, z, 1)``. Each helper multiplies the new
transform onto the right of the given matrix, so the last one applied acts
first on a point.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

import numpy as np


def identity() -> np.ndarray:
    """A fresh 4x4 identity matrix."""
    return np.identity(4, dtype=float)


def _as_vec3(values: Iterable[float]) -> np.ndarray:
    arr = np.asarray(tuple(values), dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected three components, got shape {arr.shape}")
    return arr


def _as_matrix(matrix: np.ndarray) -> np.ndarray:
    arr = np.asarray(matrix, dtype=float)
    if arr.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {arr.shape}")
    return arr


def translate(matrix: np.ndarray, offset: Iterable[float]) -> np.ndarray:
    """``matrix`` followed by a translation by ``offset``."""
    t = identity()
    t[:3, 3] = _as_vec3(offset)
    return _as_matrix(matrix) @ t


def scale(matrix: np.ndarray, factors: Iterable[float]) -> np.ndarray:
    """``matrix`` followed by a per-axis scale."""
    s = np.diag([*_as_vec3(factors), 1.0])
    return _as_matrix(matrix) @ s


def rotate(matrix: np.ndarray, angle: float, axis: Iterable[float]) -> np.ndarray:
    """``matrix`` followed by a counter-clockwise rotation of ``angle`` radians about ``axis``."""
    a = _as_vec3(axis)
    norm = float(np.linalg.norm(a))
    if norm == 0.0:
        raise ValueError("rotation axis must not be the zero vector")
    x, y, z = a / norm
    c = math.cos(angle)
    s = math.sin(angle)
    skew = np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])
    unit = np.array([x, y, z])
    r = identity()
    r[:3, :3] = c * np.identity(3) + s * skew + (1.0 - c) * np.outer(unit, unit)
    return _as_matrix(matrix) @ r


def look_at(eye: Iterable[float], center: Iterable[float], up: Iterable[float]) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    e = _as_vec3(eye)
    f = _as_vec3(center) - e
    f_len = float(np.linalg.norm(f))
    if f_len == 0.0:
        raise ValueError("eye and center must differ")
    f /= f_len
    s = np.cross(f, _as_vec3(up))
    s_len = float(np.linalg.norm(s))
    if s_len == 0.0:
        raise ValueError("up must not be parallel to the view direction")
    s /= s_len
    u = np.cross(s, f)
    m = identity()
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -float(np.dot(s, e))
    m[1, 3] = -float(np.dot(u, e))
    m[2, 3] = float(np.dot(f, e))
    return m


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection to clip space with depth in [-1, 1]."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must not be zero")
    if far == near:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    if tan_half == 0.0:
        raise ValueError("field of view must not be zero")
    m = np.zeros((4, 4), dtype=float)
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


def ortho(left: float, right: float, bottom: float, top: float) -> np.ndarray:
    """2D orthographic projection mapping the rectangle onto [-1, 1] squared."""
    if left == right or bottom == top:
        raise ValueError("orthographic bounds must not be degenerate")
    m = identity()
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -1.0
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    return m


@dataclass
class Transform:
    """Placement of a piece of scenery, held as a model matrix."""

    model_matrix: np.ndarray = field(default_factory=identity)