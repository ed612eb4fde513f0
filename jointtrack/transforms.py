"""Rotation and rigid-transform helpers for 3x3 and 4x4 matrices."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

_UNIT_TOLERANCE = 1.0


def matmul(first, second) -> np.ndarray:
    """Matrix product of two square matrices of the same size."""
    a = np.asarray(first, dtype=float)
    b = np.asarray(second, dtype=float)
    if a.ndim != 2 or a.shape[0] != a.shape[1] or a.shape != b.shape:
        raise ValueError(f"expected two square matrices of equal size, got {a.shape} and {b.shape}")
    return a @ b


def invert_transform(transform) -> np.ndarray:
    """Inverse of a rigid 4x4 transform: transposed rotation, rotated translation."""
    t = np.asarray(transform, dtype=float)
    if t.shape != (4, 4):
        raise ValueError(f"expected a 4x4 transform, got shape {t.shape}")
    rotation = t[:3, :3].T
    result = np.eye(4)
    result[:3, :3] = rotation
    result[:3, 3] = -rotation @ t[:3, 3]
    return result


def cross_product(first: Sequence[float], second: Sequence[float]) -> np.ndarray:
    """Cross product of two 3-vectors."""
    return np.cross(np.asarray(first, dtype=float), np.asarray(second, dtype=float))


def dot_product(first: Sequence[float], second: Sequence[float]) -> float:
    """Dot product of two 3-vectors."""
    return float(np.dot(np.asarray(first, dtype=float), np.asarray(second, dtype=float)))


def axis_angle_rotation(axis: Sequence[float], angle: float) -> np.ndarray:
    """Rotation matrix for ``angle`` radians about ``axis``."""
    k = np.asarray(axis, dtype=float)
    norm = np.linalg.norm(k)
    if norm == 0:
        raise ValueError("rotation axis must not be zero")
    k = k / norm
    skew = np.array(
        [
            [0.0, -k[2], k[1]],
            [k[2], 0.0, -k[0]],
            [-k[1], k[0], 0.0],
        ]
    )
    c, s = math.cos(angle), math.sin(angle)
    return c * np.eye(3) + s * skew + (1 - c) * np.outer(k, k)


def create_312_transform(
    xt: float, yt: float, zt: float, zr: float, xr: float, yr: float
) -> np.ndarray:
    """4x4 transform from a translation and z-x-y rotation angles in degrees."""
    cx, sx = math.cos(math.radians(xr)), math.sin(math.radians(xr))
    cy, sy = math.cos(math.radians(yr)), math.sin(math.radians(yr))
    cz, sz = math.cos(math.radians(zr)), math.sin(math.radians(zr))
    return np.array(
        [
            [cy * sx * sz - cz * sy, -cx * sz, cy * cz + sx * sy * sz, xt],
            [-cy * cz * sx - sy * sz, cx * cz, cy * sz - cz * sx * sy, yt],
            [cx * cy, sx, cx * sy, zt],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotations_312(rotation) -> tuple[float, float, float]:
    """Recover (xr, yr, zr) in degrees from a rotation R = Rz @ Rx @ Ry."""
    r = np.asarray(rotation, dtype=float)
    if r.shape != (3, 3):
        raise ValueError(f"expected a 3x3 rotation, got shape {r.shape}")
    if r[2, 1] >= _UNIT_TOLERANCE:
        xr = math.pi / 2
        zr = math.atan2(r[0, 2], r[0, 0])
        yr = 0.0
    elif r[2, 1] <= -_UNIT_TOLERANCE:
        xr = -math.pi / 2
        zr = -math.atan2(r[0, 2], r[0, 0])
        yr = 0.0
    else:
        xr = math.asin(r[2, 1])
        zr = math.atan2(-r[0, 1], r[1, 1])
        yr = math.atan2(-r[2, 0], r[2, 2])
    return math.degrees(xr), math.degrees(yr), math.degrees(zr)


def linspace(start: float, end: float, count: int) -> list[float]:
    """``count`` evenly spaced values from ``start`` to ``end`` inclusive."""
    if count < 0:
        raise ValueError("count must not be negative")
    return np.linspace(float(start), float(end), count).tolist()