"""Curvature along image contours, smoothing, and keypoint heatmaps."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

Point = Sequence[float]

_POINT_SPACING = 5
_KERNEL_RADIUS_SIGMAS = 3.0
_HEATMAP_SIGMA = 3.0
_HEATMAP_PEAK = 255


def menger_curvature(p1: Point, ref_pt: Point, p2: Point) -> float:
    """Signed Menger curvature of three 2-D points (positive when counter-clockwise).

    Its magnitude is the reciprocal of the radius of the circle through the
    points; degenerate triples (repeated points) give 0.
    """
    ax, ay = float(p1[0]), float(p1[1])
    bx, by = float(ref_pt[0]), float(ref_pt[1])
    cx, cy = float(p2[0]), float(p2[1])
    cross = (bx - ax) * (cy - by) - (by - ay) * (cx - bx)
    lengths = math.dist((ax, ay), (bx, by)) * math.dist((bx, by), (cx, cy)) * math.dist(
        (cx, cy), (ax, ay)
    )
    if lengths == 0:
        return 0.0
    return 2.0 * cross / lengths


def pick_three_points(contour: Sequence[Point], index: int, distance: int):
    """Points ``distance`` before and after ``index`` on a closed contour, with the point itself."""
    count = len(contour)
    if count == 0:
        raise ValueError("contour is empty")
    return (
        contour[(index - distance) % count],
        contour[index % count],
        contour[(index + distance) % count],
    )


def curvature_along_contour(contour: Sequence[Point]) -> np.ndarray:
    """Menger curvature at every point of a closed contour."""
    count = len(contour)
    if count < 3:
        return np.zeros(count)
    spacing = max(1, min(_POINT_SPACING, (count - 1) // 2))
    return np.array(
        [menger_curvature(*pick_three_points(contour, index, spacing)) for index in range(count)]
    )


def gaussian_convolution(values: Sequence[float], sigma: float) -> np.ndarray:
    """Circular convolution of ``values`` with a normalised Gaussian kernel."""
    if sigma <= 0:
        raise ValueError("sigma must be positive")
    data = np.asarray(values, dtype=float)
    if data.size == 0:
        return data.copy()
    radius = max(1, int(math.ceil(_KERNEL_RADIUS_SIGMAS * sigma)))
    offsets = np.arange(-radius, radius + 1)
    kernel = np.exp(-(offsets**2) / (2.0 * sigma * sigma))
    kernel /= kernel.sum()
    return sum(weight * np.roll(data, -offset) for offset, weight in zip(offsets, kernel))


def derivative(values: Sequence[float], step: int) -> np.ndarray:
    """Circular central difference of ``values`` over ``step`` samples on each side."""
    if step <= 0:
        raise ValueError("step must be positive")
    data = np.asarray(values, dtype=float)
    if data.size == 0:
        return data.copy()
    return (np.roll(data, -step) - np.roll(data, step)) / (2.0 * step)


def positive_inflection_points(
    values: Sequence[float], derivative_values: Sequence[float], threshold: float
) -> list[int]:
    """Indices of local maxima of ``values`` above ``threshold``.

    A maximum is where the derivative turns from positive to non-positive,
    treating the sequence as closed.
    """
    data = np.asarray(values, dtype=float)
    slope = np.asarray(derivative_values, dtype=float)
    if data.shape != slope.shape:
        raise ValueError("values and derivative must have the same length")
    previous = np.roll(slope, 1)
    mask = (previous > 0) & (slope <= 0) & (data > threshold)
    return [int(index) for index in np.flatnonzero(mask)]


def heatmap_at_point(x: int, y: int, height: int, width: int) -> np.ndarray:
    """8-bit Gaussian heatmap of the given size, peaking at column ``x``, row ``y``."""
    if height <= 0 or width <= 0:
        raise ValueError("heatmap height and width must be positive")
    rows = np.arange(height)[:, None]
    columns = np.arange(width)[None, :]
    squared = (columns - x) ** 2 + (rows - y) ** 2
    gaussian = np.exp(-squared / (2.0 * _HEATMAP_SIGMA**2))
    return np.round(gaussian * _HEATMAP_PEAK).astype(np.uint8)