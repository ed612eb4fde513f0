"""Monoplane and biplane calibration, and pose conversion between cameras."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

import numpy as np

from jointtrack.camera import CameraCalibration
from jointtrack.geometry import Point6D
from jointtrack.transforms import rotations_312


@dataclass(frozen=True)
class Vector3:
    """A 3-vector."""

    v1: float = 0.0
    v2: float = 0.0
    v3: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.v1, self.v2, self.v3))

    def _array(self) -> np.ndarray:
        return np.array(tuple(self), dtype=float)


@dataclass(frozen=True)
class Matrix3:
    """A 3x3 matrix stored as a tuple of rows; index with ``m[i, j]``."""

    rows: tuple = ((0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 0.0))

    def __post_init__(self) -> None:
        array = np.asarray(self.rows, dtype=float)
        if array.shape != (3, 3):
            raise ValueError(f"expected a 3x3 matrix, got shape {array.shape}")
        object.__setattr__(self, "rows", tuple(tuple(float(v) for v in row) for row in array))

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, column = index
        return self.rows[row][column]

    def _array(self) -> np.ndarray:
        return np.array(self.rows, dtype=float)

    def transpose(self) -> Matrix3:
        return Matrix3(self._array().T)

    def __matmul__(self, other):
        if isinstance(other, Matrix3):
            return Matrix3(self._array() @ other._array())
        if isinstance(other, Vector3):
            return Vector3(*(float(v) for v in self._array() @ other._array()))
        return NotImplemented


def _rotation(pose: Point6D) -> np.ndarray:
    """R = Rz @ Rx @ Ry from the pose angles in degrees."""
    tx, ty, tz = (math.radians(a) for a in (pose.xa, pose.ya, pose.za))
    rx = np.array(
        [[1.0, 0.0, 0.0], [0.0, math.cos(tx), -math.sin(tx)], [0.0, math.sin(tx), math.cos(tx)]]
    )
    ry = np.array(
        [[math.cos(ty), 0.0, math.sin(ty)], [0.0, 1.0, 0.0], [-math.sin(ty), 0.0, math.cos(ty)]]
    )
    rz = np.array(
        [[math.cos(tz), -math.sin(tz), 0.0], [math.sin(tz), math.cos(tz), 0.0], [0.0, 0.0, 1.0]]
    )
    return rz @ rx @ ry


def _pose(location: np.ndarray, rotation: np.ndarray) -> Point6D:
    xa, ya, za = rotations_312(rotation)
    x, y, z = (float(v) for v in location)
    return Point6D(x, y, z, xa, ya, za)


@dataclass(frozen=True)
class Calibration:
    """Calibration of camera A and, in biplane mode, camera B.

    Camera A sits at the origin with the standard axes; ``origin_b`` and
    ``axes_b`` give camera B's position and orthogonal axes relative to A.
    """

    camera_a: CameraCalibration = field(default_factory=CameraCalibration)
    camera_b: CameraCalibration = field(default_factory=CameraCalibration)
    origin_b: Vector3 = field(default_factory=Vector3)
    axes_b: Matrix3 = field(default_factory=Matrix3)
    is_biplane: bool = False
    type_name: str = ""

    @classmethod
    def monoplane(cls, camera: CameraCalibration, type_name: str = "UF") -> Calibration:
        return cls(camera_a=camera, is_biplane=False, type_name=type_name)

    @classmethod
    def biplane(
        cls,
        camera_a: CameraCalibration,
        camera_b: CameraCalibration,
        origin_b: Vector3,
        axes_b: Matrix3,
    ) -> Calibration:
        return cls(
            camera_a=camera_a,
            camera_b=camera_b,
            origin_b=origin_b,
            axes_b=axes_b,
            is_biplane=True,
        )

    def pose_a_to_b(self, pose: Point6D) -> Point6D:
        """Express a camera-A pose in camera B's frame (unchanged in monoplane)."""
        if not self.is_biplane:
            return pose
        q_t = self.axes_b._array().T
        offset = np.array([pose.x, pose.y, pose.z]) - self.origin_b._array()
        return _pose(q_t @ offset, q_t @ _rotation(pose))

    def pose_b_to_a(self, pose: Point6D) -> Point6D:
        """Express a camera-B pose in camera A's frame (unchanged in monoplane)."""
        if not self.is_biplane:
            return pose
        q = self.axes_b._array()
        location = q @ np.array([pose.x, pose.y, pose.z]) + self.origin_b._array()
        return _pose(location, q @ _rotation(pose))