"""Intrinsic calibration of a single X-ray camera."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DENVER_PIXEL_PITCH = 0.375
DENVER_IMAGE_CENTER = 512.0


def _camera_matrix(fx: float, sc: float, cx: float, fy: float, cy: float) -> tuple[float, ...]:
    return (fx, sc, cx, 0.0, fy, cy, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class CameraCalibration:
    """Principal distance, principal point and pixel pitch (mm), with the camera matrix.

    ``camera_matrix`` is the 3x3 intrinsic matrix in row-major order.
    """

    principal_distance: float = 0.0
    principal_x: float = 0.0
    principal_y: float = 0.0
    pixel_pitch: float = 0.0
    fx: float = 0.0
    fy: float = 0.0
    cx: float = 0.0
    cy: float = 0.0
    camera_matrix: tuple[float, ...] = (0.0,) * 9
    type_name: str = ""
    image_width: Optional[int] = None
    image_height: Optional[int] = None

    @classmethod
    def from_principal(
        cls,
        principal_distance: float,
        principal_x: float,
        principal_y: float,
        pixel_pitch: float,
    ) -> CameraCalibration:
        """Calibration given in millimetres with a pixel pitch."""
        if pixel_pitch == 0:
            raise ValueError("pixel pitch must not be zero")
        fx = fy = principal_distance / pixel_pitch
        cx = principal_x / pixel_pitch
        cy = principal_y / pixel_pitch
        return cls(
            principal_distance=float(principal_distance),
            principal_x=float(principal_x),
            principal_y=float(principal_y),
            pixel_pitch=float(pixel_pitch),
            fx=fx,
            fy=fy,
            cx=cx,
            cy=cy,
            camera_matrix=_camera_matrix(fx, 0.0, cx, fy, cy),
            type_name="UF",
        )

    @classmethod
    def from_camera_matrix(
        cls, fx: float, sc: float, cx: float, fy: float, cy: float
    ) -> CameraCalibration:
        """Calibration given as camera-matrix entries in pixels, on a 1024-pixel image."""
        pitch = DENVER_PIXEL_PITCH
        return cls(
            principal_distance=fx * pitch,
            principal_x=(cx - DENVER_IMAGE_CENTER) * pitch,
            principal_y=(DENVER_IMAGE_CENTER - cy) * pitch,
            pixel_pitch=pitch,
            fx=float(fx),
            fy=float(fy),
            cx=float(cx),
            cy=float(cy),
            camera_matrix=_camera_matrix(fx, sc, cx, fy, cy),
            type_name="Denver",
        )

    @classmethod
    def from_camera_matrix_with_size(
        cls,
        fx: float,
        sc: float,
        cx: float,
        fy: float,
        cy: float,
        image_width: int,
        image_height: int,
    ) -> CameraCalibration:
        """Calibration given as camera-matrix entries for an image of known size."""
        return cls(
            fx=float(fx),
            fy=float(fy),
            cx=float(cx),
            cy=float(cy),
            camera_matrix=_camera_matrix(fx, sc, cx, fy, cy),
            type_name="Denver2",
            image_width=int(image_width),
            image_height=int(image_height),
        )