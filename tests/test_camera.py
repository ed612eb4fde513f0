import math

import pytest

from jointtrack.camera import CameraCalibration


def test_default_calibration_is_zero():
    camera = CameraCalibration()
    assert camera.principal_distance == 0
    assert camera.pixel_pitch == 0
    assert camera.image_width is None


def test_from_principal_focal_lengths_match_distance():
    camera = CameraCalibration.from_principal(1000.0, 2.0, -3.0, 0.5)
    assert camera.type_name == "UF"
    assert math.isclose(camera.fx * camera.pixel_pitch, camera.principal_distance)
    assert camera.fx == camera.fy
    assert math.isclose(camera.cx * camera.pixel_pitch, camera.principal_x)
    assert math.isclose(camera.cy * camera.pixel_pitch, camera.principal_y)


def test_from_principal_camera_matrix_layout():
    camera = CameraCalibration.from_principal(1000.0, 2.0, -3.0, 0.5)
    m = camera.camera_matrix
    assert len(m) == 9
    assert m[0] == camera.fx
    assert m[1] == 0
    assert m[2] == camera.cx
    assert m[4] == camera.fy
    assert m[5] == camera.cy
    assert (m[3], m[6], m[7], m[8]) == (0, 0, 0, 1)


def test_from_principal_rejects_zero_pitch():
    with pytest.raises(ValueError):
        CameraCalibration.from_principal(1000.0, 0.0, 0.0, 0.0)


def test_from_camera_matrix_centered_principal_point():
    camera = CameraCalibration.from_camera_matrix(2000.0, 0.25, 512.0, 2010.0, 512.0)
    assert camera.type_name == "Denver"
    assert camera.pixel_pitch == 0.375
    assert camera.principal_x == 0
    assert camera.principal_y == 0
    assert math.isclose(camera.principal_distance, camera.fx * camera.pixel_pitch)
    assert camera.camera_matrix[1] == 0.25
    assert camera.camera_matrix[4] == 2010.0


def test_from_camera_matrix_offsets_have_opposite_signs():
    camera = CameraCalibration.from_camera_matrix(2000.0, 0.0, 600.0, 2000.0, 600.0)
    assert camera.principal_x > 0
    assert camera.principal_y < 0
    assert math.isclose(camera.principal_x, -camera.principal_y)


def test_from_camera_matrix_with_size():
    camera = CameraCalibration.from_camera_matrix_with_size(
        1500.0, 0.0, 320.0, 1510.0, 240.0, 640, 480
    )
    assert camera.type_name == "Denver2"
    assert (camera.image_width, camera.image_height) == (640, 480)
    assert camera.camera_matrix == (1500.0, 0.0, 320.0, 0.0, 1510.0, 240.0, 0.0, 0.0, 1.0)
    assert (camera.fx, camera.fy, camera.cx, camera.cy) == (1500.0, 1510.0, 320.0, 240.0)