import pytest

from jointtrack.calibration import Calibration, Matrix3, Vector3
from jointtrack.camera import CameraCalibration
from jointtrack.interaction import (
    ActorPose,
    KeyboardController,
    MouseButton,
    MouseState,
)


def test_press_and_release_flags():
    state = MouseState()
    state.press(MouseButton.LEFT)
    state.press(MouseButton.MIDDLE)
    assert state.left and state.middle and not state.right
    state.release(MouseButton.LEFT)
    state.release(MouseButton.MIDDLE)
    assert not state.left and not state.middle


def test_right_drag_moves_depth():
    state = MouseState()
    state.press(MouseButton.RIGHT, cursor_y=100, model_z=-50.0)
    assert state.drag_z(100) == -50.0
    assert state.drag_z(130) == pytest.approx(-20.0)


def test_drag_ignored_when_other_button_held():
    state = MouseState()
    state.press(MouseButton.RIGHT, cursor_y=10, model_z=5.0)
    state.press(MouseButton.LEFT)
    assert state.drag_z(40) is None
    state.release(MouseButton.LEFT)
    assert state.drag_z(40) == pytest.approx(35.0)


def test_drag_none_without_right_button():
    state = MouseState()
    assert state.drag_z(20) is None
    state.press(MouseButton.RIGHT, cursor_y=0, model_z=1.0)
    state.release(MouseButton.RIGHT)
    assert state.drag_z(20) is None


def test_speed_caps_at_twenty():
    controller = KeyboardController()
    for _ in range(30):
        controller.increase_speed()
    assert controller.speed == 20


def test_speed_fine_steps_below_one():
    controller = KeyboardController()
    controller.decrease_speed()
    assert controller.speed == pytest.approx(0.9)
    for _ in range(30):
        controller.decrease_speed()
    floor = controller.speed
    assert 0 < floor < 0.3
    controller.decrease_speed()
    assert controller.speed == floor


def test_speed_keys_naked_and_shift():
    controller = KeyboardController()
    actor = ActorPose()
    controller.handle_key(actor, "equal")
    assert controller.speed == 2
    controller.handle_key(actor, "plus", shift=True)
    assert controller.speed == 3
    controller.handle_key(actor, "underscore", shift=True)
    controller.handle_key(actor, "minus")
    assert controller.speed == 1


def test_naked_arrows_translate_by_speed():
    controller = KeyboardController(speed=2.0)
    actor = ActorPose(1.0, 1.0, 1.0)
    controller.handle_key(actor, "Up")
    controller.handle_key(actor, "Right")
    assert (actor.x, actor.y, actor.z) == (3.0, 3.0, 1.0)
    controller.handle_key(actor, "Down")
    controller.handle_key(actor, "Left")
    assert (actor.x, actor.y) == (1.0, 1.0)


def test_control_up_down_moves_depth():
    controller = KeyboardController(speed=3.0)
    actor = ActorPose(z=-10.0)
    controller.handle_key(actor, "Up", control=True)
    assert actor.z == -7.0
    controller.handle_key(actor, "Down", control=True)
    controller.handle_key(actor, "Down", control=True)
    assert actor.z == -13.0


def test_shift_up_rotates_about_x():
    controller = KeyboardController()
    actor = ActorPose()
    controller.handle_key(actor, "Up", shift=True)
    assert actor.xa == pytest.approx(1.0)
    assert actor.ya == pytest.approx(0.0, abs=1e-9)
    assert actor.za == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize(
    "forward, backward, shift, control",
    [
        ("Up", "Down", True, False),
        ("Right", "Left", True, False),
        ("Right", "Left", False, True),
    ],
)
def test_rotations_undo(forward, backward, shift, control):
    controller = KeyboardController(speed=5.0)
    actor = ActorPose(0, 0, 0, 10.0, -20.0, 30.0)
    controller.handle_key(actor, forward, shift=shift, control=control)
    assert (actor.xa, actor.ya, actor.za) != pytest.approx((10.0, -20.0, 30.0))
    controller.handle_key(actor, backward, shift=shift, control=control)
    assert (actor.xa, actor.ya, actor.za) == pytest.approx((10.0, -20.0, 30.0))


def test_principal_request_only_when_not_optimizing():
    controller = KeyboardController()
    actor = ActorPose()
    assert controller.handle_key(actor, "p") is True
    assert controller.handle_key(actor, "Up") is False
    controller.optimizing = True
    assert controller.handle_key(actor, "P") is False


def test_information_toggle_with_and_without_actor():
    controller = KeyboardController()
    controller.handle_key(None, "i")
    assert controller.information is False
    controller.handle_key(ActorPose(), "I")
    assert controller.information is True


def test_no_actor_ignores_movement():
    controller = KeyboardController()
    assert controller.handle_key(None, "Up") is False
    assert controller.speed == 1.0


def test_info_text_camera_a():
    controller = KeyboardController()
    actor = ActorPose(1, 2, 3, 4, 5, 6)
    assert controller.info_text(actor) == (
        "Location: <1.000000,2.000000,3.000000>\n"
        "Orientation: <4.000000,5.000000,6.000000>\n"
        "Keyboard Speed: 1.000000"
    )


def test_info_text_hidden():
    controller = KeyboardController(information=False)
    assert controller.info_text(ActorPose(1, 2, 3)) == "Location: <"


def test_info_text_camera_b_converts_to_a():
    camera = CameraCalibration.from_principal(1000.0, 0.0, 0.0, 0.5)
    identity = Matrix3(((1, 0, 0), (0, 1, 0), (0, 0, 1)))
    calibration = Calibration.biplane(camera, camera, Vector3(10.0, 20.0, 30.0), identity)
    controller = KeyboardController(calibration=calibration, camera_b=True)
    actor = ActorPose(1, 2, 3)
    expected_point = calibration.pose_b_to_a(actor.point)
    text = controller.info_text(actor)
    location = text.split("\n")[0]
    assert location == "Location: <{:f},{:f},{:f}>".format(
        expected_point.x, expected_point.y, expected_point.z
    )
    assert expected_point.x == pytest.approx(11.0)