"""Keyboard and mouse handling for moving model actors in the 3-D viewer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from jointtrack.calibration import Calibration
from jointtrack.geometry import Point6D
from jointtrack.transforms import axis_angle_rotation, rotations_312

MAX_SPEED = 20.0
FINE_SPEED_STEP = 0.1
MIN_FINE_SPEED = 0.2

_UNIT_AXES = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


class MouseButton(Enum):
    """A mouse button."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


@dataclass
class MouseState:
    """Which buttons are held, and where a right-button drag started."""

    left: bool = False
    right: bool = False
    middle: bool = False
    right_down_y: int = 0
    right_down_model_z: float = 0.0

    def press(self, button: MouseButton, cursor_y: int = 0, model_z: Optional[float] = None) -> None:
        """Record a button press; a right press also records the cursor row and model depth."""
        button = MouseButton(button)
        if button is MouseButton.LEFT:
            self.left = True
        elif button is MouseButton.MIDDLE:
            self.middle = True
        else:
            self.right = True
            self.right_down_y = int(cursor_y)
            if model_z is not None:
                self.right_down_model_z = float(model_z)

    def release(self, button: MouseButton) -> None:
        """Record a button release."""
        setattr(self, MouseButton(button).value, False)

    def drag_z(self, cursor_y: int) -> Optional[float]:
        """New model depth while only the right button is held, else None."""
        if not self.right or self.left or self.middle:
            return None
        return cursor_y - self.right_down_y + self.right_down_model_z


@dataclass
class ActorPose:
    """Position and orientation (degrees, z-x-y order) of a model actor."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    xa: float = 0.0
    ya: float = 0.0
    za: float = 0.0

    @property
    def point(self) -> Point6D:
        return Point6D(self.x, self.y, self.z, self.xa, self.ya, self.za)


def _rotation(xa: float, ya: float, za: float) -> np.ndarray:
    """R = Rz @ Rx @ Ry for angles in degrees."""
    rx = axis_angle_rotation(_UNIT_AXES[0], math.radians(xa))
    ry = axis_angle_rotation(_UNIT_AXES[1], math.radians(ya))
    rz = axis_angle_rotation(_UNIT_AXES[2], math.radians(za))
    return rz @ rx @ ry


def _rotate(actor: ActorPose, axis: int, degrees: float) -> None:
    """Rotate the actor about one of its own axes."""
    current = _rotation(actor.xa, actor.ya, actor.za)
    turned = current @ axis_angle_rotation(_UNIT_AXES[axis], math.radians(degrees))
    actor.xa, actor.ya, actor.za = rotations_312(turned)


def _fmt(value: float) -> str:
    return f"{value:f}"


class KeyboardController:
    """Moves actors from key presses and reports their pose as display text.

    ``speed`` is the step in pixels or degrees of one key press. With
    ``camera_b`` set, reported poses are converted to camera A's frame.
    """

    def __init__(
        self,
        calibration: Optional[Calibration] = None,
        camera_b: bool = False,
        speed: float = 1.0,
        information: bool = True,
    ) -> None:
        self.calibration = calibration if calibration is not None else Calibration()
        self.camera_b = camera_b
        self.speed = float(speed)
        self.information = information
        self.optimizing = False

    def increase_speed(self) -> None:
        """Step up by 1 between 1 and 20, by 0.1 below 1."""
        if 1 <= self.speed < MAX_SPEED:
            self.speed += 1
        elif self.speed < 1:
            self.speed += FINE_SPEED_STEP

    def decrease_speed(self) -> None:
        """Step down by 1 above 1, by 0.1 down to 0.1."""
        if self.speed > 1:
            self.speed -= 1
        elif self.speed >= MIN_FINE_SPEED:
            self.speed -= FINE_SPEED_STEP

    def _toggle_information(self) -> None:
        self.information = not self.information

    def handle_key(
        self, actor: Optional[ActorPose], key: str, shift: bool = False, control: bool = False
    ) -> bool:
        """Apply a key press to ``actor`` (None if nothing is picked).

        Returns True when the key asks for the actor to become the principal model.
        """
        if actor is None:
            if key in ("i", "I"):
                self._toggle_information()
            return False

        step = self.speed
        if shift:
            if key == "plus":
                self.increase_speed()
            elif key == "underscore":
                self.decrease_speed()
            elif key == "Up":
                _rotate(actor, 0, step)
            elif key == "Down":
                _rotate(actor, 0, -step)
            elif key == "Left":
                _rotate(actor, 1, -step)
            elif key == "Right":
                _rotate(actor, 1, step)
        elif control:
            if key == "Up":
                actor.z += step
            elif key == "Down":
                actor.z -= step
            elif key == "Left":
                _rotate(actor, 2, -step)
            elif key == "Right":
                _rotate(actor, 2, step)
        else:
            if key == "equal":
                self.increase_speed()
            elif key == "minus":
                self.decrease_speed()
            elif key == "Up":
                actor.y += step
            elif key == "Down":
                actor.y -= step
            elif key == "Left":
                actor.x -= step
            elif key == "Right":
                actor.x += step
            elif key in ("i", "I"):
                self._toggle_information()
            elif key in ("p", "P") and not self.optimizing:
                return True
        return False

    def info_text(self, actor: ActorPose) -> str:
        """Location, orientation and speed text; only the prefix when information is off."""
        text = "Location: <"
        if not self.information:
            return text
        pose = actor.point
        if self.camera_b:
            pose = self.calibration.pose_b_to_a(pose)
        location = ",".join(_fmt(v) for v in (pose.x, pose.y, pose.z))
        orientation = ",".join(_fmt(v) for v in (pose.xa, pose.ya, pose.za))
        return (
            f"{text}{location}>\nOrientation: <{orientation}>"
            f"\nKeyboard Speed: {_fmt(self.speed)}"
        )