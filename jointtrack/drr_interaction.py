"""Keyboard and mouse handling for posing a model in the DRR tool."""

from __future__ import annotations

import math
from typing import Optional

from jointtrack.interaction import ActorPose, MouseButton, MouseState
from jointtrack.transforms import axis_angle_rotation, rotations_312

STEP = 1.0

_UNIT_AXES = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


def _rotation(xa: float, ya: float, za: float):
    """R = Rz @ Rx @ Ry for angles in degrees."""
    rx = axis_angle_rotation(_UNIT_AXES[0], math.radians(xa))
    ry = axis_angle_rotation(_UNIT_AXES[1], math.radians(ya))
    rz = axis_angle_rotation(_UNIT_AXES[2], math.radians(za))
    return rz @ rx @ ry


def _rotate(actor: ActorPose, axis: int, degrees: float) -> None:
    """Rotate the actor about one of its own axes."""
    turned = _rotation(actor.xa, actor.ya, actor.za) @ axis_angle_rotation(
        _UNIT_AXES[axis], math.radians(degrees)
    )
    actor.xa, actor.ya, actor.za = rotations_312(turned)


class DrrKeyboardController:
    """Moves the DRR model one pixel or one degree per key press, and by mouse drag.

    Shift with the arrows rotates about x (up/down) and y (left/right);
    control with the arrows moves along z (up/down) and rotates about z
    (left/right); plain arrows move in x and y. Dragging with only the right
    button held moves the model in depth with the cursor.
    """

    def __init__(self) -> None:
        self.mouse = MouseState()

    def handle_key(
        self, actor: Optional[ActorPose], key: str, shift: bool = False, control: bool = False
    ) -> bool:
        """Apply a key press to ``actor``; True if the actor was moved."""
        if actor is None:
            return False
        if shift:
            moves = {
                "Up": lambda: _rotate(actor, 0, STEP),
                "Down": lambda: _rotate(actor, 0, -STEP),
                "Left": lambda: _rotate(actor, 1, -STEP),
                "Right": lambda: _rotate(actor, 1, STEP),
            }
        elif control:
            moves = {
                "Up": lambda: setattr(actor, "z", actor.z + STEP),
                "Down": lambda: setattr(actor, "z", actor.z - STEP),
                "Left": lambda: _rotate(actor, 2, -STEP),
                "Right": lambda: _rotate(actor, 2, STEP),
            }
        else:
            moves = {
                "Up": lambda: setattr(actor, "y", actor.y + STEP),
                "Down": lambda: setattr(actor, "y", actor.y - STEP),
                "Left": lambda: setattr(actor, "x", actor.x - STEP),
                "Right": lambda: setattr(actor, "x", actor.x + STEP),
            }
        move = moves.get(key)
        if move is None:
            return False
        move()
        return True

    def press(self, button: MouseButton, cursor_y: int = 0, model_z: Optional[float] = None) -> None:
        """Record a button press; a right press also records the cursor row and model depth."""
        self.mouse.press(button, cursor_y, model_z)

    def release(self, button: MouseButton) -> None:
        """Record a button release."""
        self.mouse.release(button)

    def drag(self, actor: Optional[ActorPose], cursor_y: int) -> bool:
        """Follow a mouse move; True if the DRR should be redrawn."""
        if actor is None:
            return False
        depth = self.mouse.drag_z(cursor_y)
        if depth is not None:
            actor.z = depth
        return True