"""Optimizer settings and per-frame, per-model pose storage."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from jointtrack import settings
from jointtrack.geometry import Point6D


@dataclass
class OptimizerSettings:
    """Search ranges, budgets and enabled stages of the DIRECT optimizer."""

    trunk_range: Point6D = field(default_factory=lambda: settings.TRUNK_RANGE)
    trunk_budget: int = settings.TRUNK_BUDGET
    branch_range: Point6D = field(default_factory=lambda: settings.BRANCH_RANGE)
    branch_budget: int = settings.BRANCH_BUDGET
    number_branches: int = settings.NUMBER_BRANCHES
    leaf_range: Point6D = field(default_factory=lambda: settings.Z_SEARCH_RANGE)
    leaf_budget: int = settings.Z_SEARCH_BUDGET
    enable_branch: bool = settings.ENABLE_BRANCH
    enable_leaf: bool = settings.ENABLE_Z


def _check_index(index: int, length: int, what: str) -> None:
    if not 0 <= index < length:
        raise IndexError(f"{what} index {index} out of range (0..{length - 1})")


class LocationStorage:
    """Pose of every loaded model in every loaded frame.

    While no frames are loaded, poses are kept in a single frame-less row
    and the frame index is ignored.
    """

    def __init__(self) -> None:
        self._frames: list[list[Point6D]] = []
        self._default_poses: list[Point6D] = []

    def load_new_model(self, principal_distance: float, pixel_pitch: float) -> None:
        """Add a model at (0, 0, -0.25 * principal_distance / pixel_pitch) in every frame."""
        if pixel_pitch == 0:
            raise ValueError("pixel pitch must not be zero")
        pose = Point6D(0.0, 0.0, -0.25 * principal_distance / pixel_pitch, 0.0, 0.0, 0.0)
        self._default_poses.append(pose)
        for row in self._frames:
            row.append(pose)

    def load_new_frame(self) -> None:
        """Add a frame holding every loaded model at its default pose."""
        self._frames.append(list(self._default_poses))

    def _row(self, frame_index: int) -> list[Point6D]:
        if not self._frames:
            return self._default_poses
        _check_index(frame_index, len(self._frames), "frame")
        return self._frames[frame_index]

    def get_pose(self, frame_index: int, model_index: int) -> Point6D:
        row = self._row(frame_index)
        _check_index(model_index, len(row), "model")
        return row[model_index]

    def save_pose(self, frame_index: int, model_index: int, pose: Point6D) -> None:
        row = self._row(frame_index)
        _check_index(model_index, len(row), "model")
        row[model_index] = pose

    def frame_count(self) -> int:
        return len(self._frames)

    def model_count(self) -> int:
        return len(self._default_poses)


class PoseMatrix:
    """Poses of named models over frames, with one principal model."""

    def __init__(self) -> None:
        self._poses: dict[str, list[Point6D]] = {}
        self._principal: Optional[str] = None

    def add_model(self, poses: Sequence[Point6D], model_name: str, is_principal: bool) -> None:
        """Store ``poses`` (one per frame) for ``model_name``."""
        self._poses[model_name] = list(poses)
        if is_principal:
            self._principal = model_name

    def _model_poses(self, model_name: Optional[str]) -> list[Point6D]:
        if model_name is None:
            if self._principal is None:
                raise LookupError("no principal model has been added")
            model_name = self._principal
        try:
            return self._poses[model_name]
        except KeyError:
            raise KeyError(f"no model named {model_name!r}") from None

    def get_model_pose(self, frame_index: int, model_name: Optional[str] = None) -> Point6D:
        """Pose of ``model_name`` (the principal model if None) at ``frame_index``."""
        poses = self._model_poses(model_name)
        _check_index(frame_index, len(poses), "frame")
        return poses[frame_index]

    def update_principal_pose(self, frame_index: int, pose: Point6D) -> None:
        poses = self._model_poses(None)
        _check_index(frame_index, len(poses), "frame")
        poses[frame_index] = pose