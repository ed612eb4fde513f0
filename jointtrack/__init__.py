"""Pose geometry, calibration, DIRECT storage, STL meshes, curvature and model interaction."""

__version__ = "3.4.0"

__all__ = [
    "geometry",
    "transforms",
    "cost_function",
    "settings",
    "camera",
    "calibration",
    "storage",
    "direct_storage",
    "stl",
    "curvature",
    "interaction",
    "drr_interaction",
]