# jointtrack

Building blocks for registering 3D implant and bone models to single-plane and
biplane X-ray images: pose geometry, camera calibration and pose conversion
between cameras, the storage used by a DIRECT search, STL mesh loading,
contour curvature, and toolkit-free keyboard and mouse handling for posing a
model.

## Modules

- `jointtrack.geometry`: `Point6D`, a frozen pose with translations `x`, `y`,
  `z` and rotation angles `xa`, `ya`, `za`. It iterates over its six
  components and has `distance_from`, `largest_direction`, `get` and
  `with_direction`. `Direction` names the six components. `HyperBox6D` holds a
  `value`, a `center` and `sides`, with `size` (half the length of the
  diagonal), `contains_point` and `trisect_side`.
- `jointtrack.transforms`: numpy helpers: `matmul`, `invert_transform` (rigid
  4x4 inverse), `cross_product`, `dot_product`, `axis_angle_rotation`,
  `create_312_transform` (translation plus z-x-y angles in degrees),
  `rotations_312` (recovers the angles of `R = Rz @ Rx @ Ry`) and `linspace`.
- `jointtrack.cost_function`: `CostFunction`, a named set of typed
  `Parameter`s grouped by `ParameterKind` (`DOUBLE`, `INT`, `BOOL`), with
  `add_parameter`, `set_value`, `get_value` and `parameters_of`. Unknown
  parameters raise `KeyError`. Also the `Stage` and `SearchStageFlag` enums.
- `jointtrack.settings`: default search ranges, budgets, dilations, edge
  thresholds, pixel colours and window layout spacings, plus
  `version_string()`.
- `jointtrack.camera`: `CameraCalibration`, built with `from_principal`
  (principal distance, principal point and pixel pitch in mm),
  `from_camera_matrix` or `from_camera_matrix_with_size` (camera-matrix
  entries in pixels).
- `jointtrack.calibration`: `Vector3`, `Matrix3` (supports `transpose()` and
  `@`) and `Calibration`, created with `Calibration.monoplane` or
  `Calibration.biplane`. `pose_a_to_b` and `pose_b_to_a` convert poses between
  the cameras; in monoplane mode they return the pose unchanged.
- `jointtrack.storage`: `LocationStorage` keeps a pose for every frame and
  every model. New models start at `(0, 0, -0.25 * principal_distance /
  pixel_pitch)`. `PoseMatrix` keeps poses by model name and tracks one
  principal model. `OptimizerSettings` holds ranges, budgets and enabled
  stages, with the defaults from `jointtrack.settings`.
- `jointtrack.direct_storage`: `DirectDataStorage` keeps hyperboxes in columns
  of equal size, sorted by size, with the best box of each column last. It
  starts with a unit box centred at 0.5 in every direction.
- `jointtrack.stl`: `stl_file_format` tells a binary STL from an ASCII STL
  from an invalid file. `read_stl` returns an `StlMesh` with `vertices` of
  shape (n, 3, 3) and `normals` of shape (n, 3), and raises `StlError` on bad
  input. `Model.load` reads a model and by default names it after the file's
  stem.
- `jointtrack.curvature`: `menger_curvature`, `pick_three_points`,
  `curvature_along_contour`, `gaussian_convolution` and `derivative` (both
  circular), `positive_inflection_points` and `heatmap_at_point` (an 8-bit
  Gaussian image).
- `jointtrack.interaction`: `MouseButton` and `MouseState`, `ActorPose`, and
  `KeyboardController`. The controller moves and rotates an actor from arrow
  keys with shift or control, changes its speed, and builds the
  location/orientation text. With `camera_b` set, that text is given in
  camera A's frame.
- `jointtrack.drr_interaction`: `DrrKeyboardController`, which moves a model
  one unit or one degree per key press and follows right-button drags in
  depth.

## Install

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
pytest
```

## Examples

Convert a pose seen from camera A into camera B's frame and back:

```python
from jointtrack.camera import CameraCalibration
from jointtrack.calibration import Calibration, Matrix3, Vector3
from jointtrack.geometry import Point6D

cam = CameraCalibration.from_principal(1000.0, 0.0, 0.0, 0.375)
axes = Matrix3(((0, 0, 1), (0, 1, 0), (-1, 0, 0)))
cal = Calibration.biplane(cam, cam, Vector3(100.0, 0.0, -100.0), axes)

pose_b = cal.pose_a_to_b(Point6D(10, 20, -500, 5, 10, 15))
pose_a = cal.pose_b_to_a(pose_b)
```

Read an STL file:

```python
from jointtrack.stl import Model, read_stl, stl_file_format

print(stl_file_format("femur.stl"))
mesh = read_stl("femur.stl")
print(mesh.triangle_count)

femur = Model.load("femur.stl", model_type="femur")
```

Move a model from the keyboard:

```python
from jointtrack.interaction import ActorPose, KeyboardController

controller = KeyboardController()
actor = ActorPose(z=-600.0)
controller.handle_key(actor, "Up")               # y += speed
controller.handle_key(actor, "Up", control=True)  # z += speed
print(controller.info_text(actor))
```

## What the package does not do

It does not render models or digitally reconstructed radiographs. It does not
process images: there is no edge detection, dilation or segmentation. It does
not evaluate cost functions or run the DIRECT optimisation loop; it only
describes cost functions and stores the search's hyperboxes. There is no
graphical interface and no command-line program.