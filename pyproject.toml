[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jointtrack"
version = "3.4.0"
description = "Pose geometry, calibration, DIRECT search storage, STL loading and contour curvature tools for model-image registration of joint implants"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "biomechanics",
    "registration",
    "fluoroscopy",
    "pose-estimation",
    "stl",
    "direct-optimization",
    "curvature",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["jointtrack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
