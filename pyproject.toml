[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "franka_control"
version = "0.1.0"
description = "Command types, low-pass filters, error flags, load calculations and logging utilities for a 7-joint robot arm"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["robotics", "robot-arm", "control", "lowpass-filter", "inertia", "logging"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["franka_control"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
