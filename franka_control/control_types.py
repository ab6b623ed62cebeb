"""Command types returned by motion generator and controller callbacks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple

Vector = Tuple[float, ...]


def _fixed(values: Iterable[float], size: int, name: str) -> Vector:
    converted = tuple(float(v) for v in values)
    if len(converted) != size:
        raise ValueError(f"Invalid number of elements in {name}.")
    return converted


def _zeros(size: int) -> Vector:
    return (0.0,) * size


@dataclass
class Torques:
    """Joint torques in Nm for the seven joints."""

    tau_J: Vector
    motion_finished: bool = False

    def __post_init__(self) -> None:
        self.tau_J = _fixed(self.tau_J, 7, "tau_J")


@dataclass
class JointPositions:
    """Joint positions in rad for the seven joints."""

    q: Vector
    motion_finished: bool = False

    def __post_init__(self) -> None:
        self.q = _fixed(self.q, 7, "joint_positions")


@dataclass
class JointVelocities:
    """Joint velocities in rad/s for the seven joints."""

    dq: Vector
    motion_finished: bool = False

    def __post_init__(self) -> None:
        self.dq = _fixed(self.dq, 7, "joint_velocities")


@dataclass
class CartesianPose:
    """End effector pose as a column-major 4x4 homogeneous transform, plus optional elbow."""

    O_T_EE: Vector
    elbow: Vector = field(default_factory=lambda: _zeros(2))
    motion_finished: bool = False

    def __post_init__(self) -> None:
        self.O_T_EE = _fixed(self.O_T_EE, 16, "cartesian_pose")
        self.elbow = _fixed(self.elbow, 2, "elbow")

    def has_elbow(self) -> bool:
        """True if an elbow configuration was given."""
        return self.elbow != _zeros(2)


@dataclass
class CartesianVelocities:
    """End effector twist (vx, vy, vz, wx, wy, wz), plus optional elbow."""

    O_dP_EE: Vector
    elbow: Vector = field(default_factory=lambda: _zeros(2))
    motion_finished: bool = False

    def __post_init__(self) -> None:
        self.O_dP_EE = _fixed(self.O_dP_EE, 6, "cartesian_velocities")
        self.elbow = _fixed(self.elbow, 2, "elbow")

    def has_elbow(self) -> bool:
        """True if an elbow configuration was given."""
        return self.elbow != _zeros(2)