"""Ring buffer of the most recent robot states and commands."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Tuple

from franka_control.control_types import (
    CartesianPose,
    CartesianVelocities,
    JointPositions,
    JointVelocities,
    Torques,
)
from franka_control.log import Record, RobotCommand

Vector = Tuple[float, ...]


def _zeros(size: int) -> Vector:
    return (0.0,) * size


@dataclass
class MotionGeneratorCommand:
    """Motion values as sent to the robot."""

    q_c: Vector = field(default_factory=lambda: _zeros(7))
    dq_c: Vector = field(default_factory=lambda: _zeros(7))
    O_T_EE_c: Vector = field(default_factory=lambda: _zeros(16))
    O_dP_EE_c: Vector = field(default_factory=lambda: _zeros(6))
    elbow_c: Vector = field(default_factory=lambda: _zeros(2))
    valid_elbow: bool = False
    motion_generation_finished: bool = False


@dataclass
class ControllerCommand:
    """Torque values as sent to the robot."""

    tau_J_d: Vector = field(default_factory=lambda: _zeros(7))


@dataclass
class RawRobotCommand:
    """Motion and controller command of one control cycle."""

    message_id: int = 0
    motion: MotionGeneratorCommand = field(default_factory=MotionGeneratorCommand)
    control: ControllerCommand = field(default_factory=ControllerCommand)


def _convert(command: RawRobotCommand) -> RobotCommand:
    return RobotCommand(
        joint_positions=JointPositions(command.motion.q_c),
        joint_velocities=JointVelocities(command.motion.dq_c),
        cartesian_pose=CartesianPose(command.motion.O_T_EE_c),
        cartesian_velocities=CartesianVelocities(command.motion.O_dP_EE_c),
        torques=Torques(command.control.tau_J_d),
    )


class Logger:
    """Keeps the last ``log_size`` state/command pairs."""

    def __init__(self, log_size: int) -> None:
        if log_size < 0:
            raise ValueError("log_size must not be negative.")
        self.log_size = log_size
        self._entries: Deque[Tuple[object, RawRobotCommand]] = deque(maxlen=log_size)

    def __len__(self) -> int:
        return len(self._entries)

    def log(self, state: object, command: RawRobotCommand) -> None:
        """Store a pair, dropping the oldest one when full."""
        if self.log_size == 0:
            return
        self._entries.append((state, command))

    def flush(self) -> List[Record]:
        """Return the stored pairs, oldest first, as records and empty the buffer."""
        records = [Record(state=state, command=_convert(cmd)) for state, cmd in self._entries]
        self._entries.clear()
        return records