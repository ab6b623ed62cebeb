"""Records of robot states and sent commands, and their CSV export."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence, Tuple

from franka_control.control_types import (
    CartesianPose,
    CartesianVelocities,
    JointPositions,
    JointVelocities,
    Torques,
)
from franka_control.duration import Duration

Vector = Tuple[float, ...]


def _zeros(size: int) -> Vector:
    return (0.0,) * size


def _identity_pose() -> Vector:
    return (1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0)


@dataclass
class LoggedState:
    """The part of the robot state that is kept in a log record."""

    time: Duration = field(default_factory=Duration)
    control_command_success_rate: float = 0.0
    q: Vector = field(default_factory=lambda: _zeros(7))
    q_d: Vector = field(default_factory=lambda: _zeros(7))
    dq: Vector = field(default_factory=lambda: _zeros(7))
    dq_d: Vector = field(default_factory=lambda: _zeros(7))
    tau_J: Vector = field(default_factory=lambda: _zeros(7))
    tau_ext_hat_filtered: Vector = field(default_factory=lambda: _zeros(7))


@dataclass
class RobotCommand:
    """All command values sent to the robot in one control cycle."""

    joint_positions: JointPositions = field(default_factory=lambda: JointPositions(_zeros(7)))
    joint_velocities: JointVelocities = field(
        default_factory=lambda: JointVelocities(_zeros(7))
    )
    cartesian_pose: CartesianPose = field(default_factory=lambda: CartesianPose(_zeros(16)))
    cartesian_velocities: CartesianVelocities = field(
        default_factory=lambda: CartesianVelocities(_zeros(6))
    )
    torques: Torques = field(default_factory=lambda: Torques(_zeros(7)))


@dataclass
class Record:
    """One robot state together with the command sent in the same cycle."""

    state: LoggedState = field(default_factory=LoggedState)
    command: RobotCommand = field(default_factory=RobotCommand)


_STATE_COLUMNS = (
    ("q", 7),
    ("q_d", 7),
    ("dq", 7),
    ("dq_d", 7),
    ("tau_J", 7),
    ("tau_ext_hat_filtered", 7),
)

_COMMAND_COLUMNS = (
    ("q_d", 7),
    ("dq_d", 7),
    ("O_T_EE_d", 16),
    ("O_dP_EE_d", 6),
    ("tau_J_d", 7),
)


def _csv_name(name: str, size: int) -> str:
    return ", ".join(f"{name}[{i}]" for i in range(size))


def _number(value: float) -> str:
    return f"{value:g}"


def _values(values: Sequence[float]) -> str:
    return ",".join(_number(v) for v in values)


def _state_header() -> str:
    return "duration, success rate, " + ",".join(_csv_name(n, s) for n, s in _STATE_COLUMNS)


def _command_header() -> str:
    return "sent commands," + ",".join(_csv_name(n, s) for n, s in _COMMAND_COLUMNS)


def _state_line(state: LoggedState) -> str:
    parts = [
        str(state.time.to_msec()),
        _number(state.control_command_success_rate),
        _values(state.q),
        _values(state.q_d),
        _values(state.dq),
        _values(state.dq_d),
        _values(state.tau_J),
        _values(state.tau_ext_hat_filtered),
    ]
    return ",".join(parts)


def _command_line(command: RobotCommand) -> str:
    parts = [
        _values(command.joint_positions.q),
        _values(command.joint_velocities.dq),
        _values(command.cartesian_pose.O_T_EE),
        _values(command.cartesian_velocities.O_dP_EE),
        _values(command.torques.tau_J),
    ]
    return ",".join(parts)


def log_to_csv(log: Iterable[Record]) -> str:
    """Render log records as CSV text with a header line; empty text for an empty log."""
    records = list(log)
    if not records:
        return ""
    lines = [f"{_state_header()},{_command_header()}"]
    lines.extend(f"{_state_line(r.state)},,{_command_line(r.command)}" for r in records)
    return "\n".join(lines) + "\n"