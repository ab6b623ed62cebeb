"""Error flags reported by the robot while it is being controlled."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

ERROR_NAMES: Tuple[str, ...] = (
    "joint_position_limits_violation",
    "cartesian_position_limits_violation",
    "self_collision_avoidance_violation",
    "joint_velocity_violation",
    "cartesian_velocity_violation",
    "force_control_safety_violation",
    "joint_reflex",
    "cartesian_reflex",
    "max_goal_pose_deviation_violation",
    "max_path_pose_deviation_violation",
    "cartesian_velocity_profile_safety_violation",
    "joint_position_motion_generator_start_pose_invalid",
    "joint_motion_generator_position_limits_violation",
    "joint_motion_generator_velocity_limits_violation",
    "joint_motion_generator_velocity_discontinuity",
    "joint_motion_generator_acceleration_discontinuity",
    "cartesian_position_motion_generator_start_pose_invalid",
    "cartesian_motion_generator_elbow_limit_violation",
    "cartesian_motion_generator_velocity_limits_violation",
    "cartesian_motion_generator_velocity_discontinuity",
    "cartesian_motion_generator_acceleration_discontinuity",
    "cartesian_motion_generator_elbow_sign_inconsistent",
    "cartesian_motion_generator_start_elbow_invalid",
    "cartesian_motion_generator_joint_position_limits_violation",
    "cartesian_motion_generator_joint_velocity_limits_violation",
    "cartesian_motion_generator_joint_velocity_discontinuity",
    "cartesian_motion_generator_joint_acceleration_discontinuity",
    "cartesian_position_motion_generator_invalid_frame",
    "force_controller_desired_force_tolerance_violation",
    "controller_torque_discontinuity",
    "start_elbow_sign_inconsistent",
    "communication_constraints_violation",
    "power_limit_violation",
    "joint_p2p_insufficient_torque_for_planning",
    "tau_j_range_violation",
    "instability_detected",
    "joint_move_in_wrong_direction",
)

ERROR_COUNT = len(ERROR_NAMES)

_INDEX = {name: index for index, name in enumerate(ERROR_NAMES)}


class Errors:
    """Set of error flags, one per entry of ``ERROR_NAMES``.

    Each flag can be read as an attribute of the same name.
    """

    __slots__ = ("_flags",)

    def __init__(self, flags: Optional[Iterable[bool]] = None) -> None:
        values = (False,) * ERROR_COUNT if flags is None else tuple(bool(f) for f in flags)
        if len(values) != ERROR_COUNT:
            raise ValueError(f"Errors requires exactly {ERROR_COUNT} flags, got {len(values)}.")
        self._flags = values

    @property
    def flags(self) -> Tuple[bool, ...]:
        """All flags in protocol order."""
        return self._flags

    def __getattr__(self, name: str) -> bool:
        index = _INDEX.get(name)
        if index is None:
            raise AttributeError(name)
        return self._flags[index]

    def __bool__(self) -> bool:
        return any(self._flags)

    def active(self) -> List[str]:
        """Names of the flags that are set, in protocol order."""
        return [name for name, flag in zip(ERROR_NAMES, self._flags) if flag]

    def __str__(self) -> str:
        return "[" + ", ".join(f'"{name}"' for name in self.active()) + "]"

    def __repr__(self) -> str:
        return f"Errors({self.active()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Errors):
            return NotImplemented
        return self._flags == other._flags

    def __hash__(self) -> int:
        return hash(self._flags)