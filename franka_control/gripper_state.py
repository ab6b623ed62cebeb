"""State of the gripper as read from the robot."""

from __future__ import annotations

from dataclasses import dataclass, field

from franka_control.duration import Duration


def _num(value: float) -> str:
    return f"{value:g}"


@dataclass
class GripperState:
    """Current gripper width, maximum width, grasp flag, temperature and time stamp."""

    width: float = 0.0
    max_width: float = 0.0
    is_grasped: bool = False
    temperature: int = 0
    time: Duration = field(default_factory=Duration)

    def __str__(self) -> str:
        return (
            f'{{"width": {_num(self.width)}, "max_width": {_num(self.max_width)}, '
            f'"is_grasped": {int(bool(self.is_grasped))}, '
            f'"temperature": {self.temperature}, "time": {_num(self.time.to_sec())}}}'
        )