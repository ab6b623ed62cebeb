"""Exception hierarchy for robot communication and control."""

from __future__ import annotations

from typing import Iterable, List, Optional


class FrankaError(Exception):
    """Base class for all errors raised by this package."""


class CommandException(FrankaError):
    """A command failed or was aborted by the robot."""


class ProtocolException(FrankaError):
    """The robot sent an unexpected response."""


class ModelException(FrankaError):
    """The robot model could not be obtained or used."""


class RealtimeException(FrankaError):
    """Realtime scheduling could not be established."""


class ControlException(FrankaError):
    """An error occurred during motion generation or torque control.

    ``log`` holds the records collected shortly before the error.
    """

    def __init__(self, what: str, log: Optional[Iterable[object]] = None) -> None:
        super().__init__(what)
        self.log: List[object] = list(log) if log is not None else []


class IncompatibleVersionException(FrankaError):
    """The server speaks a different protocol version than this library."""

    def __init__(self, server_version: int, library_version: int) -> None:
        super().__init__(
            f"franka_control: Incompatible library version (server version: {server_version}, "
            f"library version: {library_version}). Please check for system updates "
            "or use a different version of this library."
        )
        self.server_version = server_version
        self.library_version = library_version