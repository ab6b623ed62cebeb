"""Helpers for running the control loop with realtime priority."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, Union

from franka_control.exceptions import RealtimeException

DEFAULT_REALTIME_PATH = "/sys/kernel/realtime"


def has_realtime_kernel(path: Optional[Union[str, Path]] = None) -> bool:
    """True if the running kernel reports realtime capabilities.

    ``path`` overrides the kernel flag file; a missing or unreadable file means no.
    """
    if path is None:
        if sys.platform == "win32":
            return True
        path = DEFAULT_REALTIME_PATH
    try:
        content = Path(path).read_text()
    except OSError:
        return False
    tokens = content.split()
    return bool(tokens) and tokens[0] in ("1", "+1")


def set_current_thread_to_highest_scheduler_priority() -> None:
    """Switch the calling thread to FIFO scheduling at the highest priority.

    Raises RealtimeException if that is not possible.
    """
    fifo = getattr(os, "SCHED_FIFO", None)
    get_max = getattr(os, "sched_get_priority_max", None)
    set_scheduler = getattr(os, "sched_setscheduler", None)
    param_type = getattr(os, "sched_param", None)
    if fifo is None or get_max is None or set_scheduler is None or param_type is None:
        raise RealtimeException(
            "franka_control: realtime scheduling is not supported on this platform"
        )
    try:
        priority = get_max(fifo)
    except OSError as exc:
        raise RealtimeException(
            f"franka_control: unable to get maximum possible thread priority: {exc.strerror}"
        ) from exc
    if priority == -1:
        raise RealtimeException(
            "franka_control: unable to get maximum possible thread priority"
        )
    try:
        set_scheduler(0, fifo, param_type(priority))
    except OSError as exc:
        raise RealtimeException(
            f"franka_control: unable to set realtime scheduling: {exc.strerror}"
        ) from exc