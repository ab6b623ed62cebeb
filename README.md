# franka_control

Building blocks for software that controls a 7-joint robot arm. The package provides these modules:

- `franka_control.duration`: `Duration` is an immutable time span measured in whole milliseconds.
  It stores an unsigned 64-bit count. `+`, `-` and `*` wrap around modulo 2**64.
  `//` by a `Duration` gives an integer count. `//` by an integer gives a `Duration`. `%` works the same way.
  `to_sec()` and `to_msec()` convert the value, and durations can be compared.
- `franka_control.control_types`: `Torques`, `JointPositions`, `JointVelocities`,
  `CartesianPose` and `CartesianVelocities`. Each of these takes a fixed number of values and raises
  `ValueError` when it gets a different number. The two Cartesian types also take an optional
  two-element `elbow`, and `has_elbow()` reports whether one was set.
- `franka_control.lowpass_filter`: `lowpass_filter` is a first-order filter for scalar samples.
  `cartesian_lowpass_filter` filters column-major 4x4 poses. It blends the translation linearly
  and interpolates the orientation spherically. Both functions raise `ValueError` for invalid
  parameters and for non-finite input.
- `franka_control.errors`: `Errors` holds the robot's 37 error flags. Each flag can be read as an
  attribute, for example `errors.joint_reflex`. The object is truthy when any flag is set.
  `active()` returns the names of the flags that are set, and `str()` renders them as a JSON
  array of names.
- `franka_control.gripper_state`: `GripperState` holds width, maximum width, grasp flag,
  temperature and a `Duration` time stamp. `str()` renders it as a JSON-like object.
- `franka_control.load_calculations`: `combine_center_of_mass`, `combine_inertia_tensor` and
  `skew_symmetric_matrix_from_vector` combine an end effector and a load into one rigid body.
  Inertia tensors are given and returned as 9 column-major values.
- `franka_control.log`: `LoggedState`, `RobotCommand`, `Record` and `log_to_csv`. The last one
  renders records as CSV text with a header line.
- `franka_control.logger`: `Logger` is a ring buffer that keeps the last `log_size` pairs of state
  and `RawRobotCommand`. `flush()` returns them oldest first as `Record`s and empties the buffer.
- `franka_control.control_tools`: `has_realtime_kernel(path=None)` reads the kernel's realtime
  flag file. `set_current_thread_to_highest_scheduler_priority()` switches the calling thread to
  FIFO scheduling and raises `RealtimeException` when that fails.
- `franka_control.exceptions`: `FrankaError` and its subclasses. These are `CommandException`,
  `ProtocolException`, `ModelException`, `RealtimeException`, `ControlException` (which carries a
  `log`) and `IncompatibleVersionException` (which carries `server_version` and `library_version`).

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Examples

```python
from franka_control.duration import Duration
from franka_control.control_types import JointPositions
from franka_control.lowpass_filter import lowpass_filter

step = Duration(1)
print((step * 5).to_sec())          # 0.005

q = JointPositions([0, 0, 0, -1.5, 0, 1.5, 0.8])

filtered = lowpass_filter(0.001, 1.0, 0.0, 100.0)   # about 0.3859
```

```python
from franka_control.errors import Errors

flags = [False] * 37
flags[0] = True
errors = Errors(flags)
if errors:
    print(errors)                   # ["joint_position_limits_violation"]
```

```python
from franka_control.log import LoggedState, log_to_csv
from franka_control.logger import Logger, RawRobotCommand

logger = Logger(log_size=50)
logger.log(LoggedState(), RawRobotCommand())   # once per control cycle
print(log_to_csv(logger.flush()))
```

## What this package does not do

This package holds data types and helper functions only. It does not connect to a robot or a
gripper over the network. It does not run a control loop or apply rate limiting to commands. It
has no kinematic or dynamic model of the arm. It installs no command-line program.