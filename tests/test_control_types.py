import pytest

from franka_control.control_types import (
    CartesianPose,
    CartesianVelocities,
    JointPositions,
    JointVelocities,
    Torques,
)

SEVEN = (0, 1, 2, 3, 4, 5, 6)
IDENTITY = (1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1)


def test_torques_from_sequence():
    assert Torques(list(SEVEN)).tau_J == SEVEN


def test_torques_from_tuple():
    assert Torques(SEVEN).tau_J == SEVEN


def test_torques_too_small():
    with pytest.raises(ValueError):
        Torques([0, 1, 2, 3, 4, 5])


def test_joint_positions_from_sequence():
    assert JointPositions(list(SEVEN)).q == SEVEN


def test_joint_positions_too_small():
    with pytest.raises(ValueError):
        JointPositions([0, 1, 2, 3, 4, 5])


def test_joint_velocities_from_sequence():
    assert JointVelocities(list(SEVEN)).dq == SEVEN


def test_joint_velocities_too_small():
    with pytest.raises(ValueError):
        JointVelocities([0, 1, 2, 3, 4, 5])


def test_cartesian_pose_from_sequence():
    pose = CartesianPose(list(IDENTITY))
    assert pose.O_T_EE == IDENTITY
    assert pose.has_elbow() is False


def test_cartesian_pose_with_elbow():
    pose = CartesianPose(list(IDENTITY), [0, -1])
    assert pose.O_T_EE == IDENTITY
    assert pose.elbow == (0, -1)
    assert pose.has_elbow() is True


@pytest.mark.parametrize(
    "pose, elbow",
    [
        ([0, 1, 2, 3, 4, 5], None),
        ([0, 1, 2, 3, 4, 5], [0, 1]),
        (list(range(16)), [0]),
    ],
)
def test_cartesian_pose_wrong_sizes(pose, elbow):
    with pytest.raises(ValueError):
        if elbow is None:
            CartesianPose(pose)
        else:
            CartesianPose(pose, elbow)


def test_cartesian_velocities_from_sequence():
    cv = CartesianVelocities([0, 1, 2, 3, 4, 5])
    assert cv.O_dP_EE == (0, 1, 2, 3, 4, 5)
    assert cv.has_elbow() is False


def test_cartesian_velocities_with_elbow():
    cv = CartesianVelocities([0, 1, 2, 3, 4, 5], [0, 1])
    assert cv.O_dP_EE == (0, 1, 2, 3, 4, 5)
    assert cv.elbow == (0, 1)
    assert cv.has_elbow() is True


@pytest.mark.parametrize(
    "velocities, elbow",
    [
        ([0, 1, 2, 3, 4], None),
        ([0, 1, 2, 3, 4], [0, 1]),
        ([0, 1, 2, 3, 4, 5], [0]),
    ],
)
def test_cartesian_velocities_wrong_sizes(velocities, elbow):
    with pytest.raises(ValueError):
        if elbow is None:
            CartesianVelocities(velocities)
        else:
            CartesianVelocities(velocities, elbow)


def test_motion_finished_defaults_false():
    assert Torques(SEVEN).motion_finished is False
    assert JointPositions(SEVEN, motion_finished=True).motion_finished is True