import numpy as np
import pytest

from franka_control.load_calculations import (
    combine_center_of_mass,
    combine_inertia_tensor,
    skew_symmetric_matrix_from_vector,
)

ZERO3 = (0.0, 0.0, 0.0)
ZERO9 = (0.0,) * 9


def test_center_of_mass_zero_total_mass():
    assert combine_center_of_mass(0.0, (1.0, 2.0, 3.0), 0.0, (4.0, 5.0, 6.0)) == ZERO3


def test_center_of_mass_without_load_is_ee():
    result = combine_center_of_mass(0.7, (0.1, 0.2, 0.3), 0.0, (4.0, 5.0, 6.0))
    assert result == pytest.approx((0.1, 0.2, 0.3))


def test_center_of_mass_is_symmetric():
    a = combine_center_of_mass(1.5, (0.1, 0.0, 0.2), 0.5, (0.0, 0.3, 0.4))
    b = combine_center_of_mass(0.5, (0.0, 0.3, 0.4), 1.5, (0.1, 0.0, 0.2))
    assert a == pytest.approx(b)


def test_center_of_mass_same_position():
    result = combine_center_of_mass(2.0, (0.1, 0.2, 0.3), 3.0, (0.1, 0.2, 0.3))
    assert result == pytest.approx((0.1, 0.2, 0.3))


def test_skew_matrix_matches_cross_product():
    v = np.array([1.0, -2.0, 0.5])
    w = np.array([0.3, 0.7, -1.1])
    skew = skew_symmetric_matrix_from_vector(v)
    np.testing.assert_allclose(skew @ w, np.cross(v, w))
    np.testing.assert_allclose(skew.T, -skew)
    np.testing.assert_allclose(skew @ v, np.zeros(3), atol=1e-15)


def test_inertia_zero_total_mass():
    result = combine_inertia_tensor(
        1.0, (0.1, 0.0, 0.0), (1.0,) * 9, 1.0, (0.0, 0.1, 0.0), (1.0,) * 9, 0.0, ZERO3
    )
    assert result == ZERO9


def test_inertia_single_body_unchanged():
    i_ee = (0.1, 0.0, 0.0, 0.0, 0.2, 0.0, 0.0, 0.0, 0.3)
    com = (0.05, -0.02, 0.1)
    result = combine_inertia_tensor(0.8, com, i_ee, 0.0, ZERO3, ZERO9, 0.8, com)
    assert result == pytest.approx(i_ee)


def test_inertia_keeps_column_major_order():
    i_ee = (1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0)
    result = combine_inertia_tensor(1.0, ZERO3, i_ee, 0.0, ZERO3, ZERO9, 1.0, ZERO3)
    assert result == pytest.approx(i_ee)


def test_inertia_ignores_tensor_of_massless_body():
    i_load = (0.1, 0.0, 0.0, 0.0, 0.2, 0.0, 0.0, 0.0, 0.3)
    result = combine_inertia_tensor(0.0, ZERO3, (5.0,) * 9, 1.0, ZERO3, i_load, 1.0, ZERO3)
    assert result == pytest.approx(i_load)


def test_inertia_bodies_at_origin_add_up():
    i_ee = (0.1, 0.0, 0.0, 0.0, 0.2, 0.0, 0.0, 0.0, 0.3)
    i_load = (0.05, 0.01, 0.0, 0.01, 0.05, 0.0, 0.0, 0.0, 0.05)
    result = combine_inertia_tensor(1.0, ZERO3, i_ee, 2.0, ZERO3, i_load, 3.0, ZERO3)
    assert result == pytest.approx(tuple(a + b for a, b in zip(i_ee, i_load)))


def test_inertia_result_is_symmetric_for_symmetric_inputs():
    i_ee = (0.1, 0.01, 0.0, 0.01, 0.2, 0.0, 0.0, 0.0, 0.3)
    i_load = (0.05, 0.0, 0.02, 0.0, 0.05, 0.0, 0.02, 0.0, 0.05)
    com_ee = (0.0, 0.0, 0.05)
    com_load = (0.02, 0.03, 0.1)
    com_total = combine_center_of_mass(0.7, com_ee, 0.3, com_load)
    result = np.array(
        combine_inertia_tensor(0.7, com_ee, i_ee, 0.3, com_load, i_load, 1.0, com_total)
    ).reshape(3, 3, order="F")
    np.testing.assert_allclose(result, result.T, atol=1e-12)