"""Combination of end effector and load mass properties."""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np


def combine_center_of_mass(
    m_ee: float,
    F_x_Cee: Sequence[float],
    m_load: float,
    F_x_Cload: Sequence[float],
) -> Tuple[float, float, float]:
    """Mass-weighted center of mass of end effector and load; zero if no mass."""
    if m_ee + m_load <= 0:
        return (0.0, 0.0, 0.0)
    ee = np.asarray(F_x_Cee, dtype=float)
    load = np.asarray(F_x_Cload, dtype=float)
    total = (m_ee * ee + m_load * load) / (m_ee + m_load)
    return tuple(float(v) for v in total)


def skew_symmetric_matrix_from_vector(vector: Sequence[float]) -> np.ndarray:
    """Return the 3x3 cross-product matrix of ``vector``."""
    x, y, z = (float(v) for v in vector)
    return np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])


def _column_major(values: Sequence[float]) -> np.ndarray:
    return np.asarray(values, dtype=float).reshape(3, 3, order="F")


def _shift(com: Sequence[float]) -> np.ndarray:
    skew = skew_symmetric_matrix_from_vector(com)
    return skew @ skew


def combine_inertia_tensor(
    m_ee: float,
    F_x_Cee: Sequence[float],
    I_ee: Sequence[float],
    m_load: float,
    F_x_Cload: Sequence[float],
    I_load: Sequence[float],
    m_total: float,
    F_x_Ctotal: Sequence[float],
) -> Tuple[float, ...]:
    """Inertia tensor of end effector and load about their common center of mass.

    Tensors are 3x3 matrices given and returned as 9 values in column-major order.
    """
    if m_total == 0:
        return (0.0,) * 9

    inertia_ee = _column_major(I_ee) if m_ee != 0 else np.zeros((3, 3))
    inertia_load = _column_major(I_load) if m_load != 0 else np.zeros((3, 3))

    inertia_ee_flange = inertia_ee - m_ee * _shift(F_x_Cee)
    inertia_load_flange = inertia_load - m_load * _shift(F_x_Cload)
    inertia_total = inertia_ee_flange + inertia_load_flange + m_total * _shift(F_x_Ctotal)

    return tuple(float(v) for v in inertia_total.flatten(order="F"))