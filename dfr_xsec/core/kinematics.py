"""Kinematic relations and phase-space transforms.

The DFR formula is written in the canonical (x, y) parameterization. A value
requested in another parameterization S is obtained by multiplying with

    J(XY -> S) = |d(x, y) / d(s1, s2)|

taken from an explicit table below. Transforms between two non-canonical
spaces go through XY: J(A -> B) = J(XY -> B) / J(XY -> A).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

import numpy as np

from dfr_xsec.config.enums import KinePhaseSpace, RefFrame
from dfr_xsec.core.constants import A_SMALL_NUM, LN10, NUCLEON_MASS
from dfr_xsec.core.interaction import Interaction


@dataclass(frozen=True)
class Range1D:
    """Closed interval [min, max]."""

    min: float
    max: float

    @property
    def is_empty(self) -> bool:
        return self.max <= self.min

    @property
    def width(self) -> float:
        return self.max - self.min


def q2_from_xy(x, y, E, M=NUCLEON_MASS):
    """Momentum transfer Q^2 = 2 x y M E [GeV^2]. Works on arrays."""
    return 2.0 * x * y * M * E


def x_from_q2y(Q2, y, E, M=NUCLEON_MASS):
    return Q2 / (2.0 * y * M * E)


def t_min(E_pion, m_pion):
    """Smallest |t| reachable for a pion of energy E_pion: (m_pi^2 / 2E_pi)^2."""
    return (0.5 * m_pion * m_pion / E_pion) ** 2


def x_limits(eps: float = A_SMALL_NUM) -> Range1D:
    return Range1D(eps, 1.0 - eps)


def y_limits(E: float, m_pion: float, m_lepton: float, eps: float = A_SMALL_NUM) -> Range1D:
    """Inelasticity range in which both the pion and the lepton are on shell.

    The range is empty below the reaction threshold.
    """
    if E <= 0:
        return Range1D(0.0, 0.0)
    return Range1D(m_pion / E + eps, 1.0 - m_lepton / E - eps)


# =============================================================================
# Jacobian table: J(XY -> S) as a function of (x, y, E, M)
# =============================================================================

_JacobianFn = Callable[[float, float, float, float], float]

_FROM_XY: Dict[KinePhaseSpace, _JacobianFn] = {
    KinePhaseSpace.XY: lambda x, y, E, M: 1.0,
    # x = 10^u, y = 10^v
    KinePhaseSpace.LOGX_LOGY: lambda x, y, E, M: x * y * LN10 * LN10,
    # x = Q2 / (2 y M E), y = y
    KinePhaseSpace.Q2Y: lambda x, y, E, M: 1.0 / (2.0 * y * M * E),
    # x = 10^u / (2 y M E), y = 10^v; dy/du = 0 so the determinant is diagonal
    KinePhaseSpace.LOGQ2_LOGY: lambda x, y, E, M: x * y * LN10 * LN10,
    # x = x, y = Q2 / (2 x M E)
    KinePhaseSpace.XQ2: lambda x, y, E, M: 1.0 / (2.0 * x * M * E),
}


def jacobian_from_xy(kps: KinePhaseSpace, x, y, E, M=NUCLEON_MASS):
    """J(XY -> kps) at the given point. Works on arrays."""
    try:
        fn = _FROM_XY[kps]
    except KeyError:
        raise ValueError(f"No phase-space transform defined for {kps!r}") from None
    return fn(x, y, E, M)


def jacobian(interaction: Interaction, from_kps: KinePhaseSpace, to_kps: KinePhaseSpace) -> float:
    """Factor converting a differential cross section from from_kps to to_kps.

    Args:
        interaction: Supplies x, y and the probe energy (struck-nucleon rest frame)
        from_kps: Parameterization the input value is expressed in
        to_kps: Requested parameterization

    Returns:
        Strictly positive factor for points inside the physical region.

    Raises:
        ValueError: If either parameterization has no transform.
    """
    if from_kps == to_kps:
        return 1.0

    E = interaction.init_state.probe_e(RefFrame.HIT_NUCLEON_REST)
    x = interaction.kinematics.x
    y = interaction.kinematics.y

    J_to = jacobian_from_xy(to_kps, x, y, E)
    J_from = jacobian_from_xy(from_kps, x, y, E)
    return float(J_to / J_from)


def uniform_axis(limits: Range1D, n: int) -> np.ndarray:
    """n equally spaced points spanning limits, end points included."""
    return np.linspace(limits.min, limits.max, n)
