"""
Enumerations for dfr_xsec

Type-safe labels for kinematic parameterizations, process types, reference
frames and integration strategies.

Import Policy:
    from dfr_xsec.config.enums import KinePhaseSpace, ScatteringType

DO NOT use: from dfr_xsec.config.enums import *
"""

from enum import Enum


class KinePhaseSpace(Enum):
    """Kinematic parameterization a differential cross section is expressed in.

    Options:
        XY: d2sigma/dxdy, t integrated (canonical, the formula's native form)
        LOGX_LOGY: d2sigma/dlog10(x)dlog10(y)
        Q2Y: d2sigma/dQ2dy
        LOGQ2_LOGY: d2sigma/dlog10(Q2)dlog10(y)
        XQ2: d2sigma/dxdQ2

    Note:
        Only XY carries the analytic t integral. The other members are the
        base value of the formula (without the t factor) multiplied by the
        Jacobian from (x, y). A d3sigma/dxdydt parameterization is not
        provided.
    """
    XY = "xy"
    LOGX_LOGY = "logx_logy"
    Q2Y = "q2_y"
    LOGQ2_LOGY = "logq2_logy"
    XQ2 = "x_q2"


class ScatteringType(Enum):
    """Reaction channel of an interaction.

    Only DIFFRACTIVE is accepted by the Rein-Sehgal DFR model.
    """
    QUASI_ELASTIC = "qel"
    RESONANT = "res"
    DEEP_INELASTIC = "dis"
    COHERENT = "coh"
    DIFFRACTIVE = "dfr"


class InteractionType(Enum):
    """Weak current of an interaction.

    Options:
        CC: Charged current, a charged lepton of the probe's flavor is produced
        NC: Neutral current, the outgoing lepton is a neutrino
    """
    CC = "cc"
    NC = "nc"


class RefFrame(Enum):
    """Frame in which the probe energy is quoted.

    Options:
        LAB: Laboratory frame (target nucleus at rest)
        HIT_NUCLEON_REST: Rest frame of the struck nucleon

    Note:
        The two coincide unless the struck nucleon carries a momentum.
    """
    LAB = "lab"
    HIT_NUCLEON_REST = "hit_nucleon_rest"


class IntegrationMethod(Enum):
    """How the (x, y) grid sum is evaluated.

    Options:
        VECTORIZED: One broadcast formula call over the whole grid (default)
        POINTWISE: Loop over grid points, evaluating each on a scratch interaction

    Both methods sum the same terms; results differ only in floating-point
    summation order.
    """
    VECTORIZED = "vectorized"
    POINTWISE = "pointwise"
