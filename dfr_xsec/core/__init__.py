"""Core data structures: units, constants, interaction model, lookup tables and kinematics."""

from dfr_xsec.core.constants import DEFAULT_CONSTANTS, PhysicsConstants
from dfr_xsec.core.interaction import (
    DEFAULT_OPTIONS,
    EvaluationOptions,
    InitialState,
    Interaction,
    Kinematics,
    ProcessInfo,
    Target,
)
from dfr_xsec.core.kinematics import Range1D, jacobian, x_limits, y_limits
from dfr_xsec.core.lut import PionNucleonXSecLUT, total_pion_nucleon_xsec

__all__ = [
    "PhysicsConstants",
    "DEFAULT_CONSTANTS",
    "Target",
    "InitialState",
    "Kinematics",
    "ProcessInfo",
    "Interaction",
    "EvaluationOptions",
    "DEFAULT_OPTIONS",
    "Range1D",
    "jacobian",
    "x_limits",
    "y_limits",
    "PionNucleonXSecLUT",
    "total_pion_nucleon_xsec",
]
