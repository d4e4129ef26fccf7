"""Rein-Sehgal Diffractive Pion Production Cross Sections

Differential and total cross sections for neutrino-induced diffractive pion
production off nucleons and nuclei, in natural units (GeV).

Key Principles:
- One closed-form differential formula in the canonical (x, y) parameterization
- Analytic t integration, explicit Jacobian table for other parameterizations
- Total cross section by fixed-grid quadrature over (x, y)
- Physics-domain failures return 0; configuration errors raise

Version: 1.0
"""

__version__ = "1.0"

from dfr_xsec.config.enums import (
    IntegrationMethod,
    InteractionType,
    KinePhaseSpace,
    RefFrame,
    ScatteringType,
)
from dfr_xsec.config.model_config import IntegrationConfig, ModelParameters
from dfr_xsec.config.validation import ConfigurationError
from dfr_xsec.core.interaction import (
    EvaluationOptions,
    InitialState,
    Interaction,
    Kinematics,
    ProcessInfo,
    Target,
)
from dfr_xsec.core.kinematics import jacobian
from dfr_xsec.core.lut import PionNucleonXSecLUT, total_pion_nucleon_xsec
from dfr_xsec.core.units import XSEC_1E38_CM2, to_1e38_cm2
from dfr_xsec.integration import GridIntegrator
from dfr_xsec.models import ReinDFRPXSec

__all__ = [
    "__version__",
    # Enums
    "KinePhaseSpace",
    "ScatteringType",
    "InteractionType",
    "RefFrame",
    "IntegrationMethod",
    # Configuration
    "ModelParameters",
    "IntegrationConfig",
    "ConfigurationError",
    # Interaction model
    "Target",
    "InitialState",
    "Kinematics",
    "ProcessInfo",
    "Interaction",
    "EvaluationOptions",
    # Physics
    "jacobian",
    "PionNucleonXSecLUT",
    "total_pion_nucleon_xsec",
    "ReinDFRPXSec",
    "GridIntegrator",
    # Units
    "XSEC_1E38_CM2",
    "to_1e38_cm2",
]
