"""Model Configuration - parameters of the Rein-Sehgal DFR model

Tunable parameters are resolved in two tiers:
    1. A model-local override dictionary (keys 'Ma', 'beta')
    2. The global parameter registry (defaults.yaml, keys 'DFR-Ma', 'DFR-Beta')

Resolution happens once, when a model is configured. The resulting objects
are frozen.

Import Policy:
    from dfr_xsec.config.model_config import ModelParameters, IntegrationConfig

DO NOT use: from dfr_xsec.config.model_config import *
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from dfr_xsec.config.defaults import (
    DEFAULT_BETA,
    DEFAULT_MA,
    DEFAULT_NX,
    DEFAULT_NY,
    DEFAULT_T_MAX,
    KEY_GLOBAL_BETA,
    KEY_GLOBAL_MA,
    KEY_NX,
    KEY_NY,
    KEY_T_MAX,
    LOCAL_KEY_BETA,
    LOCAL_KEY_MA,
    MIN_GRID_POINTS,
)
from dfr_xsec.config.enums import IntegrationMethod
from dfr_xsec.config.yaml_loader import get_default


@dataclass(frozen=True)
class ModelParameters:
    """Physical parameters of the DFR cross section.

    Attributes:
        Ma: Effective axial mass in the propagator (Ma^2/(Ma^2+Q^2))^2 [GeV]
        beta: Slope of the exp(-beta*t) diffractive peak [GeV^-2]
        t_max: Upper cutoff of the |t| integration [GeV^2]
    """

    Ma: float = DEFAULT_MA
    beta: float = DEFAULT_BETA
    t_max: float = DEFAULT_T_MAX

    def validate(self) -> list[str]:
        """Return a list of error messages (empty if valid)."""
        errors = []
        if self.Ma <= 0:
            errors.append(f"Ma must be > 0, got {self.Ma}")
        if self.beta <= 0:
            errors.append(f"beta must be > 0, got {self.beta}")
        if self.t_max <= 0:
            errors.append(f"t_max must be > 0, got {self.t_max}")
        return errors

    @classmethod
    def resolve(cls, local: Mapping[str, Any] | None = None) -> ModelParameters:
        """Resolve parameters: model-local override, else global registry."""
        local = local or {}
        Ma = local.get(LOCAL_KEY_MA, get_default(KEY_GLOBAL_MA, DEFAULT_MA))
        beta = local.get(LOCAL_KEY_BETA, get_default(KEY_GLOBAL_BETA, DEFAULT_BETA))
        t_max = local.get("t_max", get_default(KEY_T_MAX, DEFAULT_T_MAX))
        return cls(Ma=float(Ma), beta=float(beta), t_max=float(t_max))


@dataclass(frozen=True)
class IntegrationConfig:
    """Settings of the (x, y) grid integration.

    Attributes:
        nx, ny: Number of grid points along x and y (end points included)
        method: How the grid sum is evaluated
    """

    nx: int = DEFAULT_NX
    ny: int = DEFAULT_NY
    method: IntegrationMethod = field(default=IntegrationMethod.VECTORIZED)

    def validate(self) -> list[str]:
        errors = []
        if self.nx < MIN_GRID_POINTS:
            errors.append(f"nx must be >= {MIN_GRID_POINTS}, got {self.nx}")
        if self.ny < MIN_GRID_POINTS:
            errors.append(f"ny must be >= {MIN_GRID_POINTS}, got {self.ny}")
        if not isinstance(self.method, IntegrationMethod):
            errors.append(f"method must be an IntegrationMethod, got {self.method!r}")
        return errors

    @classmethod
    def resolve(cls, local: Mapping[str, Any] | None = None) -> IntegrationConfig:
        local = local or {}
        nx = local.get("nx", get_default(KEY_NX, DEFAULT_NX))
        ny = local.get("ny", get_default(KEY_NY, DEFAULT_NY))
        method = local.get("method", IntegrationMethod.VECTORIZED)
        if isinstance(method, str):
            method = IntegrationMethod(method)
        return cls(nx=int(nx), ny=int(ny), method=method)
