"""Rein-Sehgal model for neutrino diffractive pion production off nucleons.

The differential cross section in the canonical (x, y) parameterization is

    d2sigma/dxdy = G_F^2 M / (16 pi^3) * E * f_pi^2 * (1 - y)
                   * (Ma^2 / (Ma^2 + Q^2))^2 * sigma_tot(pi N; E_pi)^2
                   * int_{t_min}^{t_max} exp(-beta t) dt

with Q^2 = 2 x y M E, E_pi = y E and t_min = (m_pi^2 / 2 E_pi)^2. The t
integral is done analytically and applies to the XY parameterization only;
other parameterizations transform the base value (everything but the t
integral) with the Jacobian.

References:
- D. Rein and L. M. Sehgal, Nucl. Phys. B 223 (1983) 29.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import numpy as np

from dfr_xsec.config.enums import KinePhaseSpace, RefFrame
from dfr_xsec.config.model_config import IntegrationConfig, ModelParameters
from dfr_xsec.config.validation import (
    create_validated_integration,
    create_validated_parameters,
    validate_config,
    warn_if_unsafe,
)
from dfr_xsec.core.constants import DEFAULT_CONSTANTS, PI3, PhysicsConstants
from dfr_xsec.core.interaction import DEFAULT_OPTIONS, EvaluationOptions, Interaction
from dfr_xsec.core.kinematics import jacobian, q2_from_xy, t_min
from dfr_xsec.core.lut import PionNucleonXSecLUT, get_pion_nucleon_lut
from dfr_xsec.integration.grid_integrator import GridIntegrator

logger = logging.getLogger(__name__)


class ReinDFRPXSec:
    """Differential and total cross section of the Rein-Sehgal DFR model.

    Model parameters are fixed at construction. Concurrent evaluations on one
    instance are safe as long as each caller passes its own Interaction.

    Attributes:
        params: Ma, beta and the t cutoff
        integration: Grid settings used by integral()
        lut: Total pion-nucleon cross-section table
        constants: Physics constants
    """

    def __init__(
        self,
        params: Optional[ModelParameters] = None,
        integration: Optional[IntegrationConfig] = None,
        lut: Optional[PionNucleonXSecLUT] = None,
        constants: PhysicsConstants = DEFAULT_CONSTANTS,
    ):
        self.params = params if params is not None else create_validated_parameters()
        self.integration = integration if integration is not None else create_validated_integration()
        validate_config(self.params)
        validate_config(self.integration)

        self.lut = lut if lut is not None else get_pion_nucleon_lut()
        self.constants = constants
        self._integrator = GridIntegrator(self.integration)

    @classmethod
    def configure(
        cls,
        config: Mapping[str, Any] | None = None,
        integration: Mapping[str, Any] | None = None,
    ) -> ReinDFRPXSec:
        """Build a model from model-local overrides, falling back to the global registry.

        Args:
            config: Optional overrides, keys 'Ma', 'beta', 't_max'
            integration: Optional overrides, keys 'nx', 'ny', 'method'

        Legal but doubtful settings (a coarse grid, a cutoff that truncates
        the t integral) are reported as ConfigurationWarning.

        Raises:
            ConfigurationError: If a resolved value is invalid
        """
        params = create_validated_parameters(config)
        integration_config = create_validated_integration(integration)
        warn_if_unsafe(params, integration_config)
        logger.debug(
            f"Configured ReinDFRPXSec: Ma = {params.Ma} GeV, beta = {params.beta} GeV^-2, "
            f"grid = {integration_config.nx}x{integration_config.ny}"
        )
        return cls(params=params, integration=integration_config)

    # -------------------------------------------------------------------------
    # Validity gate
    # -------------------------------------------------------------------------

    def valid_process(self, interaction: Interaction, options: Optional[EvaluationOptions] = None) -> bool:
        options = options or DEFAULT_OPTIONS
        if options.skip_process_check:
            return True
        return interaction.process_info.is_diffractive

    def valid_kinematics(self, interaction: Interaction, options: Optional[EvaluationOptions] = None) -> bool:
        # Kinematic limits are enforced by the formula and by the integration bounds
        options = options or DEFAULT_OPTIONS
        if options.skip_kinematic_check:
            return True
        return True

    # -------------------------------------------------------------------------
    # Formula
    # -------------------------------------------------------------------------

    def t_integral(self, E_pion):
        """Integral of exp(-beta t) over [t_min(E_pion), t_max]. Works on arrays.

        Zero wherever the range is empty (including E_pion <= 0).
        """
        b = self.params.beta
        t_max = self.params.t_max

        E_pion = np.asarray(E_pion, dtype=np.float64)
        tmin = np.full(E_pion.shape, np.inf)
        positive = E_pion > 0
        tmin[positive] = t_min(E_pion[positive], self.constants.m_pion)

        open_range = tmin < t_max
        result = np.zeros(E_pion.shape)
        result[open_range] = (np.exp(-b * tmin[open_range]) - np.exp(-b * t_max)) / b
        return result

    def base_xsec(self, E, x, y):
        """Base value of the formula before any t treatment [GeV^-2]. Works on arrays.

        This is the value transformed by the Jacobian for parameterizations
        other than XY. No validity gate or nuclear scaling is applied here.
        """
        c = self.constants
        M = c.m_nucleon
        Q2 = q2_from_xy(x, y, E, M)
        Gf = c.G_F2 * M / (16.0 * PI3)
        fp2 = c.f_pion ** 2
        E_pion = y * E
        ma2 = self.params.Ma ** 2
        propg = (ma2 / (ma2 + Q2)) ** 2
        sTot2 = self.lut.total_xsec_array(E_pion) ** 2

        return Gf * E * fp2 * (1.0 - y) * propg * sTot2

    def differential_xy(self, E, x, y):
        """d2sigma/dxdy per nucleon [GeV^-2], t integrated. Works on arrays."""
        return self.base_xsec(E, x, y) * self.t_integral(y * E)

    def xsec(
        self,
        interaction: Interaction,
        kps: KinePhaseSpace = KinePhaseSpace.XY,
        options: Optional[EvaluationOptions] = None,
    ) -> float:
        """Differential cross section of the interaction in the parameterization kps.

        Only the canonical XY value carries the t integral. For any other kps
        the base value is multiplied by the Jacobian J(XY -> kps).

        Returns 0 when the validity gate rejects the interaction. The value is
        per target nucleus (number of struck-type nucleons times the nucleon
        value) unless options.assume_free_nucleon is set.
        """
        options = options or DEFAULT_OPTIONS
        if not self.valid_process(interaction, options):
            return 0.0
        if not self.valid_kinematics(interaction, options):
            return 0.0

        E = interaction.init_state.probe_e(RefFrame.HIT_NUCLEON_REST)
        x = interaction.kinematics.x
        y = interaction.kinematics.y

        if logger.isEnabledFor(logging.DEBUG):
            E_pion = y * E
            logger.debug(
                f"E = {E}, x = {x}, y = {y}, Q2 = {q2_from_xy(x, y, E, self.constants.m_nucleon)}, "
                f"Epi = {E_pion}, s^piN_tot = {self.lut.total_xsec(E_pion)}"
            )

        xsec = float(self.base_xsec(E, x, y))

        if kps == KinePhaseSpace.XY:
            xsec *= float(self.t_integral(y * E))
        else:
            J = jacobian(interaction, KinePhaseSpace.XY, kps)
            logger.debug(f"Jacobian for transformation to {kps.value}: J = {J}")
            xsec *= J

        if options.assume_free_nucleon:
            return xsec

        return xsec * interaction.target.n_scattering_centers

    def integral(self, interaction: Interaction, options: Optional[EvaluationOptions] = None) -> float:
        """Total cross section at the interaction's probe energy [GeV^-2].

        The caller's interaction is not modified.
        """
        return self._integrator.integrate(self, interaction, options)

    def __repr__(self) -> str:
        return f"ReinDFRPXSec(Ma={self.params.Ma}, beta={self.params.beta})"
