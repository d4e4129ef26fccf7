"""Physics constants for the DFR cross-section model.

This module is the Single Source of Truth (SSOT) for all physics constants
used in the package. Import from here rather than defining constants locally.

Import Policy:
    from dfr_xsec.core.constants import DEFAULT_CONSTANTS, PDG_PROTON

DO NOT use: from dfr_xsec.core.constants import *
"""

import math
from dataclasses import dataclass

# =============================================================================
# PDG Codes
# =============================================================================

PDG_PROTON = 2212
PDG_NEUTRON = 2112

PDG_NUE = 12
PDG_NUMU = 14
PDG_NUTAU = 16
PDG_ANTI_NUE = -12
PDG_ANTI_NUMU = -14
PDG_ANTI_NUTAU = -16

NEUTRINO_PDG_CODES = (
    PDG_NUE, PDG_NUMU, PDG_NUTAU,
    PDG_ANTI_NUE, PDG_ANTI_NUMU, PDG_ANTI_NUTAU,
)

# =============================================================================
# Numerical Constants
# =============================================================================

# Distance kept from the edges of the (x, y) integration region
A_SMALL_NUM = 1.0e-6

# =============================================================================
# Physics Constants
# =============================================================================


@dataclass(frozen=True)
class PhysicsConstants:
    """Particle properties and couplings in natural units (GeV)."""

    G_F: float = 1.1663787e-5
    """Fermi coupling constant [GeV^-2]"""

    m_proton: float = 0.9382720813
    """Proton mass [GeV]"""

    m_neutron: float = 0.9395654133
    """Neutron mass [GeV]"""

    m_pion: float = 0.13957018
    """Charged pion mass [GeV]"""

    m_electron: float = 0.000510998950
    """Electron mass [GeV]"""

    m_muon: float = 0.1056583745
    """Muon mass [GeV]"""

    m_tau: float = 1.77686
    """Tau mass [GeV]"""

    F_PI_OVER_M_PI: float = 0.93
    """Pion decay constant in units of the pion mass"""

    @property
    def m_nucleon(self) -> float:
        """Isospin-averaged nucleon mass [GeV]"""
        return 0.5 * (self.m_proton + self.m_neutron)

    @property
    def G_F2(self) -> float:
        """Fermi coupling constant squared [GeV^-4]"""
        return self.G_F * self.G_F

    @property
    def f_pion(self) -> float:
        """Pion decay constant [GeV]"""
        return self.F_PI_OVER_M_PI * self.m_pion

    def charged_lepton_mass(self, probe_pdg: int) -> float:
        """Mass of the charged lepton sharing the probe neutrino's flavor.

        Raises:
            ValueError: If probe_pdg is not a neutrino
        """
        flavor = abs(probe_pdg)
        if flavor == PDG_NUE:
            return self.m_electron
        if flavor == PDG_NUMU:
            return self.m_muon
        if flavor == PDG_NUTAU:
            return self.m_tau
        raise ValueError(f"Not a neutrino PDG code: {probe_pdg}")


DEFAULT_CONSTANTS = PhysicsConstants()

PI3 = math.pi ** 3
LN10 = math.log(10.0)

# Re-exports used by the kinematics and model code
NUCLEON_MASS = DEFAULT_CONSTANTS.m_nucleon
PION_MASS = DEFAULT_CONSTANTS.m_pion
MUON_MASS = DEFAULT_CONSTANTS.m_muon
