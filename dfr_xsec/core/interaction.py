"""Interaction data model.

An Interaction bundles everything a cross-section model needs to evaluate one
candidate scattering: the initial state (neutrino and target), the kinematic
variables, and the process type. Initial state and process info are frozen;
only the kinematic variables are mutable, so an Interaction can be reused as
scratch space for a fixed probe energy.

Request-level switches (skip checks, free-nucleon cross section) live in
EvaluationOptions and are passed alongside the Interaction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Tuple

from dfr_xsec.config.enums import InteractionType, RefFrame, ScatteringType
from dfr_xsec.core.constants import (
    DEFAULT_CONSTANTS,
    NEUTRINO_PDG_CODES,
    PDG_NEUTRON,
    PDG_PROTON,
)


@dataclass(frozen=True)
class Target:
    """Target nucleus with an identified struck nucleon.

    Attributes:
        Z: Proton count
        N: Neutron count
        hit_nucleon_pdg: PDG code of the struck nucleon (2212 or 2112)
        hit_nucleon_p3: Struck nucleon 3-momentum in the lab [GeV], the probe
            travels along +z

    Derived Attributes:
        A: Mass number
        pdg: Nuclear PDG code 10LZZZAAAI
    """

    Z: int
    N: int
    hit_nucleon_pdg: int = PDG_PROTON
    hit_nucleon_p3: Tuple[float, float, float] = (0.0, 0.0, 0.0)

    def __post_init__(self):
        if self.Z < 0 or self.N < 0:
            raise ValueError(f"Nucleon counts must be non-negative: Z={self.Z}, N={self.N}")
        if self.A == 0:
            raise ValueError("Target must contain at least one nucleon")
        if self.hit_nucleon_pdg not in (PDG_PROTON, PDG_NEUTRON):
            raise ValueError(f"Struck nucleon must be a proton or neutron, got PDG {self.hit_nucleon_pdg}")
        if self.hit_nucleon_pdg == PDG_PROTON and self.Z == 0:
            raise ValueError("Struck nucleon is a proton but the target has Z=0")
        if self.hit_nucleon_pdg == PDG_NEUTRON and self.N == 0:
            raise ValueError("Struck nucleon is a neutron but the target has N=0")
        if len(self.hit_nucleon_p3) != 3:
            raise ValueError(f"hit_nucleon_p3 must have 3 components, got {self.hit_nucleon_p3}")

    @property
    def A(self) -> int:
        return self.Z + self.N

    @property
    def pdg(self) -> int:
        if self.A == 1:
            return PDG_PROTON if self.Z == 1 else PDG_NEUTRON
        return 1000000000 + self.Z * 10000 + self.A * 10

    @property
    def hit_nucleon_is_proton(self) -> bool:
        return self.hit_nucleon_pdg == PDG_PROTON

    @property
    def hit_nucleon_mass(self) -> float:
        if self.hit_nucleon_is_proton:
            return DEFAULT_CONSTANTS.m_proton
        return DEFAULT_CONSTANTS.m_neutron

    @property
    def n_scattering_centers(self) -> int:
        """Number of nucleons of the struck kind."""
        return self.Z if self.hit_nucleon_is_proton else self.N

    def with_hit_nucleon(self, pdg: int) -> Target:
        return replace(self, hit_nucleon_pdg=pdg)

    @classmethod
    def from_pdg(cls, code: int, hit_nucleon_pdg: int | None = None) -> Target:
        """Build a target from a nuclear (10LZZZAAAI) or nucleon PDG code.

        If hit_nucleon_pdg is not given, a proton is struck when the nucleus
        has any, else a neutron.
        """
        if code == PDG_PROTON:
            Z, A = 1, 1
        elif code == PDG_NEUTRON:
            Z, A = 0, 1
        elif code > 1000000000:
            Z = (code // 10000) % 1000
            A = (code // 10) % 1000
        else:
            raise ValueError(f"Not a nucleus or nucleon PDG code: {code}")

        if A < Z:
            raise ValueError(f"Invalid PDG code {code}: A={A} < Z={Z}")

        if hit_nucleon_pdg is None:
            hit_nucleon_pdg = PDG_PROTON if Z > 0 else PDG_NEUTRON
        return cls(Z=Z, N=A - Z, hit_nucleon_pdg=hit_nucleon_pdg)


@dataclass(frozen=True)
class InitialState:
    """Incoming neutrino and target.

    Attributes:
        probe_pdg: Neutrino PDG code
        probe_energy: Neutrino energy in the lab [GeV]
        target: Target nucleus
    """

    probe_pdg: int
    probe_energy: float
    target: Target

    def __post_init__(self):
        if self.probe_pdg not in NEUTRINO_PDG_CODES:
            raise ValueError(f"Probe must be a neutrino, got PDG {self.probe_pdg}")
        if self.probe_energy < 0:
            raise ValueError(f"Probe energy must be non-negative: {self.probe_energy}")

    def probe_e(self, frame: RefFrame = RefFrame.HIT_NUCLEON_REST) -> float:
        """Probe energy in the requested frame [GeV]."""
        if frame == RefFrame.LAB:
            return self.probe_energy

        px, py, pz = self.target.hit_nucleon_p3
        if px == 0.0 and py == 0.0 and pz == 0.0:
            return self.probe_energy

        # p_nu . p_N / M for a massless neutrino along +z
        M = self.target.hit_nucleon_mass
        E_N = math.sqrt(M * M + px * px + py * py + pz * pz)
        return self.probe_energy * (E_N - pz) / M


@dataclass
class Kinematics:
    """Mutable kinematic variables of an interaction.

    Attributes:
        x: Bjorken x
        y: Inelasticity y
    """

    x: float = 0.0
    y: float = 0.0

    def set_x(self, x: float) -> None:
        self.x = float(x)

    def set_y(self, y: float) -> None:
        self.y = float(y)


@dataclass(frozen=True)
class ProcessInfo:
    scattering_type: ScatteringType
    interaction_type: InteractionType = InteractionType.CC

    @property
    def is_diffractive(self) -> bool:
        return self.scattering_type == ScatteringType.DIFFRACTIVE

    @property
    def is_weak_cc(self) -> bool:
        return self.interaction_type == InteractionType.CC


@dataclass(frozen=True)
class EvaluationOptions:
    """Per-request switches for cross-section evaluation.

    Attributes:
        skip_process_check: Accept the interaction regardless of its process type
        skip_kinematic_check: Accept the interaction regardless of its kinematics
        assume_free_nucleon: Return the per-nucleon cross section even for a
            nuclear target
    """

    skip_process_check: bool = False
    skip_kinematic_check: bool = False
    assume_free_nucleon: bool = False


DEFAULT_OPTIONS = EvaluationOptions()


@dataclass
class Interaction:
    """One candidate scattering event.

    The initial state and process info are frozen; kinematics is mutable.
    Use copy() to get an independent instance before mutating kinematics in
    code that may run concurrently with other users of the same object.
    """

    init_state: InitialState
    process_info: ProcessInfo
    kinematics: Kinematics = field(default_factory=Kinematics)

    @property
    def target(self) -> Target:
        return self.init_state.target

    def copy(self) -> Interaction:
        return Interaction(
            init_state=self.init_state,
            process_info=self.process_info,
            kinematics=Kinematics(x=self.kinematics.x, y=self.kinematics.y),
        )

    def final_state_lepton_mass(self) -> float:
        """Outgoing lepton mass: the probe's charged partner for CC, 0 for NC."""
        if self.process_info.is_weak_cc:
            return DEFAULT_CONSTANTS.charged_lepton_mass(self.init_state.probe_pdg)
        return 0.0

    @classmethod
    def dfr(
        cls,
        probe_pdg: int,
        energy: float,
        target: Target,
        interaction_type: InteractionType = InteractionType.CC,
        x: float = 0.0,
        y: float = 0.0,
    ) -> Interaction:
        """Convenience constructor for a diffractive interaction."""
        return cls(
            init_state=InitialState(probe_pdg=probe_pdg, probe_energy=energy, target=target),
            process_info=ProcessInfo(
                scattering_type=ScatteringType.DIFFRACTIVE,
                interaction_type=interaction_type,
            ),
            kinematics=Kinematics(x=x, y=y),
        )
