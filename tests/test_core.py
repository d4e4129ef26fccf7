"""Tests for core modules: interaction model, hadronic table, units."""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from dfr_xsec.config.enums import InteractionType, RefFrame, ScatteringType
from dfr_xsec.core.constants import (
    DEFAULT_CONSTANTS,
    PDG_NEUTRON,
    PDG_NUE,
    PDG_NUMU,
    PDG_PROTON,
)
from dfr_xsec.core.interaction import (
    InitialState,
    Interaction,
    Kinematics,
    ProcessInfo,
    Target,
)
from dfr_xsec.core.lut import PionNucleonXSecLUT, total_pion_nucleon_xsec
from dfr_xsec.core.units import CM2, MILLIBARN, XSEC_1E38_CM2, to_1e38_cm2


class TestTarget:
    """Tests for the Target dataclass."""

    def test_counts(self, carbon_proton):
        assert carbon_proton.A == 12
        assert carbon_proton.hit_nucleon_is_proton
        assert carbon_proton.n_scattering_centers == 6

    def test_neutron_scattering_centers(self, argon_neutron):
        assert not argon_neutron.hit_nucleon_is_proton
        assert argon_neutron.n_scattering_centers == 22

    def test_pdg_round_trip(self):
        """Test nuclear PDG code encoding and decoding."""
        target = Target.from_pdg(1000180400)

        assert (target.Z, target.N) == (18, 22)
        assert target.pdg == 1000180400
        assert target.hit_nucleon_pdg == PDG_PROTON

    def test_free_nucleon_pdg(self):
        proton = Target.from_pdg(PDG_PROTON)
        neutron = Target.from_pdg(PDG_NEUTRON)

        assert (proton.Z, proton.N, proton.pdg) == (1, 0, PDG_PROTON)
        assert (neutron.Z, neutron.N, neutron.pdg) == (0, 1, PDG_NEUTRON)
        assert neutron.hit_nucleon_pdg == PDG_NEUTRON

    def test_from_pdg_struck_neutron(self):
        target = Target.from_pdg(1000060120, hit_nucleon_pdg=PDG_NEUTRON)
        assert target.n_scattering_centers == 6

    def test_invalid_pdg(self):
        with pytest.raises(ValueError, match="Not a nucleus"):
            Target.from_pdg(211)

    def test_missing_struck_nucleon_kind(self):
        """Test that a struck neutron in hydrogen is rejected."""
        with pytest.raises(ValueError, match="neutron but the target has N=0"):
            Target(Z=1, N=0, hit_nucleon_pdg=PDG_NEUTRON)

    def test_invalid_struck_nucleon(self):
        with pytest.raises(ValueError, match="proton or neutron"):
            Target(Z=6, N=6, hit_nucleon_pdg=211)

    def test_negative_counts(self):
        with pytest.raises(ValueError, match="non-negative"):
            Target(Z=-1, N=6)

    def test_empty_target(self):
        with pytest.raises(ValueError, match="at least one nucleon"):
            Target(Z=0, N=0)

    def test_with_hit_nucleon(self, carbon_proton):
        neutron_struck = carbon_proton.with_hit_nucleon(PDG_NEUTRON)
        assert not neutron_struck.hit_nucleon_is_proton
        assert carbon_proton.hit_nucleon_is_proton


class TestInitialState:
    """Tests for neutrino energy lookup."""

    def test_nucleon_at_rest(self, free_proton):
        state = InitialState(probe_pdg=PDG_NUMU, probe_energy=5.0, target=free_proton)

        assert state.probe_e(RefFrame.LAB) == 5.0
        assert state.probe_e(RefFrame.HIT_NUCLEON_REST) == 5.0

    def test_moving_nucleon(self):
        """Test that a nucleon moving along the beam lowers the rest-frame energy."""
        target = Target(Z=1, N=0, hit_nucleon_p3=(0.0, 0.0, 0.2))
        state = InitialState(probe_pdg=PDG_NUMU, probe_energy=5.0, target=target)

        M = DEFAULT_CONSTANTS.m_proton
        expected = 5.0 * (math.sqrt(M * M + 0.04) - 0.2) / M

        assert state.probe_e(RefFrame.HIT_NUCLEON_REST) == pytest.approx(expected)
        assert state.probe_e(RefFrame.HIT_NUCLEON_REST) < 5.0
        assert state.probe_e(RefFrame.LAB) == 5.0

    def test_non_neutrino_beam(self, free_proton):
        with pytest.raises(ValueError, match="neutrino"):
            InitialState(probe_pdg=11, probe_energy=5.0, target=free_proton)

    def test_negative_energy(self, free_proton):
        with pytest.raises(ValueError, match="non-negative"):
            InitialState(probe_pdg=PDG_NUMU, probe_energy=-1.0, target=free_proton)


class TestInteraction:
    """Tests for the Interaction aggregate."""

    def test_dfr_constructor(self, numu_dfr):
        assert numu_dfr.process_info.is_diffractive
        assert numu_dfr.process_info.is_weak_cc
        assert numu_dfr.kinematics.x == 0.1
        assert numu_dfr.kinematics.y == 0.3

    def test_copy_is_independent(self, numu_dfr):
        scratch = numu_dfr.copy()
        scratch.kinematics.set_x(0.7)
        scratch.kinematics.set_y(0.8)

        assert (numu_dfr.kinematics.x, numu_dfr.kinematics.y) == (0.1, 0.3)
        assert scratch.init_state is numu_dfr.init_state

    def test_kinematics_setters(self):
        kine = Kinematics()
        kine.set_x(0.25)
        kine.set_y(np.float64(0.5))

        assert kine.x == 0.25
        assert type(kine.y) is float

    @pytest.mark.parametrize("pdg, itype, mass", [
        (PDG_NUMU, InteractionType.CC, DEFAULT_CONSTANTS.m_muon),
        (-PDG_NUMU, InteractionType.CC, DEFAULT_CONSTANTS.m_muon),
        (PDG_NUE, InteractionType.CC, DEFAULT_CONSTANTS.m_electron),
        (PDG_NUMU, InteractionType.NC, 0.0),
    ])
    def test_final_state_lepton_mass(self, free_proton, pdg, itype, mass):
        interaction = Interaction.dfr(pdg, 5.0, free_proton, interaction_type=itype)
        assert interaction.final_state_lepton_mass() == mass

    def test_process_info(self):
        coh = ProcessInfo(scattering_type=ScatteringType.COHERENT)
        assert not coh.is_diffractive


class TestPionNucleonXSecLUT:
    """Tests for the total pion-nucleon cross-section table."""

    def test_table_nodes(self):
        """Test that interpolation passes through the tabulated values."""
        lut = PionNucleonXSecLUT()
        for E, s in zip(lut.energy_grid, lut.xsec_mb):
            assert lut.total_xsec(E) == pytest.approx(s * MILLIBARN, rel=1e-10)

    def test_delta_peak(self):
        lut = PionNucleonXSecLUT()
        peak = lut.total_xsec(0.33)
        assert peak > lut.total_xsec(0.2)
        assert peak > lut.total_xsec(0.6)

    def test_positive_everywhere(self):
        lut = PionNucleonXSecLUT()
        energies = np.logspace(np.log10(0.14), 2.5, 500)
        assert np.all(lut.total_xsec_array(energies) > 0)

    def test_clamped_outside_table(self):
        lut = PionNucleonXSecLUT()

        assert lut.total_xsec(0.01) == lut.total_xsec(lut.energy_grid[0])
        assert lut.total_xsec(1000.0) == lut.total_xsec(lut.energy_grid[-1])

    def test_non_positive_energy(self):
        lut = PionNucleonXSecLUT()

        assert lut.total_xsec(0.0) == 0.0
        assert lut.total_xsec(-1.0) == 0.0
        assert_allclose(lut.total_xsec_array(np.array([0.0, -2.0])), 0.0)

    def test_array_matches_scalar(self):
        lut = PionNucleonXSecLUT()
        energies = np.array([0.05, 0.2, 0.33, 1.7, 15.0, 300.0])
        expected = [lut.total_xsec(E) for E in energies]

        assert_allclose(lut.total_xsec_array(energies), expected, rtol=1e-12)

    def test_module_level_lookup(self):
        assert total_pion_nucleon_xsec(1.5) == pytest.approx(36.0 * MILLIBARN)

    def test_custom_table(self):
        lut = PionNucleonXSecLUT(energy_grid=[1.0, 10.0], xsec_mb=[20.0, 40.0])

        assert len(lut) == 2
        assert lut.total_xsec(1.0) == pytest.approx(20.0 * MILLIBARN)
        assert 20.0 * MILLIBARN < lut.total_xsec(3.0) < 40.0 * MILLIBARN

    @pytest.mark.parametrize("energies, xsecs, match", [
        ([1.0, 2.0], [1.0], "same length"),
        ([1.0], [1.0], "At least two"),
        ([2.0, 1.0], [1.0, 1.0], "monotonically increasing"),
        ([0.0, 1.0], [1.0, 1.0], "strictly positive"),
        ([1.0, 2.0], [1.0, -1.0], "non-negative"),
        ([[1.0, 2.0]], [[1.0, 2.0]], "must be 1D"),
    ])
    def test_invalid_table(self, energies, xsecs, match):
        with pytest.raises(ValueError, match=match):
            PionNucleonXSecLUT(energy_grid=energies, xsec_mb=xsecs)

    def test_repr(self):
        assert "num_points=26" in repr(PionNucleonXSecLUT())


class TestUnits:
    """Tests for natural unit conversions."""

    def test_millibarn(self):
        # 1 mb = 2.568 GeV^-2
        assert MILLIBARN == pytest.approx(2.56819, rel=1e-5)

    def test_cm2(self):
        assert CM2 == pytest.approx(2.56819e27, rel=1e-5)

    def test_to_1e38_cm2(self):
        assert to_1e38_cm2(XSEC_1E38_CM2) == pytest.approx(1.0)
