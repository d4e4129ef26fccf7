"""Pytest configuration and shared fixtures for dfr_xsec tests."""

import pytest

from dfr_xsec.config.enums import IntegrationMethod, InteractionType
from dfr_xsec.config.model_config import IntegrationConfig, ModelParameters
from dfr_xsec.config.yaml_loader import reload_defaults
from dfr_xsec.core.constants import PDG_NEUTRON, PDG_NUMU, PDG_PROTON
from dfr_xsec.core.interaction import EvaluationOptions, Interaction, Target
from dfr_xsec.models.rein_dfr import ReinDFRPXSec


# Fixtures for targets


@pytest.fixture
def free_proton():
    """Free proton target."""
    return Target(Z=1, N=0, hit_nucleon_pdg=PDG_PROTON)


@pytest.fixture
def carbon_proton():
    """Carbon-12 with a struck proton."""
    return Target(Z=6, N=6, hit_nucleon_pdg=PDG_PROTON)


@pytest.fixture
def argon_neutron():
    """Argon-40 with a struck neutron."""
    return Target(Z=18, N=22, hit_nucleon_pdg=PDG_NEUTRON)


# Fixtures for interactions


@pytest.fixture
def numu_dfr(free_proton):
    """nu_mu CC diffractive interaction on a free proton at the reference point."""
    return Interaction.dfr(PDG_NUMU, 5.0, free_proton, x=0.1, y=0.3)


@pytest.fixture
def numu_dfr_carbon(carbon_proton):
    return Interaction.dfr(PDG_NUMU, 5.0, carbon_proton, x=0.1, y=0.3)


@pytest.fixture
def numu_dfr_nc(free_proton):
    return Interaction.dfr(PDG_NUMU, 5.0, free_proton, interaction_type=InteractionType.NC, x=0.1, y=0.3)


# Fixtures for models


@pytest.fixture
def default_params():
    """Default model parameters (Ma = 1 GeV, beta = 7 GeV^-2)."""
    return ModelParameters(Ma=1.0, beta=7.0, t_max=99.0)


@pytest.fixture
def model(default_params):
    """Model with the full 300x300 integration grid."""
    return ReinDFRPXSec(params=default_params, integration=IntegrationConfig(nx=300, ny=300))


@pytest.fixture
def coarse_model(default_params):
    """Model with a coarse grid for fast tests."""
    return ReinDFRPXSec(params=default_params, integration=IntegrationConfig(nx=40, ny=40))


@pytest.fixture
def pointwise_model(default_params):
    """Coarse grid, evaluated point by point."""
    return ReinDFRPXSec(
        params=default_params,
        integration=IntegrationConfig(nx=40, ny=40, method=IntegrationMethod.POINTWISE),
    )


# Fixtures for evaluation options


@pytest.fixture
def free_nucleon():
    return EvaluationOptions(assume_free_nucleon=True)


# Registry isolation


@pytest.fixture
def registry_file(tmp_path, monkeypatch):
    """Point the global parameter registry at a temporary YAML file.

    The test writes the file; the packaged registry is restored afterwards.
    """
    path = tmp_path / "defaults.yaml"
    monkeypatch.setenv("DFR_XSEC_DEFAULTS_PATH", str(path))
    yield path
    monkeypatch.undo()
    reload_defaults()


# Utility fixtures for testing


@pytest.fixture
def rtol():
    """Default relative tolerance."""
    return 1e-10
