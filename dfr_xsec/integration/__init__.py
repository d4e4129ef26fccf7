"""Numerical integration of differential cross sections."""

from dfr_xsec.integration.grid_integrator import GridIntegrator

__all__ = ["GridIntegrator"]
