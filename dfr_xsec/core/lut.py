"""Lookup tables for hadronic input quantities.

This module provides the total pion-nucleon cross section used as the
amplitude factor of the diffractive model. Values are tabulated against the
pion total energy and interpolated in log10(E).
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from scipy.interpolate import PchipInterpolator

from dfr_xsec.core.units import MILLIBARN


class PionNucleonXSecLUT:
    """Lookup table for the total pion-nucleon cross section.

    Stores the isospin-averaged total cross section 0.5*(sigma(pi+ p) + sigma(pi- p))
    against pion total energy. The default table is a coarse digitization of
    the PDG compilation, resolving the Delta(1232) peak and the flat region
    above a few GeV.

    Interpolation is shape-preserving (PCHIP) in log10(E), so the result never
    overshoots the tabulated values and stays positive. Outside the table the
    edge values are returned.

    Attributes:
        energy_grid: Pion total energy [GeV] (strictly increasing)
        xsec_mb: Total cross section [mb] at each energy point
    """

    _DEFAULT_ENERGY_GRID = np.array([
        0.15, 0.18, 0.21, 0.24, 0.27, 0.30, 0.33, 0.36, 0.40, 0.45,
        0.50, 0.60, 0.70, 0.75, 0.85, 1.00, 1.20, 1.50, 2.00, 3.00,
        5.00, 7.00, 10.0, 20.0, 50.0, 100.0,
    ], dtype=np.float64)

    _DEFAULT_XSEC_MB = np.array([
        8.0, 14.0, 28.0, 48.0, 85.0, 125.0, 135.0, 115.0, 75.0, 45.0,
        34.0, 27.0, 31.0, 35.0, 34.0, 40.0, 36.0, 36.0, 33.0, 30.0,
        28.0, 27.0, 26.0, 25.0, 24.2, 24.3,
    ], dtype=np.float64)

    def __init__(
        self,
        energy_grid: Optional[np.ndarray] = None,
        xsec_mb: Optional[np.ndarray] = None,
    ):
        """Initialize the lookup table.

        Args:
            energy_grid: Pion total energies [GeV]. If None, the default table is used.
            xsec_mb: Total cross sections [mb]. If None, the default table is used.

        Raises:
            ValueError: If the arrays have mismatched shapes, fewer than two
                points, non-positive energies, negative cross sections, or a
                grid that is not strictly increasing.
        """
        if energy_grid is None or xsec_mb is None:
            self.energy_grid = self._DEFAULT_ENERGY_GRID.copy()
            self.xsec_mb = self._DEFAULT_XSEC_MB.copy()
        else:
            energy_grid = np.asarray(energy_grid, dtype=np.float64)
            xsec_mb = np.asarray(xsec_mb, dtype=np.float64)

            if energy_grid.ndim != 1 or xsec_mb.ndim != 1:
                raise ValueError(
                    f"energy_grid and xsec_mb must be 1D, got shapes "
                    f"{energy_grid.shape} and {xsec_mb.shape}"
                )
            if len(energy_grid) != len(xsec_mb):
                raise ValueError(
                    f"energy_grid and xsec_mb must have same length: "
                    f"{len(energy_grid)} != {len(xsec_mb)}"
                )
            if len(energy_grid) < 2:
                raise ValueError("At least two table points are required for interpolation")
            if np.any(energy_grid <= 0):
                raise ValueError("energy_grid must be strictly positive")
            if np.any(xsec_mb < 0):
                raise ValueError("xsec_mb must be non-negative")
            if not np.all(np.diff(energy_grid) > 0):
                raise ValueError("energy_grid must be strictly monotonically increasing")

            self.energy_grid = energy_grid
            self.xsec_mb = xsec_mb

        self._log_e = np.log10(self.energy_grid)
        self._spline = PchipInterpolator(self._log_e, self.xsec_mb, extrapolate=False)

    def total_xsec(self, energy: float) -> float:
        """Total pion-nucleon cross section [GeV^-2] at pion energy [GeV].

        Returns 0 for a non-positive energy; clamps to the table edges otherwise.

        Examples:
            >>> lut = PionNucleonXSecLUT()
            >>> lut.total_xsec(0.33) / MILLIBARN   # Delta peak, ~135 mb
        """
        if energy <= 0:
            return 0.0
        log_e = min(max(np.log10(energy), self._log_e[0]), self._log_e[-1])
        return float(self._spline(log_e)) * MILLIBARN

    def total_xsec_array(self, energies: np.ndarray) -> np.ndarray:
        """Vectorized total_xsec for an array of pion energies [GeV]."""
        energies = np.asarray(energies, dtype=np.float64)
        positive = energies > 0
        log_e = np.log10(np.where(positive, energies, self.energy_grid[0]))
        log_e = np.clip(log_e, self._log_e[0], self._log_e[-1])
        return np.where(positive, self._spline(log_e), 0.0) * MILLIBARN

    def __len__(self) -> int:
        return len(self.energy_grid)

    def __repr__(self) -> str:
        return (
            f"PionNucleonXSecLUT(energy_range=[{self.energy_grid[0]:.3f}, "
            f"{self.energy_grid[-1]:.1f}] GeV, num_points={len(self.energy_grid)})"
        )


_DEFAULT_LUT: PionNucleonXSecLUT | None = None


def get_pion_nucleon_lut() -> PionNucleonXSecLUT:
    """Shared default table (built on first use)."""
    global _DEFAULT_LUT
    if _DEFAULT_LUT is None:
        _DEFAULT_LUT = PionNucleonXSecLUT()
    return _DEFAULT_LUT


def total_pion_nucleon_xsec(energy: float) -> float:
    """Total pion-nucleon cross section [GeV^-2] from the default table."""
    return get_pion_nucleon_lut().total_xsec(energy)
