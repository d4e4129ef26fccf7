"""Natural unit system (hbar = c = 1, energies in GeV).

Cross sections computed by the models are in GeV^-2. Divide by one of the
area units below to express them in a conventional unit:

    >>> from dfr_xsec.core.units import XSEC_1E38_CM2
    >>> xsec / XSEC_1E38_CM2   # in 1E-38 cm^2
"""

# hbar * c [GeV fm]
HBAR_C_GEV_FM = 0.1973269804

GEV = 1.0
MEV = 1.0e-3 * GEV

# Lengths [GeV^-1]
FERMI = 1.0 / HBAR_C_GEV_FM
CM = 1.0e13 * FERMI

# Areas [GeV^-2]
FM2 = FERMI * FERMI
CM2 = CM * CM
MILLIBARN = 1.0e-27 * CM2

# Reference unit of the integrated cross sections
XSEC_1E38_CM2 = 1.0e-38 * CM2


def to_1e38_cm2(xsec: float) -> float:
    """Convert a cross section from GeV^-2 to units of 1E-38 cm^2."""
    return xsec / XSEC_1E38_CM2
