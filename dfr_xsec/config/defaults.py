"""
Default Configuration Constants for dfr_xsec

This module contains the numeric fallbacks used when a key is missing from
defaults.yaml. The YAML file is the global parameter registry; the values
here only apply when it does not define a key.

IMPORTANT Import Policies:
    1. DO NOT use: from dfr_xsec.config.defaults import *
       This causes namespace pollution and makes tracking difficult.

    2. DO use explicit imports:
       from dfr_xsec.config.defaults import DEFAULT_MA, DEFAULT_BETA

    3. DO NOT define defaults elsewhere. All defaults must be in this file.
"""

# =============================================================================
# Model Parameter Defaults
# =============================================================================

# Effective axial mass scale in the propagator (GeV)
DEFAULT_MA = 1.0

# Slope of the exp(-beta*t) diffractive peak (GeV^-2)
DEFAULT_BETA = 7.0

# =============================================================================
# t Integration Defaults
# =============================================================================

# Upper cutoff of the |t| integration (GeV^2)
# The exponential has died off long before this for any physical beta.
DEFAULT_T_MAX = 99.0

# =============================================================================
# Integration Grid Defaults
# =============================================================================

# Number of grid points along x and y
# Both axes include their end points, so spacing is (max - min) / (n - 1)
DEFAULT_NX = 300
DEFAULT_NY = 300

# Minimum number of points per axis (spacing is undefined below this)
MIN_GRID_POINTS = 2

# =============================================================================
# Global Registry Keys
# =============================================================================

# Dotted paths into defaults.yaml
KEY_GLOBAL_MA = "global_parameters.DFR-Ma"
KEY_GLOBAL_BETA = "global_parameters.DFR-Beta"
KEY_T_MAX = "integration.t_max"
KEY_NX = "integration.nx"
KEY_NY = "integration.ny"

# Model-local override keys
LOCAL_KEY_MA = "Ma"
LOCAL_KEY_BETA = "beta"
