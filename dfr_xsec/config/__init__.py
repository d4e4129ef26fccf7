"""Configuration Module

Default Parameters (global registry, loaded from defaults.yaml):
    from dfr_xsec.config import get_default

    Ma = get_default('global_parameters.DFR-Ma')
    nx = get_default('integration.nx')

Recommended Usage:
    from dfr_xsec.config import create_validated_parameters

    # Global defaults
    params = create_validated_parameters()

    # Model-local override of one parameter, the other from the registry
    params = create_validated_parameters({'Ma': 1.1})

Import Policy:
    DO NOT use: from dfr_xsec.config import *

Submodules:
    enums: KinePhaseSpace, ScatteringType, InteractionType, RefFrame, IntegrationMethod
    yaml_loader: Global registry access (get_default, get_defaults, reload_defaults)
    model_config: ModelParameters, IntegrationConfig
    validation: validate_config, ConfigurationError, warn_if_unsafe
"""

from dfr_xsec.config.enums import (
    IntegrationMethod,
    InteractionType,
    KinePhaseSpace,
    RefFrame,
    ScatteringType,
)
# Import YAML loader functions first (no circular dependencies)
from dfr_xsec.config.yaml_loader import get_default, get_defaults, reload_defaults
from dfr_xsec.config.model_config import IntegrationConfig, ModelParameters
from dfr_xsec.config.validation import (
    ConfigurationError,
    ConfigurationWarning,
    create_validated_integration,
    create_validated_parameters,
    validate_config,
    warn_if_unsafe,
)


__all__ = [
    # Enums
    "KinePhaseSpace",
    "ScatteringType",
    "InteractionType",
    "RefFrame",
    "IntegrationMethod",
    # Config classes
    "ModelParameters",
    "IntegrationConfig",
    # Factory functions
    "create_validated_parameters",
    "create_validated_integration",
    # Validation
    "validate_config",
    "warn_if_unsafe",
    "ConfigurationError",
    "ConfigurationWarning",
    # YAML registry access
    "get_default",
    "get_defaults",
    "reload_defaults",
]
