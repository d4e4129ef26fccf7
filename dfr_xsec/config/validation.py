"""
Configuration Validation Utilities

Eager validation of model and integration settings. Physics-domain problems
(an interaction outside the kinematic region) are not errors and never pass
through here; only malformed configuration is rejected.

Import Policy:
    from dfr_xsec.config.validation import validate_config, ConfigurationError

DO NOT use: from dfr_xsec.config.validation import *
"""

from __future__ import annotations

import warnings
from typing import Any, List, Mapping, Tuple, Union

from dfr_xsec.config.model_config import IntegrationConfig, ModelParameters


class ConfigurationError(Exception):
    """Raised when configuration validation fails."""

    pass


class ConfigurationWarning(Warning):
    """Warning for configuration choices that are valid but suspicious."""

    pass


def validate_config(
    config: Union[ModelParameters, IntegrationConfig],
    raise_on_error: bool = True,
) -> Tuple[bool, List[str]]:
    """Validate a configuration object.

    Args:
        config: ModelParameters or IntegrationConfig to validate
        raise_on_error: If True, raise ConfigurationError on validation failure

    Returns:
        Tuple of (is_valid, error_messages)

    Raises:
        ConfigurationError: If validation fails and raise_on_error=True
    """
    errors = config.validate()

    if errors:
        if raise_on_error:
            raise ConfigurationError(
                f"Configuration validation failed with {len(errors)} error(s):\n"
                + "\n".join(f"  - {err}" for err in errors)
            )
        return False, errors

    return True, []


def warn_if_unsafe(params: ModelParameters, integration: IntegrationConfig) -> List[str]:
    """Flag settings that are legal but likely to give poor results.

    Warnings are issued via Python's warnings module.

    Returns:
        List of warning messages (empty if no warnings)
    """
    warnings_list = []

    # exp(-beta*t_max) should be negligible, otherwise the cutoff bites
    if params.beta * params.t_max < 20.0:
        warnings_list.append(
            f"beta * t_max = {params.beta * params.t_max:.2f} is small; "
            "the t integral is noticeably truncated by the cutoff."
        )

    if integration.nx < 50 or integration.ny < 50:
        warnings_list.append(
            f"Integration grid {integration.nx}x{integration.ny} is coarse; "
            "expect percent-level discretization error."
        )

    for msg in warnings_list:
        warnings.warn(msg, ConfigurationWarning, stacklevel=2)

    return warnings_list


def create_validated_parameters(local: Mapping[str, Any] | None = None) -> ModelParameters:
    """Resolve model parameters and validate them in one step.

    Raises:
        ConfigurationError: If the resolved parameters are invalid
    """
    params = ModelParameters.resolve(local)
    validate_config(params)
    return params


def create_validated_integration(local: Mapping[str, Any] | None = None) -> IntegrationConfig:
    """Resolve integration settings and validate them in one step.

    Raises:
        ConfigurationError: If the resolved settings are invalid
    """
    integration = IntegrationConfig.resolve(local)
    validate_config(integration)
    return integration
