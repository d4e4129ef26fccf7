"""Global parameter registry backed by defaults.yaml.

The registry is read once and cached. It has no dependencies on other
config modules to avoid circular imports.

Usage:
    from dfr_xsec.config.yaml_loader import get_default
    Ma = get_default('global_parameters.DFR-Ma')
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

ENV_DEFAULTS_PATH = "DFR_XSEC_DEFAULTS_PATH"


def _get_yaml_path() -> Path:
    """Locate the registry file.

    Search order:
    1. Environment variable DFR_XSEC_DEFAULTS_PATH
    2. defaults.yaml next to this module

    Raises:
        FileNotFoundError: If neither location holds a file.
    """
    env_path = os.getenv(ENV_DEFAULTS_PATH)
    if env_path:
        if Path(env_path).exists():
            return Path(env_path)
        logger.warning(f"{ENV_DEFAULTS_PATH}={env_path} does not exist, using packaged defaults")

    yaml_path = Path(__file__).parent / "defaults.yaml"
    if not yaml_path.exists():
        raise FileNotFoundError(
            f"Parameter registry not found: {yaml_path}\n"
            f"Set {ENV_DEFAULTS_PATH} if the file is relocated."
        )
    return yaml_path


def _load_registry() -> dict[str, Any]:
    yaml_path = _get_yaml_path()
    with open(yaml_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    logger.debug(f"Loaded parameter registry from {yaml_path}")
    # An empty file parses to None
    return data or {}


_REGISTRY_CACHE: dict[str, Any] | None = None


def _get_registry() -> dict[str, Any]:
    global _REGISTRY_CACHE
    if _REGISTRY_CACHE is None:
        _REGISTRY_CACHE = _load_registry()
    return _REGISTRY_CACHE


def get_defaults() -> dict[str, Any]:
    """Return a shallow copy of the whole registry."""
    return _get_registry().copy()


def get_default(key_path: str, default: Any = None) -> Any:
    """Look up a registry value by dotted key path.

    Keys may contain hyphens (``global_parameters.DFR-Beta``); only dots
    separate levels.

    Args:
        key_path: Dotted path to the value
        default: Returned when any level of the path is missing

    Example:
        >>> get_default('global_parameters.DFR-Ma')
        1.0
        >>> get_default('nonexistent.key', 'fallback')
        'fallback'
    """
    value: Any = _get_registry()
    for key in key_path.split("."):
        if not isinstance(value, dict) or key not in value:
            return default
        value = value[key]
    return value if value is not None else default


def reload_defaults() -> None:
    """Re-read the registry from disk (e.g. after changing the env path)."""
    global _REGISTRY_CACHE
    _REGISTRY_CACHE = _load_registry()
