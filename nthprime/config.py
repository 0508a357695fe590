"""
Run configuration.

A config is a plain dict loaded from YAML, e.g. config/default.yaml:

    N: 1000000
    verbose: false
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .collector import check_int32_capacity


DEFAULT_N = 1_000_000

DEFAULTS = {
    'N': DEFAULT_N,
    'verbose': False,
}


class ConfigError(ValueError):
    """Raised for a malformed or invalid config file."""


def validate_config(raw: Any) -> Dict[str, Any]:
    """
    Validate a raw config mapping and fill in defaults.

    Parameters
    ----------
    raw : Any
        Result of yaml.safe_load.

    Returns
    -------
    dict
        Config with keys N and verbose.
    """
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")

    unknown = set(raw) - set(DEFAULTS)
    if unknown:
        raise ConfigError(f"Unknown config keys: {sorted(unknown)}")

    if 'N' not in raw:
        raise ConfigError("Config must set N")

    N = raw['N']
    if isinstance(N, bool) or not isinstance(N, int):
        raise ConfigError(f"N must be an integer, got {N!r}")
    if N < 1:
        raise ConfigError(f"N must be >= 1, got {N}")

    verbose = raw.get('verbose', DEFAULTS['verbose'])
    if not isinstance(verbose, bool):
        raise ConfigError(f"verbose must be true or false, got {verbose!r}")

    try:
        check_int32_capacity(N)
    except ValueError as e:
        raise ConfigError(str(e)) from e

    return {'N': N, 'verbose': verbose}


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load and validate a YAML config.

    Parameters
    ----------
    path : str or Path, optional
        Config file. If None, returns the built-in defaults.

    Returns
    -------
    dict
    """
    if path is None:
        return dict(DEFAULTS)

    with open(path) as f:
        raw = yaml.safe_load(f)

    return validate_config(raw)
