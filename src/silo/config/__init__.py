"""Configuration loading, layering and validation for silo.

This package facade re-exports the public names so callers can write
``from silo.config import ...``.
"""

from __future__ import annotations

from silo.config.loader import load_config, load_config_file, resolve_home
from silo.config.model import SiloConfig
from silo.config.validator import suggest_key, validate_config_file

__all__ = [
    "SiloConfig",
    "load_config",
    "load_config_file",
    "resolve_home",
    "suggest_key",
    "validate_config_file",
]
