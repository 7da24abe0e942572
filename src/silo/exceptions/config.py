"""Configuration-related exceptions."""

from __future__ import annotations

from silo.exceptions.base import SiloError


class ConfigError(SiloError, ValueError):
    """Raised when silo configuration is invalid."""
