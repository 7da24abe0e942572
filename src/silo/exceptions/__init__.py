"""Shared exception hierarchy for silo."""

from __future__ import annotations

from .base import SiloError
from .config import ConfigError
from .inventory import InventoryError
from .resolution import AmbiguousSiloError, NoPreviousSiloError, SiloNotFoundError

__all__ = [
    "AmbiguousSiloError",
    "ConfigError",
    "InventoryError",
    "NoPreviousSiloError",
    "SiloError",
    "SiloNotFoundError",
]
