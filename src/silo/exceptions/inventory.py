"""Inventory-related exceptions."""

from __future__ import annotations

from silo.exceptions.base import SiloError


class InventoryError(SiloError, ValueError):
    """Raised when a silo inventory file cannot be read or is malformed."""
