"""Root of the silo exception hierarchy."""

from __future__ import annotations


class SiloError(Exception):
    """Base class for all silo errors."""
