"""Core data models for silo."""

from .entities import Silo

__all__ = ["Silo"]
