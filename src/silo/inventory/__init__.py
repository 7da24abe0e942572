"""Silo inventory loading."""

from .loader import load_inventory, parse_inventory, silo_from_record

__all__ = ["load_inventory", "parse_inventory", "silo_from_record"]
