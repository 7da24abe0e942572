"""Exceptions raised when a user-typed silo name cannot be resolved."""

from __future__ import annotations

from silo.exceptions.base import SiloError


class SiloNotFoundError(SiloError, LookupError):
    """Raised when no silo matches a name."""

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        super().__init__(message or f"Silo not found: {name}")


class AmbiguousSiloError(SiloError, LookupError):
    """Raised when a name matches several silos.

    ``matches`` holds the display names of every candidate, rendered so that
    each one is distinct.
    """

    def __init__(self, name: str, matches: list[str]) -> None:
        self.name = name
        self.matches = matches
        listing = "\n  ".join(matches)
        super().__init__(f"Ambiguous silo name '{name}'. Did you mean one of:\n  {listing}")


class NoPreviousSiloError(SiloError):
    """Raised when ``-`` is used before any silo was visited."""

    def __init__(self) -> None:
        super().__init__("No previous silo. Use a silo name instead of '-'.")
