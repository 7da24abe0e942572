"""Output reporters for silo listings."""

from .stdout import SiloListReporter

__all__ = ["SiloListReporter"]
