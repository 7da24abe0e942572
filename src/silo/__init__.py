"""Silo: stable storage names and short-name resolution for git worktrees."""

from __future__ import annotations

__version__ = "0.1.0"
