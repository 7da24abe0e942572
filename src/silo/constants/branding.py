"""Branding constants for terminal output."""

from __future__ import annotations

PROG_NAME: str = "silo"
CLI_DESCRIPTION: str = "Name, list and resolve isolated git worktrees (silos)."
