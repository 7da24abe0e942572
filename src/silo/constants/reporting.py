"""Constants for stdout formatting."""

from __future__ import annotations

ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_DIM: str = "\033[2m"
ANSI_CYAN: str = "\033[36m"

EMPTY_LIST_MESSAGE: str = "No silos found."
NAME_COLUMN_GAP: int = 2

NO_COLOR_ENV: str = "NO_COLOR"
