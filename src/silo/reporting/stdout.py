"""Stdout listing of silos."""

from __future__ import annotations

from collections.abc import Sequence

from silo.constants.reporting import (
    ANSI_BOLD,
    ANSI_CYAN,
    ANSI_DIM,
    ANSI_RESET,
    EMPTY_LIST_MESSAGE,
    NAME_COLUMN_GAP,
)
from silo.model import Silo
from silo.names import find_duplicate_names, generate_display_names


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class SiloListReporter:
    """Formats one line per silo: its minimal display name, then its storage path."""

    def __init__(
        self,
        silos: Sequence[Silo],
        *,
        require_repo_prefix: bool = False,
        color: bool = True,
    ) -> None:
        """Initialise the reporter."""
        self._silos = list(silos)
        self._color = color
        self._names = generate_display_names(self._silos, require_repo_prefix)

    @property
    def display_names(self) -> list[str]:
        """Display names in input order."""
        return list(self._names)

    @property
    def indistinguishable(self) -> dict[str, list[int]]:
        """Display names shared by silos with the same repository and name."""
        return find_duplicate_names(self._names)

    def render(self) -> str:
        """Render the listing as a single string."""
        if not self._silos:
            return EMPTY_LIST_MESSAGE

        width = max(len(name) for name in self._names) + NAME_COLUMN_GAP
        lines: list[str] = []
        for silo, name in zip(self._silos, self._names):
            padded = f"{name:<{width}}"
            path = str(silo.storage_path)
            if self._color:
                padded = _colorize(padded, ANSI_BOLD)
                path = _colorize(path, ANSI_DIM)
            lines.append(f"{padded}{path}")

        count = len(self._silos)
        footer = f"{count} silo{'s' if count != 1 else ''}"
        lines.append(_colorize(footer, ANSI_CYAN) if self._color else footer)
        return "\n".join(lines)
