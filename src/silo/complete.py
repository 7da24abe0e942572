"""Shell completion candidates for silo names."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from silo.model import Silo
from silo.names import generate_display_names
from silo.types.common import RepoPath


@dataclass(frozen=True)
class Completion:
    """A completion candidate."""

    value: str
    description: str | None = None

    def format_zsh(self) -> str:
        """Format as ``value:description`` with colons in the description escaped."""
        if self.description is None:
            return self.value
        escaped = self.description.replace(":", "\\:")
        return f"{self.value}:{escaped}"


def completion_candidates(silos: Sequence[Silo], current_repo: RepoPath | None = None) -> list[Completion]:
    """Complete silo names for the current context.

    Inside a repository only that repository's branches are offered.
    Elsewhere every silo is offered under its repo-prefixed display name,
    sorted, with its storage path as the description.
    """
    if current_repo is not None:
        return [Completion(silo.branch_name) for silo in silos if silo.main_worktree == current_repo]

    candidates = [
        Completion(display, str(silo.storage_path))
        for silo, display in zip(silos, generate_display_names(silos, True))
    ]
    return sorted(candidates, key=lambda completion: completion.value)
