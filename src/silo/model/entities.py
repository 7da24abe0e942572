"""Silo entity model."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from silo.constants.naming import UNKNOWN_REPO_NAME
from silo.types.common import RepoPath
from silo.utils.paths import path_components


@dataclass(frozen=True)
class Silo:
    """An isolated git worktree kept under the silo storage root.

    ``main_worktree`` identifies the owning repository. ``context_chain`` is
    derived from it (nearest directory first) and feeds display-name
    minimization; it never takes part in identity.
    """

    name: str
    main_worktree: RepoPath
    storage_path: Path
    branch: str | None = None
    repo_name: str = ""
    context_chain: tuple[str, ...] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("silo name must not be empty")
        chain = path_components(self.main_worktree)
        object.__setattr__(self, "context_chain", chain)
        if not self.repo_name:
            object.__setattr__(self, "repo_name", chain[0] if chain else UNKNOWN_REPO_NAME)

    @property
    def branch_name(self) -> str:
        """Checked-out branch, falling back to the silo name when detached."""
        return self.branch if self.branch is not None else self.name

    @property
    def identity(self) -> tuple[RepoPath, str]:
        """Owning repository and silo name; equal identities denote the same silo."""
        return (self.main_worktree, self.name)
