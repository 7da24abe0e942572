"""Config data model for silo."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from silo.constants.config import DEFAULT_WORKTREE_DIR
from silo.utils.paths import expand_home


@dataclass(frozen=True)
class SiloConfig:
    """Resolved silo config.

    ``None`` marks a key the config file did not set, so that a later file in
    the load order only overrides what it actually specifies.

    Only ``worktree_dir`` drives any command here. ``warn_shell_integration``
    and ``extra_command_args`` are parsed, merged and validated so config
    files shared with the worktree launcher stay valid, and are exposed for
    its callers.
    """

    worktree_dir: str | None = None
    warn_shell_integration: bool | None = None
    extra_command_args: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    @property
    def shell_integration_warning(self) -> bool:
        """Whether to warn when shell integration is not enabled."""
        return True if self.warn_shell_integration is None else self.warn_shell_integration

    def worktree_path(self, home: Path) -> Path:
        """Storage root for all silos, with ``~`` and relative paths anchored at ``home``."""
        return expand_home(self.worktree_dir or DEFAULT_WORKTREE_DIR, home)

    def merge(self, other: SiloConfig) -> SiloConfig:
        """Overlay ``other`` on this config.

        Scalar keys set in ``other`` win. ``extra_command_args`` entries are
        concatenated per command prefix.
        """
        combined: dict[str, tuple[str, ...]] = dict(self.extra_command_args)
        for prefix, args in other.extra_command_args.items():
            combined[prefix] = combined.get(prefix, ()) + tuple(args)

        return SiloConfig(
            worktree_dir=other.worktree_dir if other.worktree_dir is not None else self.worktree_dir,
            warn_shell_integration=(
                other.warn_shell_integration
                if other.warn_shell_integration is not None
                else self.warn_shell_integration
            ),
            extra_command_args=combined,
        )
