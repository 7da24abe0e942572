"""Configuration defaults and filenames."""

from __future__ import annotations

USER_CONFIG_PATH: str = ".config/silo.yaml"
LOCAL_CONFIG_NAME: str = ".silo.yaml"
DEFAULT_WORKTREE_DIR: str = ".local/var/silo"
HOME_ENV: str = "HOME"

KNOWN_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "worktree_dir",
        "warn_shell_integration",
        "extra_command_args",
    }
)
