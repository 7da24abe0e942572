"""Config loading and layering for silo."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from silo.config.model import SiloConfig
from silo.config.validator import suggest_key
from silo.constants.config import HOME_ENV, KNOWN_CONFIG_KEYS, LOCAL_CONFIG_NAME, USER_CONFIG_PATH
from silo.exceptions import ConfigError

logger = logging.getLogger(__name__)


def resolve_home(home: Path | None = None) -> Path:
    """Return ``home`` or the ``HOME`` directory from the environment."""
    if home is not None:
        return home
    raw = os.environ.get(HOME_ENV)
    if not raw:
        raise ConfigError("HOME environment variable not set")
    return Path(raw)


def load_config(
    *,
    cwd: Path | None = None,
    main_worktree: Path | None = None,
    home: Path | None = None,
    config_path: Path | None = None,
) -> SiloConfig:
    """Load the effective config.

    With an explicit ``config_path`` only that file is read and it must exist.
    Otherwise the user config is layered with the main worktree's
    ``.silo.yaml`` and then the current directory's, later files winning.
    """
    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        return load_config_file(config_path)

    config = load_config_file(resolve_home(home) / USER_CONFIG_PATH)
    if main_worktree is not None:
        config = config.merge(load_config_file(main_worktree / LOCAL_CONFIG_NAME))
    if cwd is not None:
        config = config.merge(load_config_file(cwd / LOCAL_CONFIG_NAME))
    return config


def load_config_file(path: Path) -> SiloConfig:
    """Load one config file; a missing file yields the defaults."""
    if not path.exists():
        return SiloConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    logger.debug("Loaded config file: %s", path)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    for key in sorted(str(key) for key in raw if key not in KNOWN_CONFIG_KEYS):
        hint = suggest_key(key, KNOWN_CONFIG_KEYS)
        logger.warning("Unknown config key ignored in %s: %s", path, f"{key} ({hint})" if hint else key)

    worktree_dir = raw.get("worktree_dir")
    if worktree_dir is not None and not isinstance(worktree_dir, str):
        raise ConfigError("worktree_dir must be a string")

    warn_shell_integration = raw.get("warn_shell_integration")
    if warn_shell_integration is not None and not isinstance(warn_shell_integration, bool):
        raise ConfigError("warn_shell_integration must be a boolean")

    return SiloConfig(
        worktree_dir=worktree_dir,
        warn_shell_integration=warn_shell_integration,
        extra_command_args=_parse_extra_command_args(raw.get("extra_command_args")),
    )


def _parse_extra_command_args(value: Any) -> dict[str, tuple[str, ...]]:
    """Coerce the ``extra_command_args`` mapping, raising ConfigError on type mismatch."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError("extra_command_args must be a mapping")

    parsed: dict[str, tuple[str, ...]] = {}
    for prefix, args in value.items():
        if not isinstance(prefix, str):
            raise ConfigError("extra_command_args keys must be strings")
        if not isinstance(args, list) or not all(isinstance(arg, str) for arg in args):
            raise ConfigError(f"extra_command_args.{prefix} must be a list of strings")
        parsed[prefix] = tuple(args)
    return parsed
