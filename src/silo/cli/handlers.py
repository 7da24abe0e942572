"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from silo.complete import completion_candidates
from silo.config import SiloConfig, load_config, resolve_home, validate_config_file
from silo.constants.config import USER_CONFIG_PATH
from silo.constants.naming import LAST_SILO_ENV
from silo.constants.reporting import NO_COLOR_ENV
from silo.exceptions import ConfigError
from silo.exceptions.validation import format_errors
from silo.inventory import load_inventory
from silo.lookup import resolve_dash, resolve_silo
from silo.model import Silo
from silo.names import silo_storage_path
from silo.reporting import SiloListReporter
from silo.types.common import RepoPath
from silo.utils.paths import path_components

logger = logging.getLogger(__name__)


def _current_repo(args: argparse.Namespace) -> RepoPath | None:
    """Current repository exactly as typed; it is compared verbatim against inventory paths."""
    if args.current_repo is None:
        return None
    return RepoPath(str(args.current_repo))


def _load_config(args: argparse.Namespace, main_worktree: Path | None = None) -> SiloConfig:
    return load_config(
        cwd=Path.cwd(),
        main_worktree=main_worktree or getattr(args, "current_repo", None),
        config_path=args.config,
    )


def _load_silos(args: argparse.Namespace) -> list[Silo]:
    base_dir = _load_config(args).worktree_path(resolve_home())
    return load_inventory(args.inventory, base_dir)


def handle_list(args: argparse.Namespace) -> int:
    """Print every silo under its minimal display name."""
    silos = _load_silos(args)
    current_repo = _current_repo(args)
    use_color = args.color and sys.stdout.isatty() and NO_COLOR_ENV not in os.environ

    if current_repo is not None and not args.all:
        silos = [silo for silo in silos if silo.main_worktree == current_repo]
        reporter = SiloListReporter(silos, require_repo_prefix=False, color=use_color)
    else:
        reporter = SiloListReporter(silos, require_repo_prefix=True, color=use_color)

    for name, indices in reporter.indistinguishable.items():
        logger.warning("%d silos share the display name %s", len(indices), name)

    print(reporter.render())
    return 0


def handle_resolve(args: argparse.Namespace) -> int:
    """Print the storage path of the silo a name refers to."""
    name = resolve_dash(args.name, os.environ.get(LAST_SILO_ENV))
    silo = resolve_silo(name, _load_silos(args), _current_repo(args))
    print(silo.storage_path)
    return 0


def handle_path(args: argparse.Namespace) -> int:
    """Print the storage path a new silo of a repository would get."""
    repo_path: Path = args.repo_path
    chain = path_components(repo_path)
    repo_name = args.repo_name or (chain[0] if chain else "")
    if not repo_name:
        raise ConfigError(f"Cannot derive a repository name from {repo_path}")

    base_dir = _load_config(args, main_worktree=repo_path).worktree_path(resolve_home())
    print(silo_storage_path(base_dir, repo_name, repo_path, args.branch))
    return 0


def handle_complete(args: argparse.Namespace) -> int:
    """Print zsh completion candidates, one per line."""
    for completion in completion_candidates(_load_silos(args), _current_repo(args)):
        print(completion.format_zsh())
    return 0


def handle_validate_config(args: argparse.Namespace) -> int:
    """Validate the explicit or user config file and report results."""
    explicit = args.config is not None
    path = args.config if explicit else resolve_home() / USER_CONFIG_PATH
    errors = validate_config_file(path, config_explicit=explicit)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0
