"""Resolve a user-typed silo name to exactly one silo."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from silo.constants.naming import NAME_SEPARATOR
from silo.model import Silo
from silo.names.display import generate_display_names
from silo.types.common import RepoPath

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Found:
    """The name identifies a single silo."""

    silo: Silo


@dataclass(frozen=True)
class NotFound:
    """No silo matches the name."""


@dataclass(frozen=True)
class Ambiguous:
    """Several silos match the name, in input order."""

    matches: tuple[Silo, ...]


type ResolveResult = Found | NotFound | Ambiguous


def matches_suffix(display: str, parts: Sequence[str]) -> bool:
    """Check whether the components of ``display`` end with ``parts``.

    ``org/repo/name`` matches ``name``, ``repo/name`` and ``org/repo/name``
    but not ``po/name``.
    """
    display_parts = display.split(NAME_SEPARATOR)
    if len(parts) > len(display_parts):
        return False
    return display_parts[len(display_parts) - len(parts) :] == list(parts)


def resolve_name(query: str, silos: Sequence[Silo], current_repo: RepoPath | None = None) -> ResolveResult:
    """Resolve ``query`` against ``silos``.

    The query may be a bare silo name (``feature``), or be qualified with
    any number of ancestor directories (``repoA/feature``,
    ``org/repoA/feature``). A bare name that matches exactly one silo of
    ``current_repo`` wins over matches in other repositories.
    """
    if not silos:
        return NotFound()

    parts = query.split(NAME_SEPARATOR)
    leaf = parts[-1]

    if current_repo is not None:
        local = [silo for silo in silos if silo.main_worktree == current_repo and silo.name == leaf]
        if len(local) == 1:
            logger.debug("Resolved %r in current repository %s", query, current_repo)
            return Found(local[0])

    display_names = generate_display_names(silos, False)
    matches = tuple(
        silo
        for silo, display in zip(silos, display_names)
        if display == query or matches_suffix(display, parts)
    )

    if not matches:
        return NotFound()
    if len(matches) == 1:
        return Found(matches[0])
    return Ambiguous(matches)
