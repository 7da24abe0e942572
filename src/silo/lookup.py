"""Turn resolver outcomes into silos or user-facing errors."""

from __future__ import annotations

from collections.abc import Sequence

from silo.constants.naming import PREVIOUS_SILO_ALIAS
from silo.exceptions import AmbiguousSiloError, NoPreviousSiloError, SiloNotFoundError
from silo.model import Silo
from silo.names import Ambiguous, Found, NotFound, generate_display_names, resolve_name
from silo.types.common import RepoPath


def resolve_dash(name: str, last_silo: str | None) -> str:
    """Replace ``-`` with the last visited silo; other names pass through."""
    if name != PREVIOUS_SILO_ALIAS:
        return name
    if not last_silo:
        raise NoPreviousSiloError()
    return last_silo


def resolve_silo(name: str, silos: Sequence[Silo], current_repo: RepoPath | None = None) -> Silo:
    """Resolve ``name`` to one silo or raise a lookup error."""
    if not silos:
        raise SiloNotFoundError(name, "No silos found.")

    match resolve_name(name, silos, current_repo):
        case Found(silo=silo):
            return silo
        case NotFound():
            raise SiloNotFoundError(name)
        case Ambiguous(matches=matches):
            raise AmbiguousSiloError(name, ambiguous_display_names(silos, matches))


def ambiguous_display_names(silos: Sequence[Silo], matches: Sequence[Silo]) -> list[str]:
    """Repo-prefixed display names of ``matches``, minimized over all ``silos``."""
    display_names = generate_display_names(silos, True)
    wanted = {id(silo) for silo in matches}
    return [display for silo, display in zip(silos, display_names) if id(silo) in wanted]
