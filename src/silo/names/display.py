"""Shortest unique display names for a batch of silos.

Every silo starts with its bare name (or ``repo/name`` when a repo prefix is
required). Names that collide are lengthened together, one ancestor
directory per round, until each is unique or has run out of ancestors.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from silo.constants.naming import NAME_SEPARATOR
from silo.model import Silo

logger = logging.getLogger(__name__)


def build_display_name(name: str, context_chain: Sequence[str], depth: int) -> str:
    """Prefix ``name`` with its ``depth`` nearest ancestors, outermost first."""
    count = min(depth, len(context_chain))
    if count <= 0:
        return name
    prefix = NAME_SEPARATOR.join(reversed(context_chain[:count]))
    return f"{prefix}{NAME_SEPARATOR}{name}"


def find_duplicate_names(names: Sequence[str]) -> dict[str, list[int]]:
    """Map each name occurring more than once to the indices holding it."""
    groups: dict[str, list[int]] = {}
    for index, name in enumerate(names):
        groups.setdefault(name, []).append(index)
    return {name: indices for name, indices in groups.items() if len(indices) > 1}


def generate_display_names(silos: Sequence[Silo], require_repo_prefix: bool = False) -> list[str]:
    """Return the minimal unique display name of each silo, in input order.

    Silos sharing both name and repository path cannot be told apart; they
    keep identical names once every ancestor has been used.
    """
    if not silos:
        return []

    caps = [len(silo.context_chain) for silo in silos]
    initial = 1 if require_repo_prefix else 0
    depths = [min(initial, cap) for cap in caps]

    rounds = 0
    while True:
        names = [build_display_name(silo.name, silo.context_chain, depth) for silo, depth in zip(silos, depths)]
        conflicting = {index for indices in find_duplicate_names(names).values() for index in indices}
        if not conflicting:
            logger.debug("Display names settled after %d escalation round(s)", rounds)
            return names

        next_depths = [
            depth + 1 if index in conflicting and depth < cap else depth
            for index, (depth, cap) in enumerate(zip(depths, caps))
        ]
        if next_depths == depths:
            logger.debug("Display names kept %d indistinguishable silo(s)", len(conflicting))
            return names

        depths = next_depths
        rounds += 1
