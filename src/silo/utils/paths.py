"""Path helpers shared by the entity model and config."""

from __future__ import annotations

from pathlib import Path, PurePath


def path_components(path: str | PurePath) -> tuple[str, ...]:
    """Split a path into its components bottom-up.

    ``/a/b/c/repo`` becomes ``("repo", "c", "b", "a")``. The root anchor is
    not a component, so ``/`` and ``""`` both yield an empty tuple.
    """
    pure = PurePath(path)
    names = pure.parts[1:] if pure.anchor else pure.parts
    return tuple(reversed(names))


def expand_home(raw: str, home: Path) -> Path:
    """Expand ``~`` against ``home``; relative paths are taken relative to ``home``."""
    if raw == "~":
        return home
    if raw.startswith("~/"):
        return home / raw[2:]
    if PurePath(raw).is_absolute():
        return Path(raw)
    return home / raw
