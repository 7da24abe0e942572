"""Storage fingerprints, display-name minimization and name resolution."""

from __future__ import annotations

from silo.names.display import build_display_name, find_duplicate_names, generate_display_names
from silo.names.fingerprint import path_hash, repo_storage_name, silo_storage_path
from silo.names.resolve import Ambiguous, Found, NotFound, ResolveResult, matches_suffix, resolve_name

__all__ = [
    "Ambiguous",
    "Found",
    "NotFound",
    "ResolveResult",
    "build_display_name",
    "find_duplicate_names",
    "generate_display_names",
    "matches_suffix",
    "path_hash",
    "repo_storage_name",
    "resolve_name",
    "silo_storage_path",
]
