"""Storage fingerprints for silo directories.

A repository's silos live under ``{base_dir}/{repo_name}-{hash}/{name}``.
The hash is the first 4 bytes of SHA-256 over the repository path, so two
repositories sharing a directory name still get distinct storage roots.
32 bits leave a small chance of collision across one user's repositories;
that bound is accepted and collisions are not detected.
"""

from __future__ import annotations

import hashlib
from pathlib import Path, PurePath

from silo.constants.naming import FINGERPRINT_BYTES, STORAGE_NAME_SEPARATOR


def path_hash(path: str | PurePath) -> str:
    """Return an 8-character lowercase hex fingerprint of ``path`` as given."""
    digest = hashlib.sha256(str(path).encode("utf-8", "surrogateescape")).digest()
    return digest[:FINGERPRINT_BYTES].hex()


def repo_storage_name(repo_name: str, repo_path: str | PurePath) -> str:
    """Return the storage directory name for a repository."""
    return f"{repo_name}{STORAGE_NAME_SEPARATOR}{path_hash(repo_path)}"


def silo_storage_path(base_dir: Path, repo_name: str, repo_path: str | PurePath, branch: str) -> Path:
    """Return the full storage path for a silo of ``repo_path``."""
    return base_dir / repo_storage_name(repo_name, repo_path) / branch
