"""Shared pytest fixtures for silo tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from silo.model import Silo
from silo.types.common import RepoPath

type SiloFactory = Callable[..., Silo]


@pytest.fixture(scope="session")
def make_silo() -> SiloFactory:
    """Return a factory building a silo of ``repo_path`` named ``name``."""

    def _make(repo_path: str, name: str, *, branch: str | None = None) -> Silo:
        return Silo(
            name=name,
            main_worktree=RepoPath(repo_path),
            storage_path=Path("/silos") / Path(repo_path).name / name,
            branch=branch if branch is not None else name,
        )

    return _make


@pytest.fixture
def write_inventory(tmp_path: Path) -> Callable[[object], Path]:
    """Return a helper that writes an inventory document and returns its path."""

    def _write(payload: object) -> Path:
        path = tmp_path / "silos.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``HOME`` at an empty temporary directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir
