"""Tests for the silo entity model and path helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from silo.model import Silo
from silo.types.common import RepoPath
from silo.utils.paths import expand_home, path_components


def test_path_components_are_bottom_up() -> None:
    assert path_components("/a/b/c/repo") == ("repo", "c", "b", "a")


@pytest.mark.parametrize("path", ["/", ""], ids=["root", "empty"])
def test_path_components_of_rootless_paths_are_empty(path: str) -> None:
    assert path_components(path) == ()


def test_silo_derives_context_chain_and_repo_name() -> None:
    silo = Silo(name="feature", main_worktree=RepoPath("/projects/repoA"), storage_path=Path("/silos/x"))

    assert silo.context_chain == ("repoA", "projects")
    assert silo.repo_name == "repoA"


def test_silo_keeps_explicit_repo_name() -> None:
    silo = Silo(
        name="feature",
        main_worktree=RepoPath("/projects/checkout"),
        storage_path=Path("/silos/x"),
        repo_name="upstream",
    )

    assert silo.repo_name == "upstream"
    assert silo.context_chain == ("checkout", "projects")


def test_silo_at_filesystem_root_has_unknown_repo_name() -> None:
    silo = Silo(name="feature", main_worktree=RepoPath("/"), storage_path=Path("/silos/x"))

    assert silo.context_chain == ()
    assert silo.repo_name == "unknown"


def test_silo_rejects_empty_name() -> None:
    with pytest.raises(ValueError, match="must not be empty"):
        Silo(name="", main_worktree=RepoPath("/projects/repoA"), storage_path=Path("/silos/x"))


def test_branch_name_falls_back_to_silo_name() -> None:
    detached = Silo(name="feature", main_worktree=RepoPath("/r"), storage_path=Path("/s"))
    tracking = Silo(name="feature", main_worktree=RepoPath("/r"), storage_path=Path("/s"), branch="feat/x")

    assert detached.branch_name == "feature"
    assert tracking.branch_name == "feat/x"


def test_identity_ignores_storage_location() -> None:
    first = Silo(name="feature", main_worktree=RepoPath("/r"), storage_path=Path("/s/1"))
    second = Silo(name="feature", main_worktree=RepoPath("/r"), storage_path=Path("/s/2"))

    assert first.identity == second.identity
    assert first != second


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("/absolute/path/to/silos", Path("/absolute/path/to/silos")),
        ("~/my/silos", Path("/home/me/my/silos")),
        ("~", Path("/home/me")),
        ("relative/path", Path("/home/me/relative/path")),
    ],
    ids=["absolute", "tilde", "bare-tilde", "relative"],
)
def test_expand_home(raw: str, expected: Path) -> None:
    assert expand_home(raw, Path("/home/me")) == expected
