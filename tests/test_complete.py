"""Tests for shell completion candidates."""

from __future__ import annotations

from collections.abc import Callable

from silo.complete import Completion, completion_candidates
from silo.model import Silo
from silo.types.common import RepoPath

MakeSilo = Callable[..., Silo]


def test_inside_repo_offers_that_repos_branches(make_silo: MakeSilo) -> None:
    silos = [
        make_silo("/projects/repoA", "feature", branch="feat/login"),
        make_silo("/projects/repoB", "other"),
        make_silo("/projects/repoA", "main"),
    ]

    candidates = completion_candidates(silos, RepoPath("/projects/repoA"))

    assert [c.value for c in candidates] == ["feat/login", "main"]


def test_outside_repo_offers_prefixed_display_names(make_silo: MakeSilo) -> None:
    silos = [make_silo("/projects/repoA", "feature"), make_silo("/org/repoB", "feature")]

    candidates = completion_candidates(silos)

    assert [c.value for c in candidates] == ["repoA/feature", "repoB/feature"]
    assert candidates[0].description == "/silos/repoA/feature"


def test_format_zsh_escapes_colons() -> None:
    assert Completion("main").format_zsh() == "main"
    assert Completion("repo/main", "C:/work").format_zsh() == "repo/main:C\\:/work"


def test_outside_repo_candidates_are_sorted(make_silo: MakeSilo) -> None:
    silos = [
        make_silo("/org/repoB", "main"),
        make_silo("/projects/repoA", "feature"),
        make_silo("/org/repoB", "feature"),
    ]

    candidates = completion_candidates(silos)

    assert [c.value for c in candidates] == ["repoA/feature", "repoB/feature", "repoB/main"]
