"""Cross-module type aliases."""

from __future__ import annotations

from typing import NewType

RepoPath = NewType("RepoPath", str)
"""Absolute path of a repository's main worktree, compared by exact equality."""

type JsonScalar = str | int | float | bool | None
type JsonValue = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
type JsonObject = dict[str, JsonValue]
