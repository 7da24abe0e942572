"""Shared type aliases for silo."""

from .common import JsonObject, JsonScalar, JsonValue, RepoPath

__all__ = [
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "RepoPath",
]
