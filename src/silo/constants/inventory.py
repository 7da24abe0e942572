"""JSON Schema for silo inventory files."""

from __future__ import annotations

from typing import Any

INVENTORY_LIST_KEY: str = "silos"

SILO_RECORD_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["name", "main_worktree"],
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "main_worktree": {"type": "string", "minLength": 1},
        "branch": {"type": ["string", "null"]},
        "storage_path": {"type": "string", "minLength": 1},
        "repo_name": {"type": "string", "minLength": 1},
    },
    "additionalProperties": False,
}

INVENTORY_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "silo inventory",
    "oneOf": [
        {"type": "array", "items": SILO_RECORD_SCHEMA},
        {
            "type": "object",
            "required": [INVENTORY_LIST_KEY],
            "properties": {INVENTORY_LIST_KEY: {"type": "array", "items": SILO_RECORD_SCHEMA}},
            "additionalProperties": False,
        },
    ],
}
