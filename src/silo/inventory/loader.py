"""Load silo records supplied by an external collaborator.

An inventory is a JSON list of silo records, or a mapping with a ``silos``
list. Records are validated against a JSON Schema before being turned into
:class:`~silo.model.Silo` instances.
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path

import jsonschema

from silo.constants.inventory import INVENTORY_LIST_KEY, INVENTORY_SCHEMA
from silo.exceptions import InventoryError
from silo.io import load_json_file
from silo.model import Silo
from silo.names.fingerprint import silo_storage_path
from silo.types.common import JsonObject, RepoPath

logger = logging.getLogger(__name__)


def load_inventory(path: Path, base_dir: Path) -> list[Silo]:
    """Read and validate an inventory file, preserving record order."""
    try:
        payload = load_json_file(path)
    except OSError as exc:
        raise InventoryError(f"Failed to read inventory {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise InventoryError(f"Invalid JSON in inventory {path}: {exc}") from exc

    silos = parse_inventory(payload, base_dir, source=str(path))
    logger.debug("Loaded %d silo(s) from %s", len(silos), path)
    return silos


def parse_inventory(payload: object, base_dir: Path, *, source: str = "<inventory>") -> list[Silo]:
    """Validate a decoded inventory document and convert it to silos.

    Records whose storage path repeats an earlier record are skipped.
    """
    try:
        jsonschema.validate(instance=payload, schema=INVENTORY_SCHEMA)
    except jsonschema.ValidationError as exc:
        location = "/".join(str(part) for part in exc.absolute_path) or "<root>"
        raise InventoryError(f"Invalid inventory {source} at {location}: {exc.message}") from exc

    records = payload[INVENTORY_LIST_KEY] if isinstance(payload, dict) else payload
    assert isinstance(records, list)

    silos: list[Silo] = []
    seen: set[Path] = set()
    for record in records:
        silo = silo_from_record(record, base_dir)
        if silo.storage_path in seen:
            logger.warning("Skipping duplicate silo at %s in %s", silo.storage_path, source)
            continue
        seen.add(silo.storage_path)
        silos.append(silo)
    return silos


def silo_from_record(record: JsonObject, base_dir: Path) -> Silo:
    """Build a silo from one validated record, deriving its storage path if absent."""
    name = str(record["name"])
    main_worktree = RepoPath(str(record["main_worktree"]))
    if not Path(main_worktree).is_absolute():
        raise InventoryError(f"main_worktree must be an absolute path, got {main_worktree!r}")
    branch = record.get("branch")

    silo = Silo(
        name=name,
        main_worktree=main_worktree,
        storage_path=Path(str(record.get("storage_path") or "")),
        branch=branch if isinstance(branch, str) else None,
        repo_name=str(record.get("repo_name") or ""),
    )
    if "storage_path" in record:
        return silo
    return replace(silo, storage_path=silo_storage_path(base_dir, silo.repo_name, main_worktree, name))
