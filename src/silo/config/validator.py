"""Config file validation for silo."""

from __future__ import annotations

import difflib
from pathlib import Path

import yaml

from silo.constants.config import KNOWN_CONFIG_KEYS
from silo.constants.validation import CFG001, CFG002, CFG003, CFG004, CFG005
from silo.exceptions.validation import ValidationError, sort_errors


def validate_config_file(path: Path, *, config_explicit: bool = False) -> list[ValidationError]:
    """Validate a silo config file and return all validation errors.

    Never raises; a missing file is only an error when it was requested
    explicitly.
    """
    errors: list[ValidationError] = []
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(str(key) for key in raw):
        if key not in KNOWN_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=suggest_key(key, KNOWN_CONFIG_KEYS),
                )
            )

    if raw.get("worktree_dir") is not None and not isinstance(raw["worktree_dir"], str):
        errors.append(_type_error(path_str, "worktree_dir", "expected a path string"))

    if raw.get("warn_shell_integration") is not None and not isinstance(raw["warn_shell_integration"], bool):
        errors.append(_type_error(path_str, "warn_shell_integration", "expected a boolean"))

    extra = raw.get("extra_command_args")
    if extra is not None:
        if not isinstance(extra, dict):
            errors.append(_type_error(path_str, "extra_command_args", "expected a mapping of command prefix to list"))
        else:
            for prefix, args in extra.items():
                if not isinstance(args, list) or not all(isinstance(arg, str) for arg in args):
                    errors.append(
                        _type_error(path_str, f"extra_command_args.{prefix}", "expected a list of strings")
                    )

    return sort_errors(errors)


def suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""


def _type_error(path_str: str, field: str, hint: str) -> ValidationError:
    return ValidationError(
        code=CFG005,
        path=path_str,
        field=field,
        message=f"invalid type for `{field}`",
        hint=hint,
    )
