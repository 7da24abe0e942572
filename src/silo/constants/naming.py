"""Constants for storage fingerprints and display names."""

from __future__ import annotations

FINGERPRINT_BYTES: int = 4
NAME_SEPARATOR: str = "/"
STORAGE_NAME_SEPARATOR: str = "-"
UNKNOWN_REPO_NAME: str = "unknown"

PREVIOUS_SILO_ALIAS: str = "-"
LAST_SILO_ENV: str = "SILO_LAST"
