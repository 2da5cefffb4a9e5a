from __future__ import annotations

import os
from dataclasses import dataclass, replace

from dotenv import load_dotenv

DEFAULT_FILE_NAME = "database.json"
DEFAULT_SEPARATOR = ".."


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class StoreOptions:
    """Key-path resolution defaults held by a store instance."""

    nested_enabled: bool = True
    separator: str = DEFAULT_SEPARATOR

    def override(self, nested_enabled: bool | None = None, separator: str | None = None) -> "StoreOptions":
        """Return the effective options for one call; `self` is never modified."""
        changes: dict[str, object] = {}
        if nested_enabled is not None:
            changes["nested_enabled"] = bool(nested_enabled)
        if separator is not None:
            changes["separator"] = separator
        return replace(self, **changes) if changes else self


@dataclass(frozen=True)
class Settings:
    # Storage
    file_name: str

    # Key paths
    nested_enabled: bool
    separator: str

    # Write strategy (default: plain full overwrite)
    atomic_writes: bool

    @property
    def options(self) -> StoreOptions:
        return StoreOptions(nested_enabled=self.nested_enabled, separator=self.separator)


def get_settings(env_file: str | None = "local.env") -> Settings:
    if env_file:
        load_dotenv(env_file)

    file_name = os.getenv("NESTED_JSON_FILE", "").strip() or DEFAULT_FILE_NAME
    nested_enabled = _env_bool("NESTED_JSON_NESTED", True)
    separator = os.getenv("NESTED_JSON_SEPARATOR") or DEFAULT_SEPARATOR
    atomic_writes = _env_bool("NESTED_JSON_ATOMIC_WRITES", False)

    return Settings(
        file_name=file_name,
        nested_enabled=nested_enabled,
        separator=separator,
        atomic_writes=atomic_writes,
    )
