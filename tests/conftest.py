from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "database.json"


@pytest.fixture
def store(db_path: Path):
    from nestedjson import NestedJSONStore

    return NestedJSONStore(str(db_path))


@pytest.fixture
def env_sandbox(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Clear store env vars and run from a temp cwd so tests never pick up a real local.env.
    Each var is registered with monkeypatch so values loaded from a test env file are undone.
    """
    for name in (
        "NESTED_JSON_FILE",
        "NESTED_JSON_NESTED",
        "NESTED_JSON_SEPARATOR",
        "NESTED_JSON_ATOMIC_WRITES",
    ):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path
