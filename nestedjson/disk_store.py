from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .errors import DatabaseError
from .interfaces import KeyValueDocumentStore
from .json_store import atomic_write_json, read_json, write_json
from .paths import ensure_parent_dir

logger = logging.getLogger(__name__)

EMPTY_DOCUMENT = "{}"


class DiskJsonDocumentStore(KeyValueDocumentStore):
    """
    Stores a single JSON document on disk at a fixed path.

    - Creates the parent directory and an empty `{}` document on construction.
    - Every load reads the whole file; every save rewrites the whole file.
    - No locking: concurrent writers race, last writer wins.
    """

    def __init__(self, path: str | Path, *, atomic_writes: bool = False):
        self._path = Path(path)
        self._atomic_writes = atomic_writes
        self._bootstrap(str(path))

    @property
    def path(self) -> Path:
        return self._path

    def _bootstrap(self, file_name: str) -> None:
        ensure_parent_dir(file_name)
        if not self._path.exists():
            logger.info("Creating empty database file %s", self._path)
            self._path.write_text(EMPTY_DOCUMENT, encoding="utf-8")

    def load(self) -> dict[str, Any]:
        doc = read_json(self._path)
        if not isinstance(doc, dict):
            raise DatabaseError(f"The database file '{self._path}' does not contain a JSON object!")
        return doc

    def save(self, doc: dict[str, Any]) -> None:
        if self._atomic_writes:
            atomic_write_json(self._path, doc)
        else:
            write_json(self._path, doc)
