from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def read_json(path: Path) -> Any:
    """
    Read JSON from disk.

    Returns an empty dict for empty (or whitespace-only) files.
    Missing files and invalid JSON raise.
    """
    raw = path.read_text(encoding="utf-8")
    logger.debug("READ %s (%d bytes)", path, len(raw))
    if not raw.strip():
        return {}
    return json.loads(raw)


def dump_json(payload: Any, *, indent: int = 2) -> str:
    return json.dumps(payload, indent=indent, ensure_ascii=False, allow_nan=False)


def write_json(path: Path, payload: Any, *, indent: int = 2) -> None:
    """
    Overwrite the file in place with the full serialized payload.
    """
    text = dump_json(payload, indent=indent)
    path.write_text(text, encoding="utf-8")
    logger.debug("WRITE %s (%d bytes)", path, len(text))


def atomic_write_json(path: Path, payload: Any, *, indent: int = 2) -> None:
    """
    Atomically write JSON to disk by writing to a temp file then replacing.
    """
    text = dump_json(payload, indent=indent)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    with tmp_path.open("w", encoding="utf-8") as f:
        f.write(text)
    tmp_path.replace(path)
    logger.debug("WRITE %s (%d bytes, atomic)", path, len(text))
