from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def parent_dir(file_name: str) -> str:
    # Everything before the last "/", so a bare file name has no parent to create.
    idx = file_name.rfind("/")
    return file_name[:idx] if idx > 0 else ""


def ensure_dir(path: Path) -> Path:
    if not path.exists():
        logger.info("Creating database directory %s", path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def ensure_parent_dir(file_name: str) -> Path | None:
    parent = parent_dir(file_name)
    if not parent:
        return None
    return ensure_dir(Path(parent))
