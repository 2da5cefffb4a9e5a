from __future__ import annotations

from typing import Any

from .errors import InvalidKeyError, InvalidKeyTypeError


def validate_key(key: Any) -> str:
    if not key:
        raise InvalidKeyError(key)
    if not isinstance(key, str):
        raise InvalidKeyTypeError(key)
    return key


def split_key(key: str, *, nested: bool, separator: str) -> list[str]:
    """
    Turn a key into path segments.

    With nested mode off (or an empty separator) the whole key is a single segment.
    """
    if not nested or not separator:
        return [key]
    return key.split(separator)
