from __future__ import annotations

from .async_store import AsyncNestedJSONStore
from .disk_store import DiskJsonDocumentStore
from .errors import (
    CannotCreatePropertyError,
    DatabaseError,
    InvalidKeyError,
    InvalidKeyTypeError,
    InvalidValueTypeError,
    NonNumericTargetError,
    NotAnArrayError,
)
from .interfaces import KeyValueDocumentStore
from .records import Entry
from .settings import Settings, StoreOptions, get_settings
from .store import NestedJSONStore

__all__ = [
    "NestedJSONStore",
    "AsyncNestedJSONStore",
    "DiskJsonDocumentStore",
    "KeyValueDocumentStore",
    "Entry",
    "Settings",
    "StoreOptions",
    "get_settings",
    "DatabaseError",
    "InvalidKeyError",
    "InvalidKeyTypeError",
    "InvalidValueTypeError",
    "CannotCreatePropertyError",
    "NonNumericTargetError",
    "NotAnArrayError",
]
