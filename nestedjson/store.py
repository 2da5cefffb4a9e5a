from __future__ import annotations

import inspect
import logging
from pathlib import Path
from typing import Any, Callable

from .disk_store import DiskJsonDocumentStore
from .errors import (
    CannotCreatePropertyError,
    InvalidValueTypeError,
    NonNumericTargetError,
    NotAnArrayError,
)
from .interfaces import KeyValueDocumentStore
from .keys import split_key, validate_key
from .records import Entry
from .settings import DEFAULT_FILE_NAME, DEFAULT_SEPARATOR, Settings, StoreOptions, get_settings
from .values import JsonValue, is_array, is_number, is_object, json_equal, kind_of

logger = logging.getLogger(__name__)

Predicate = Callable[..., Any]


def _as_matcher(callback_or_value: Any) -> Callable[[Any, int, list[Any]], bool]:
    """
    Normalize a pull criterion into `match(element, index, array)`.

    Callables may take one, two or three positional arguments; anything else
    is compared by JSON equality.
    """
    if not callable(callback_or_value):
        return lambda element, index, array: json_equal(element, callback_or_value)

    func = callback_or_value
    arity = 3
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        # builtins without a readable signature (bool, int): call with the element only
        params = None
        arity = 1
    if params is not None:
        positional = [p for p in params if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)]
        if not any(p.kind == p.VAR_POSITIONAL for p in params):
            arity = min(len(positional), 3)

    def _match(element: Any, index: int, array: list[Any]) -> bool:
        return bool(func(*(element, index, array)[:arity]))

    return _match


class NestedJSONStore:
    """
    File-backed key-value store over a single JSON document.

    Keys may address nested mappings: with the default separator ".." the key
    "a..b..c" resolves root -> "a" -> "b" -> "c". Nothing is cached between
    calls; each operation reads the whole file, and each mutation rewrites it.

    Every key-taking operation accepts `nested_enabled` / `separator`
    overrides for that call only; the instance defaults never change.
    """

    def __init__(
        self,
        file_name: str | Path = DEFAULT_FILE_NAME,
        nested_enabled: bool = True,
        separator: str = DEFAULT_SEPARATOR,
        *,
        atomic_writes: bool = False,
        document_store: KeyValueDocumentStore | None = None,
    ):
        self._options = StoreOptions(nested_enabled=nested_enabled, separator=separator)
        if document_store is None:
            document_store = DiskJsonDocumentStore(file_name, atomic_writes=atomic_writes)
        self._doc_store = document_store

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "NestedJSONStore":
        s = settings or get_settings()
        return cls(
            s.file_name,
            s.nested_enabled,
            s.separator,
            atomic_writes=s.atomic_writes,
        )

    @property
    def path(self) -> Path:
        return self._doc_store.path

    @property
    def options(self) -> StoreOptions:
        return self._options

    # --- internals ---

    def _segments(self, key: Any, nested_enabled: bool | None, separator: str | None) -> list[str]:
        key = validate_key(key)
        opts = self._options.override(nested_enabled, separator)
        return split_key(key, nested=opts.nested_enabled, separator=opts.separator)

    def _load(self) -> dict[str, Any]:
        return self._doc_store.load()

    def _save(self, doc: dict[str, Any]) -> None:
        self._doc_store.save(doc)

    @staticmethod
    def _descend_creating(doc: dict[str, Any], segments: list[str], key: str) -> dict[str, Any]:
        """
        Walk every segment but the last, creating missing mappings along the way.

        Returns the mapping that holds the terminal segment.
        """
        current = doc
        for part in segments[:-1]:
            if part not in current:
                current[part] = {}
            elif not is_object(current[part]):
                raise CannotCreatePropertyError(key, part, kind_of(current[part]))
            current = current[part]
        return current

    @staticmethod
    def _descend_existing(doc: dict[str, Any], segments: list[str]) -> dict[str, Any] | None:
        """Walk every segment but the last without creating anything; None when the path breaks."""
        current: Any = doc
        for part in segments[:-1]:
            if not is_object(current) or part not in current:
                return None
            current = current[part]
        return current if is_object(current) else None

    def _apply_amount(
        self,
        key: str,
        value: Any,
        sign: int,
        nested_enabled: bool | None,
        separator: str | None,
    ) -> None:
        segments = self._segments(key, nested_enabled, separator)
        if not is_number(value):
            raise InvalidValueTypeError(key, value)

        doc = self._load()
        parent = self._descend_creating(doc, segments, key)
        last = segments[-1]

        if last not in parent:
            parent[last] = sign * value
        elif is_number(parent[last]):
            parent[last] += sign * value
        else:
            raise NonNumericTargetError(key)

        self._save(doc)

    # --- public surface ---

    def set(self, key: str, value: JsonValue, nested_enabled: bool | None = None, separator: str | None = None) -> None:
        """
        Set `value` at `key`, creating intermediate mappings as needed.

        Raises CannotCreatePropertyError when an intermediate segment holds a non-mapping.
        """
        segments = self._segments(key, nested_enabled, separator)
        doc = self._load()
        parent = self._descend_creating(doc, segments, key)
        parent[segments[-1]] = value
        self._save(doc)
        logger.debug("SET %s", key)

    def get(self, key: str, nested_enabled: bool | None = None, separator: str | None = None) -> JsonValue:
        """Return the value at `key`, or None if any step of the path is absent."""
        segments = self._segments(key, nested_enabled, separator)
        current: Any = self._load()
        for part in segments:
            if not is_object(current) or part not in current:
                return None
            current = current[part]
        return current

    def fetch(self, key: str, nested_enabled: bool | None = None, separator: str | None = None) -> Any:
        """Alias of `get`."""
        validate_key(key)
        return self.get(key, nested_enabled, separator)

    def delete(self, key: str, nested_enabled: bool | None = None, separator: str | None = None) -> bool:
        """Remove `key`. Returns False (and writes nothing) if it was not there."""
        segments = self._segments(key, nested_enabled, separator)
        doc = self._load()
        parent = self._descend_existing(doc, segments)
        last = segments[-1]
        if parent is None or last not in parent:
            return False
        del parent[last]
        self._save(doc)
        logger.debug("DELETE %s", key)
        return True

    def has(self, key: str, nested_enabled: bool | None = None, separator: str | None = None) -> bool:
        """
        True when `get(key)` is truthy.

        Stored falsy values (0, "", False, None, [], {}) report as absent.
        """
        validate_key(key)
        return bool(self.get(key, nested_enabled, separator))

    def add(self, key: str, value: int | float, nested_enabled: bool | None = None, separator: str | None = None) -> None:
        """Add `value` to the number at `key`; an absent key starts from 0."""
        self._apply_amount(key, value, 1, nested_enabled, separator)
        logger.debug("ADD %s %s", key, value)

    def subtract(
        self,
        key: str,
        value: int | float,
        nested_enabled: bool | None = None,
        separator: str | None = None,
    ) -> None:
        """Subtract `value` from the number at `key`; an absent key starts from 0."""
        self._apply_amount(key, value, -1, nested_enabled, separator)
        logger.debug("SUBTRACT %s %s", key, value)

    def push(self, key: str, value: JsonValue, nested_enabled: bool | None = None, separator: str | None = None) -> None:
        """Append `value` to the array at `key`, creating `[value]` if the key is absent."""
        segments = self._segments(key, nested_enabled, separator)
        doc = self._load()
        parent = self._descend_creating(doc, segments, key)
        last = segments[-1]

        if last not in parent:
            parent[last] = [value]
        elif is_array(parent[last]):
            parent[last].append(value)
        else:
            raise NotAnArrayError(key, "push")

        self._save(doc)
        logger.debug("PUSH %s", key)

    def pull(
        self,
        key: str,
        callback_or_value: Predicate | Any,
        pull_all: bool = False,
        nested_enabled: bool | None = None,
        separator: str | None = None,
    ) -> bool:
        """
        Remove matching elements from the array at `key`.

        `callback_or_value` is either a predicate called as
        `predicate(element, index, array)` (fewer parameters are fine) or a
        value compared by equality. Only the first match is removed unless
        `pull_all` is set. Returns True if anything was removed; the file is
        written only in that case.
        """
        segments = self._segments(key, nested_enabled, separator)
        doc = self._load()

        parent: Any = doc
        for part in segments[:-1]:
            if part not in parent or not is_object(parent[part]):
                raise NotAnArrayError(key, "pull")
            parent = parent[part]

        last = segments[-1]
        if last not in parent or not is_array(parent[last]):
            raise NotAnArrayError(key, "pull")

        array: list[Any] = parent[last]
        match = _as_matcher(callback_or_value)

        if pull_all:
            indexes = [i for i, element in enumerate(array) if match(element, i, array)]
        else:
            indexes = next(([i] for i, element in enumerate(array) if match(element, i, array)), [])

        if not indexes:
            return False

        for i in reversed(indexes):
            del array[i]

        self._save(doc)
        logger.debug("PULL %s removed=%d", key, len(indexes))
        return True

    def all(self) -> list[Entry]:
        """Every top-level entry as `Entry(ID=key, data=value)`, in document order."""
        doc = self._load()
        return [Entry(ID=k, data=v) for k, v in doc.items()]

    def reset(self) -> None:
        """Overwrite the document with `{}`."""
        self._save({})
        logger.info("RESET %s", self.path)
