from __future__ import annotations

import asyncio
from typing import Any

from .records import Entry
from .store import NestedJSONStore, Predicate


class AsyncNestedJSONStore:
    """
    Async wrapper around NestedJSONStore.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.

    Each call still performs its whole read-modify-write inside a single
    worker-thread call, so a mutation never yields halfway through.
    """

    def __init__(self, store: NestedJSONStore | None = None, **kwargs: Any) -> None:
        self._store = store if store is not None else NestedJSONStore(**kwargs)

    @property
    def store(self) -> NestedJSONStore:
        return self._store

    async def set(self, key: str, value: Any, nested_enabled: bool | None = None, separator: str | None = None) -> None:
        await asyncio.to_thread(self._store.set, key, value, nested_enabled, separator)

    async def get(self, key: str, nested_enabled: bool | None = None, separator: str | None = None) -> Any:
        return await asyncio.to_thread(self._store.get, key, nested_enabled, separator)

    async def fetch(self, key: str, nested_enabled: bool | None = None, separator: str | None = None) -> Any:
        return await asyncio.to_thread(self._store.fetch, key, nested_enabled, separator)

    async def delete(self, key: str, nested_enabled: bool | None = None, separator: str | None = None) -> bool:
        return await asyncio.to_thread(self._store.delete, key, nested_enabled, separator)

    async def has(self, key: str, nested_enabled: bool | None = None, separator: str | None = None) -> bool:
        return await asyncio.to_thread(self._store.has, key, nested_enabled, separator)

    async def add(
        self, key: str, value: int | float, nested_enabled: bool | None = None, separator: str | None = None
    ) -> None:
        await asyncio.to_thread(self._store.add, key, value, nested_enabled, separator)

    async def subtract(
        self, key: str, value: int | float, nested_enabled: bool | None = None, separator: str | None = None
    ) -> None:
        await asyncio.to_thread(self._store.subtract, key, value, nested_enabled, separator)

    async def push(self, key: str, value: Any, nested_enabled: bool | None = None, separator: str | None = None) -> None:
        await asyncio.to_thread(self._store.push, key, value, nested_enabled, separator)

    async def pull(
        self,
        key: str,
        callback_or_value: Predicate | Any,
        pull_all: bool = False,
        nested_enabled: bool | None = None,
        separator: str | None = None,
    ) -> bool:
        return await asyncio.to_thread(
            self._store.pull, key, callback_or_value, pull_all, nested_enabled, separator
        )

    async def all(self) -> list[Entry]:
        return await asyncio.to_thread(self._store.all)

    async def reset(self) -> None:
        await asyncio.to_thread(self._store.reset)
