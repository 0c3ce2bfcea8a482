"""Per-key asyncio locks."""

import asyncio
from collections.abc import AsyncIterator, Hashable
from contextlib import asynccontextmanager


class KeyedLock:
    """A lazily grown family of asyncio locks, one per key.

    Used to make read-modify-write sequences on the in-memory store atomic
    with respect to other calls touching the same entity, while calls on
    different entities interleave freely.

    Keys are namespaced tuples, e.g. ("opinion", 3) or ("points", "alice").
    Entities are never deleted, so neither are their locks.
    """

    def __init__(self) -> None:
        self._locks: dict[Hashable, asyncio.Lock] = {}

    def _lock_for(self, key: Hashable) -> asyncio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock

    @asynccontextmanager
    async def hold(self, key: Hashable) -> AsyncIterator[None]:
        """Hold the lock for key for the duration of the block."""
        async with self._lock_for(key):
            yield

    def locked(self, key: Hashable) -> bool:
        """Whether the lock for key is currently held."""
        lock = self._locks.get(key)
        return lock is not None and lock.locked()

    def __len__(self) -> int:
        """Number of keys that have a lock."""
        return len(self._locks)
