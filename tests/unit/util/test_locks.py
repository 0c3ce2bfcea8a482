"""Unit tests for KeyedLock."""

import asyncio

import pytest

from board.util.locks import KeyedLock


class TestKeyedLock:
    """Tests for KeyedLock."""

    @pytest.mark.asyncio
    async def test_same_key_serialises(self):
        """Blocks holding the same key never overlap."""
        locks = KeyedLock()
        events: list[str] = []

        async def worker(name: str) -> None:
            async with locks.hold(("opinion", 1)):
                events.append(f"{name}-start")
                await asyncio.sleep(0)
                events.append(f"{name}-end")

        await asyncio.gather(worker("a"), worker("b"))

        assert events == ["a-start", "a-end", "b-start", "b-end"]

    @pytest.mark.asyncio
    async def test_different_keys_interleave(self):
        """Blocks holding different keys run concurrently."""
        locks = KeyedLock()

        async with locks.hold(("opinion", 1)):
            assert locks.locked(("opinion", 1))
            assert not locks.locked(("opinion", 2))
            async with locks.hold(("opinion", 2)):
                assert locks.locked(("opinion", 2))

        assert not locks.locked(("opinion", 1))
