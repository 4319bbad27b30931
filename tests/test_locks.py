"""
Tests for the per-key asyncio lock registry.
"""

import asyncio

from app.core.locks import KeyedLock


def test_same_key_is_serialized():
    locks = KeyedLock()
    events = []

    async def worker(name):
        async with locks.acquire(42):
            events.append(f"{name}-start")
            await asyncio.sleep(0.01)
            events.append(f"{name}-end")

    async def main():
        await asyncio.gather(worker("a"), worker("b"))

    asyncio.run(main())

    assert events == ["a-start", "a-end", "b-start", "b-end"]


def test_different_keys_run_concurrently():
    locks = KeyedLock()
    events = []

    async def worker(key):
        async with locks.acquire(key):
            events.append(f"{key}-start")
            await asyncio.sleep(0.01)
            events.append(f"{key}-end")

    async def main():
        await asyncio.gather(worker(1), worker(2))

    asyncio.run(main())

    assert events[:2] == ["1-start", "2-start"]


def test_registry_is_emptied_after_use():
    locks = KeyedLock()

    async def main():
        async with locks.acquire("personal-7"):
            assert locks.locked("personal-7")
            assert len(locks) == 1

    asyncio.run(main())

    assert len(locks) == 0
    assert not locks.locked("personal-7")


def test_lock_released_on_error():
    locks = KeyedLock()

    async def failing():
        async with locks.acquire(1):
            raise RuntimeError("write failed")

    async def main():
        try:
            await failing()
        except RuntimeError:
            pass
        async with locks.acquire(1):
            return "acquired"

    assert asyncio.run(main()) == "acquired"
    assert len(locks) == 0
