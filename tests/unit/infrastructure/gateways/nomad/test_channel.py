from __future__ import annotations

import asyncio

import pytest

from overseer.infrastructure.gateways.nomad.channel import bounded_channel


@pytest.mark.asyncio
async def test_items_are_yielded_in_emission_order() -> None:
    async def producer(emit) -> None:
        for item in range(5):
            await emit(item)

    assert [item async for item in bounded_channel(producer, maxsize=2)] == [
        0,
        1,
        2,
        3,
        4,
    ]


@pytest.mark.asyncio
async def test_producer_blocks_while_channel_is_full() -> None:
    emitted = 0

    async def producer(emit) -> None:
        nonlocal emitted
        for item in range(100):
            await emit(item)
            emitted += 1

    channel = bounded_channel(producer, maxsize=2)
    try:
        assert await channel.__anext__() == 0
        for _ in range(10):
            await asyncio.sleep(0)

        assert emitted <= 4
    finally:
        await channel.aclose()


@pytest.mark.asyncio
async def test_producer_error_reaches_consumer_after_pending_items() -> None:
    async def producer(emit) -> None:
        await emit("first")
        raise ValueError("stream broke")

    received = []
    with pytest.raises(ValueError, match="stream broke"):
        async for item in bounded_channel(producer):
            received.append(item)

    assert received == ["first"]


@pytest.mark.asyncio
async def test_closing_the_channel_cancels_the_producer() -> None:
    cancelled = asyncio.Event()

    async def producer(emit) -> None:
        try:
            while True:
                await emit("tick")
        except asyncio.CancelledError:
            cancelled.set()
            raise

    channel = bounded_channel(producer, maxsize=1)
    assert await channel.__anext__() == "tick"

    await channel.aclose()

    assert cancelled.is_set()
