"""Bounded, ordered hand-off between a producer task and an async consumer."""

import asyncio
from typing import AsyncIterator, Awaitable, Callable, Optional, TypeVar

T = TypeVar("T")

Emit = Callable[[T], Awaitable[None]]
Producer = Callable[[Emit], Awaitable[None]]


async def bounded_channel(producer: Producer, maxsize: int = 10) -> AsyncIterator[T]:
    """
    Run ``producer`` in its own task and yield what it emits, in order.

    ``producer`` receives an ``emit`` coroutine function that blocks while
    ``maxsize`` items are waiting. The iterator ends once the producer
    returns and its items are drained; a producer exception is re-raised
    to the consumer. Closing the iterator cancels the producer and waits
    for it to unwind.
    """
    queue: "asyncio.Queue[T]" = asyncio.Queue(maxsize=maxsize)
    task = asyncio.create_task(producer(queue.put))
    getter: Optional["asyncio.Future[T]"] = None

    try:
        while True:
            getter = asyncio.ensure_future(queue.get())
            done, _ = await asyncio.wait(
                {getter, task}, return_when=asyncio.FIRST_COMPLETED
            )
            if getter in done:
                item = getter.result()
                getter = None
                yield item
                continue

            getter.cancel()
            getter = None
            while not queue.empty():
                yield queue.get_nowait()
            task.result()
            return
    finally:
        if getter is not None:
            getter.cancel()
        if not task.done():
            task.cancel()
            await asyncio.wait([task])
