"""
Infrastructure Gateway - Nomad Event Stream Client

This module maintains a long-lived subscription to the Nomad event stream
API. It reconnects after every transport failure, remote close or schema
error, waiting as long as the configured backoff policy asks, and only
stops when the task running it is cancelled.
"""

import asyncio
from enum import Enum
from typing import AsyncIterator, Awaitable, Callable, Dict, Optional

import httpx
import structlog

from overseer.domain.repositories.stream_cursor_repository import (
    IStreamCursorRepository,
)
from overseer.infrastructure.gateways.nomad.backoff import BackoffPolicy, FixedBackoff
from overseer.infrastructure.gateways.nomad.channel import bounded_channel
from overseer.infrastructure.gateways.nomad.decoder import StreamFrameDecoder
from overseer.infrastructure.gateways.nomad.errors import (
    EventSchemaError,
    NomadStreamError,
)
from overseer.infrastructure.gateways.nomad.models import NomadEvent, NomadStreamFrame

logger = structlog.get_logger(__name__)

EventHandler = Callable[[NomadEvent], Awaitable[None]]


class StreamState(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    STREAMING = "streaming"
    STOPPED = "stopped"


class NomadEventStreamClient:
    """Reconnecting client of ``GET /v1/event/stream``."""

    STREAM_PATH = "/v1/event/stream"
    TOKEN_HEADER = "X-Nomad-Token"

    def __init__(
        self,
        address: str,
        token: str = "",
        topic: str = "Job",
        backoff: Optional[BackoffPolicy] = None,
        connect_timeout: float = 10.0,
        queue_size: int = 10,
        cursor_repository: Optional[IStreamCursorRepository] = None,
        subscription_name: str = "overseer",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the stream client.

        Args:
            address: Base URL of the Nomad HTTP API (e.g., "http://nomad:4646")
            token: ACL token sent in the X-Nomad-Token header
            topic: Server-side topic filter
            backoff: Reconnect delay policy (fixed 5 seconds by default)
            connect_timeout: Seconds allowed to establish a connection
            queue_size: Capacity of the channel returned by ``open``
            cursor_repository: Where the last consumed index is persisted;
                without it the first connection starts at the live head and
                reconnections resume from the index held in memory
            subscription_name: Key of the persisted cursor
            transport: Optional httpx transport, mostly for tests
        """
        self.address = address.rstrip("/")
        self.token = token
        self.topic = topic
        self.backoff = backoff or FixedBackoff()
        self.connect_timeout = connect_timeout
        self.queue_size = queue_size
        self.cursor_repository = cursor_repository
        self.subscription_name = subscription_name
        self._transport = transport

        self._state = StreamState.DISCONNECTED
        self._failures = 0
        self._last_index: Optional[int] = None
        self._cursor_loaded = False

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def last_index(self) -> Optional[int]:
        """Index of the last frame fully handed to the handler."""
        return self._last_index

    def open(self) -> AsyncIterator[NomadEvent]:
        """
        Stream raw events through a bounded channel.

        The subscription runs in a background task for as long as the
        returned iterator is open.
        """
        return bounded_channel(self.run, self.queue_size)

    async def run(self, handler: EventHandler) -> None:
        """
        Consume the stream forever, awaiting ``handler`` for every event.

        Returns only through cancellation. ``EventSchemaError`` raised by
        the handler ends the current connection like a transport failure;
        the frame it came from counts as consumed, so the next connection
        resumes after it.
        """
        try:
            while True:
                try:
                    await self._consume(handler)
                    logger.warning(
                        "nomad.stream.closed_by_peer", last_index=self._last_index
                    )
                except (httpx.HTTPError, NomadStreamError, EventSchemaError) as e:
                    logger.error(
                        "nomad.stream.error",
                        error=str(e),
                        error_type=type(e).__name__,
                        last_index=self._last_index,
                    )
                except Exception as e:
                    logger.exception(
                        "nomad.stream.unexpected_error",
                        error=str(e),
                        error_type=type(e).__name__,
                    )

                self._state = StreamState.DISCONNECTED
                self._failures += 1
                delay = self.backoff.delay(self._failures)
                logger.info(
                    "nomad.stream.reconnecting",
                    delay_seconds=delay,
                    attempt=self._failures,
                )
                await asyncio.sleep(delay)
        finally:
            self._state = StreamState.STOPPED
            logger.info("nomad.stream.stopped", last_index=self._last_index)

    async def _consume(self, handler: EventHandler) -> None:
        self._state = StreamState.CONNECTING
        params = await self._build_params()
        headers = {self.TOKEN_HEADER: self.token}
        timeout = httpx.Timeout(self.connect_timeout, read=None)

        logger.info(
            "nomad.stream.connecting",
            address=self.address,
            topic=self.topic,
            index=params.get("index"),
        )

        async with httpx.AsyncClient(
            base_url=self.address, timeout=timeout, transport=self._transport
        ) as client:
            async with client.stream(
                "GET", self.STREAM_PATH, params=params, headers=headers
            ) as response:
                if response.status_code != httpx.codes.OK:
                    body = await response.aread()
                    raise NomadStreamError(
                        f"Nomad event stream returned HTTP {response.status_code}",
                        {
                            "status_code": response.status_code,
                            "body": body[:500].decode("utf-8", errors="replace"),
                        },
                    )

                self._state = StreamState.STREAMING
                self._failures = 0
                logger.info("nomad.stream.connected", address=self.address)

                decoder = StreamFrameDecoder()
                async for chunk in response.aiter_bytes():
                    for frame in decoder.feed(chunk):
                        await self._dispatch(frame, handler)
                for frame in decoder.flush():
                    await self._dispatch(frame, handler)

    async def _build_params(self) -> Dict[str, str]:
        if not self._cursor_loaded and self.cursor_repository is not None:
            stored = await self.cursor_repository.get(self.subscription_name)
            self._cursor_loaded = True
            if stored is not None and self._last_index is None:
                self._last_index = stored
                logger.info(
                    "nomad.stream.cursor_loaded",
                    subscription=self.subscription_name,
                    index=stored,
                )

        params = {"topic": self.topic}
        if self._last_index is not None:
            params["index"] = str(self._last_index + 1)
        return params

    async def _dispatch(self, frame: NomadStreamFrame, handler: EventHandler) -> None:
        for position, event in enumerate(frame.events):
            logger.debug(
                "nomad.stream.event",
                topic=event.topic,
                type=event.type,
                key=event.key,
                index=event.index,
            )
            try:
                await handler(event)
            except EventSchemaError:
                # Resuming at this frame would replay it forever.
                logger.error(
                    "nomad.stream.frame_skipped",
                    index=frame.index,
                    event_key=event.key,
                    dropped_events=len(frame.events) - position,
                )
                await self._advance(frame.index)
                raise

        await self._advance(frame.index)

    async def _advance(self, index: int) -> None:
        # Heartbeats carry no index.
        if index <= 0:
            return
        self._last_index = index
        if self.cursor_repository is not None:
            await self.cursor_repository.save(self.subscription_name, index)
