"""
Deployment Event Sources - Infrastructure Layer

Implementations of the deployment event source port. The Nomad source runs
translation inline in the stream client's task so that a schema error
unwinds the connection it was read from.
"""

import asyncio
from typing import AsyncIterator

import structlog

from overseer.domain.entities.deployment import DeploymentEvent
from overseer.domain.gateways.event_source import IDeploymentEventSource
from overseer.infrastructure.gateways.nomad.channel import Emit, bounded_channel
from overseer.infrastructure.gateways.nomad.models import NomadEvent
from overseer.infrastructure.gateways.nomad.stream_client import (
    NomadEventStreamClient,
)
from overseer.infrastructure.gateways.nomad.translator import NomadJobEventTranslator

logger = structlog.get_logger(__name__)


class NomadDeploymentEventSource(IDeploymentEventSource):
    """Deployment events observed on a Nomad cluster."""

    def __init__(
        self,
        client: NomadEventStreamClient,
        translator: NomadJobEventTranslator,
        queue_size: int = 10,
    ):
        self.client = client
        self.translator = translator
        self.queue_size = queue_size

    def stream_events(self) -> AsyncIterator[DeploymentEvent]:
        return bounded_channel(self._produce, self.queue_size)

    async def _produce(self, emit: Emit) -> None:
        async def handle(event: NomadEvent) -> None:
            for deployment_event in self.translator.translate(event):
                await emit(deployment_event)

        await self.client.run(handle)


class IdleDeploymentEventSource(IDeploymentEventSource):
    """A source that never yields; used when no orchestrator is configured."""

    def stream_events(self) -> AsyncIterator[DeploymentEvent]:
        return bounded_channel(self._wait_forever, 1)

    async def _wait_forever(self, emit: Emit) -> None:
        logger.info("event_source.idle")
        await asyncio.Event().wait()
