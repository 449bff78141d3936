"""
Version Stream Use Cases - Application Layer

Correlates deployment events observed on the orchestrator with known
deployment targets and registers the versions they run. Events are
handled one at a time, in the order the source yields them.
"""

from contextlib import aclosing

from overseer.domain.entities.deployment import DeploymentEvent
from overseer.domain.entities.errors import (
    AmbiguousDeploymentTargetError,
    DeploymentRegistrationError,
    DeploymentValidationError,
    TargetLookupError,
)
from overseer.domain.gateways.event_source import IDeploymentEventSource
from overseer.domain.ports.target_registry import ITargetRegistry
from overseer.shared import get_logger

logger = get_logger(__name__)


class CorrelateDeploymentUseCase:
    """Bind one deployment event to its target and register the version."""

    def __init__(self, target_registry: ITargetRegistry):
        self.target_registry = target_registry

    async def execute(self, event: DeploymentEvent) -> bool:
        """
        Correlate an event.

        Returns:
            True when a registration was stored, False when the event was
            dropped

        Raises:
            AmbiguousDeploymentTargetError: If several targets share the
                event's deployment name
        """
        try:
            targets = await self.target_registry.find_targets_by_deployment_name(
                event.deployment_name
            )
        except TargetLookupError as e:
            logger.error(
                "correlation.lookup_failed",
                event_id=event.event_id,
                deployment_name=event.deployment_name,
                version=event.version,
                error=e.message,
            )
            return False

        if not targets:
            logger.warning(
                "correlation.target_missing",
                detail=f"no target found for deployment {event.deployment_name}",
                event_id=event.event_id,
                deployment_name=event.deployment_name,
                version=event.version,
            )
            return False

        if len(targets) > 1:
            raise AmbiguousDeploymentTargetError(
                event.deployment_name, [target.id for target in targets]
            )

        target = targets[0]
        try:
            await self.target_registry.register(
                target.id, event.version, event.deployed_at
            )
        except (DeploymentRegistrationError, DeploymentValidationError) as e:
            logger.error(
                "correlation.registration_failed",
                event_id=event.event_id,
                deployment_name=event.deployment_name,
                instance_id=target.id,
                version=event.version,
                error=e.message,
            )
            return False

        logger.info(
            "correlation.registered",
            event_id=event.event_id,
            deployment_name=event.deployment_name,
            instance_id=target.id,
            version=event.version,
        )
        return True


class RunVersionStreamUseCase:
    """Drive the correlator with every event of a source until it ends."""

    def __init__(
        self,
        event_source: IDeploymentEventSource,
        correlate_deployment: CorrelateDeploymentUseCase,
    ):
        self.event_source = event_source
        self.correlate_deployment = correlate_deployment

    async def execute(self) -> int:
        """
        Consume the event source.

        Returns when the source is exhausted or the task is cancelled; the
        source is closed on every exit path. An ambiguous correlation is
        logged and re-raised so the caller stops the pipeline.

        Returns:
            Number of versions registered
        """
        registered = 0
        logger.info("version_stream.started")
        try:
            async with aclosing(self.event_source.stream_events()) as events:
                async for event in events:
                    if await self.correlate_deployment.execute(event):
                        registered += 1
        except AmbiguousDeploymentTargetError as e:
            logger.critical(
                "version_stream.ambiguous_target",
                deployment_name=e.deployment_name,
                instance_ids=e.target_ids,
                error=e.message,
            )
            raise
        finally:
            logger.info("version_stream.stopped", registered=registered)
        return registered
