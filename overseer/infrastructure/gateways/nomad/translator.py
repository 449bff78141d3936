"""
Nomad Job Event Translator - Infrastructure Layer

Turns raw Nomad events into normalized deployment events. Event payloads
are schema-on-read: the shape depends on the event type, and a task's
configuration depends on its driver. Both are dispatched through tables so
that every supported shape has its own explicit decode-or-skip branch.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional

import structlog
from pydantic import ValidationError

from overseer.domain.entities.deployment import DeploymentEvent, is_trackable_version
from overseer.infrastructure.gateways.nomad.errors import EventSchemaError
from overseer.infrastructure.gateways.nomad.models import (
    DockerDriverConfig,
    JobRegisteredPayload,
    NomadEvent,
    NomadTask,
)

logger = structlog.get_logger(__name__)

JOB_REGISTERED = "JobRegistered"
DOCKER_DRIVER = "docker"

_NANOSECONDS = 1_000_000_000

EventTranslation = Callable[[NomadEvent], List[DeploymentEvent]]
ImageReader = Callable[[NomadTask], Optional[str]]


def extract_image_version(image: str) -> str:
    """
    Return the tag of an image reference, or "" when it has none.

    The tag is whatever follows the last colon, so ``svc`` and ``svc:``
    have no tag while ``registry.example/svc:2.3.1`` has ``2.3.1``.
    """
    _, separator, tag = image.rpartition(":")
    return tag if separator else ""


def submit_time_to_datetime(submit_time: int) -> Optional[datetime]:
    """Convert a nanosecond epoch to an aware UTC datetime (None when unset)."""
    if submit_time <= 0:
        return None
    seconds, nanoseconds = divmod(submit_time, _NANOSECONDS)
    return datetime.fromtimestamp(seconds, tz=timezone.utc) + timedelta(
        microseconds=nanoseconds // 1000
    )


def deployment_name(namespace: str, job: str, task_group: str, task: str) -> str:
    return f"{namespace}.{job}.{task_group}.{task}"


class NomadJobEventTranslator:
    """Translate Nomad job events into deployment events."""

    def __init__(self) -> None:
        self._event_handlers: Dict[str, EventTranslation] = {
            JOB_REGISTERED: self._translate_job_registered,
        }
        self._image_readers: Dict[str, ImageReader] = {
            DOCKER_DRIVER: self._read_docker_image,
        }

    def translate(self, event: NomadEvent) -> List[DeploymentEvent]:
        """
        Translate one event into zero or more deployment events.

        Events of other types yield nothing. Tasks are visited in payload
        order and the result preserves that order.

        Raises:
            EventSchemaError: If a job payload cannot be decoded
        """
        handler = self._event_handlers.get(event.type)
        if handler is None:
            return []
        return handler(event)

    def _translate_job_registered(self, event: NomadEvent) -> List[DeploymentEvent]:
        try:
            payload = JobRegisteredPayload.model_validate(event.payload)
        except ValidationError as e:
            raise EventSchemaError(
                f"Could not decode {event.type} payload of event {event.key}",
                {"event_key": event.key, "index": event.index, "error": str(e)},
            ) from e

        job = payload.job
        deployed_at = submit_time_to_datetime(job.submit_time)
        events: List[DeploymentEvent] = []

        for task_group in job.task_groups:
            for task in task_group.tasks:
                read_image = self._image_readers.get(task.driver)
                if read_image is None:
                    continue

                image = read_image(task)
                if image is None:
                    continue

                name = deployment_name(
                    job.namespace, job.name, task_group.name, task.name
                )
                version = extract_image_version(image)
                if not is_trackable_version(version):
                    logger.warning(
                        "nomad.translate.unversioned_image",
                        deployment_name=name,
                        image=image,
                    )
                    continue

                events.append(
                    DeploymentEvent(
                        event_id=event.key,
                        deployment_name=name,
                        version=version,
                        deployed_at=deployed_at,
                    )
                )

        return events

    def _read_docker_image(self, task: NomadTask) -> Optional[str]:
        try:
            config = DockerDriverConfig.model_validate(task.config)
        except ValidationError as e:
            logger.error(
                "nomad.translate.driver_config_invalid",
                driver=task.driver,
                task=task.name,
                error=str(e),
            )
            return None
        return config.image
