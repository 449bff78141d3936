from __future__ import annotations

import asyncio
import json
from typing import cast

import httpx
import pytest

from overseer.application.use_cases.version_stream_use_cases import (
    CorrelateDeploymentUseCase,
    RunVersionStreamUseCase,
)
from overseer.domain.entities.catalog import Instance
from overseer.infrastructure.database.mongo_database import MongoDatabase
from overseer.infrastructure.gateways.nomad import (
    FixedBackoff,
    NomadDeploymentEventSource,
    NomadEventStreamClient,
    NomadJobEventTranslator,
)
from overseer.infrastructure.repositories import (
    DeploymentRepository,
    InstanceRepository,
    StreamCursorRepository,
)
from overseer.infrastructure.services import MongoTargetRegistry
from tests.conftest import FakeMongoDatabase


def _job_frame(index: int, job: str, tasks: list[tuple[str, str]]) -> bytes:
    frame = {
        "Index": index,
        "Events": [
            {
                "Topic": "Job",
                "Type": "JobRegistered",
                "Key": job,
                "Namespace": "prod",
                "Index": index,
                "Payload": {
                    "Job": {
                        "Namespace": "prod",
                        "ID": job,
                        "Name": job,
                        "SubmitTime": 1700000000000000000,
                        "TaskGroups": [
                            {
                                "Name": "web",
                                "Tasks": [
                                    {
                                        "Name": name,
                                        "Driver": "docker",
                                        "Config": {"image": image},
                                    }
                                    for name, image in tasks
                                ],
                            }
                        ],
                    }
                },
            }
        ],
    }
    return (json.dumps(frame) + "\n").encode()


@pytest.mark.asyncio
async def test_nomad_events_register_versions_end_to_end():
    database = FakeMongoDatabase()
    mongo = cast(MongoDatabase, database)
    instances = InstanceRepository(mongo)
    deployments = DeploymentRepository(mongo)
    cursors = StreamCursorRepository(mongo)

    target = await instances.create(
        Instance(environment_id=1, application_id=1, name="prod.checkout.web.api")
    )

    body = b"".join(
        [
            _job_frame(
                10,
                "checkout",
                [("api", "registry.example/svc:2.3.1"), ("ui", "svc:latest")],
            ),
            b"{}\n",
            _job_frame(11, "billing", [("api", "billing:4.0.0")]),
        ]
    )
    served = []

    def nomad(request: httpx.Request) -> httpx.Response:
        served.append(request)
        if len(served) == 1:
            return httpx.Response(200, content=body)
        return httpx.Response(503)

    client = NomadEventStreamClient(
        "http://nomad:4646",
        backoff=FixedBackoff(0.01),
        transport=httpx.MockTransport(nomad),
        cursor_repository=cursors,
    )
    source = NomadDeploymentEventSource(client, NomadJobEventTranslator())
    registry = MongoTargetRegistry(instances, deployments)
    run = RunVersionStreamUseCase(source, CorrelateDeploymentUseCase(registry))

    task = asyncio.create_task(run.execute())
    try:
        for _ in range(200):
            if len(served) > 1 and await cursors.get("overseer") == 11:
                break
            await asyncio.sleep(0.01)
    finally:
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    stored = await deployments.find_all(instance_id=target.id)
    assert [(d.version, d.deployed_at.isoformat()) for d in stored] == [
        ("2.3.1", "2023-11-14T22:13:20+00:00")
    ]
    assert await cursors.get("overseer") == 11
    assert served[1].url.params["index"] == "12"
