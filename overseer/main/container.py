"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application and the ingestion worker.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from overseer.application.models import SystemInfo
from overseer.application.use_cases.catalog_use_cases import (
    CreateCatalogEntryUseCase,
    DeleteCatalogEntryUseCase,
    ListCatalogEntriesUseCase,
    ReorderCatalogEntriesUseCase,
    UpdateCatalogEntryUseCase,
)
from overseer.application.use_cases.deployment_use_cases import (
    GetDeploymentsUseCase,
    RegisterDeploymentUseCase,
)
from overseer.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from overseer.application.use_cases.instance_use_cases import (
    CreateInstanceUseCase,
    GetInstancesUseCase,
    UpdateInstanceUseCase,
)
from overseer.application.use_cases.version_stream_use_cases import (
    CorrelateDeploymentUseCase,
    RunVersionStreamUseCase,
)
from overseer.infrastructure.database import MongoDatabase
from overseer.infrastructure.gateways.nomad import (
    ExponentialBackoff,
    FixedBackoff,
    IdleDeploymentEventSource,
    NomadDeploymentEventSource,
    NomadEventStreamClient,
    NomadJobEventTranslator,
)
from overseer.infrastructure.repositories import (
    ApplicationRepository,
    DeploymentRepository,
    EnvironmentRepository,
    InstanceRepository,
    StreamCursorRepository,
)
from overseer.infrastructure.services import HealthCheckService, MongoTargetRegistry
from overseer.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


def _enum_value(value):
    return value.value if hasattr(value, "value") else str(value)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Infrastructure
    mongo_database = providers.Singleton(
        MongoDatabase,
        mongo_uri=config.database.mongo_uri,
        db_name=config.database.database_name,
    )

    application_repository = providers.Singleton(
        ApplicationRepository, mongo_database=mongo_database
    )
    environment_repository = providers.Singleton(
        EnvironmentRepository, mongo_database=mongo_database
    )
    instance_repository = providers.Singleton(
        InstanceRepository, mongo_database=mongo_database
    )
    deployment_repository = providers.Singleton(
        DeploymentRepository, mongo_database=mongo_database
    )
    stream_cursor_repository = providers.Singleton(
        StreamCursorRepository, mongo_database=mongo_database
    )

    target_registry = providers.Singleton(
        MongoTargetRegistry,
        instance_repository=instance_repository,
        deployment_repository=deployment_repository,
    )

    # Nomad event stream
    backoff_policy = providers.Selector(
        providers.Callable(_enum_value, config.nomad.retry_strategy),
        fixed=providers.Factory(
            FixedBackoff, delay_seconds=config.nomad.retry_delay_seconds
        ),
        exponential=providers.Factory(
            ExponentialBackoff,
            initial_seconds=config.nomad.retry_delay_seconds,
            max_seconds=config.nomad.retry_max_delay_seconds,
            multiplier=config.nomad.retry_multiplier,
            jitter=config.nomad.retry_jitter,
        ),
    )

    nomad_stream_client = providers.Singleton(
        NomadEventStreamClient,
        address=config.nomad.address,
        token=config.nomad.token,
        topic=config.nomad.topic,
        backoff=backoff_policy,
        connect_timeout=config.nomad.connect_timeout_seconds,
        queue_size=config.nomad.queue_size,
        cursor_repository=providers.Callable(
            lambda resume, repository: repository if resume else None,
            config.nomad.resume_from_cursor,
            stream_cursor_repository,
        ),
        subscription_name=config.nomad.subscription_name,
    )

    nomad_job_event_translator = providers.Singleton(NomadJobEventTranslator)

    deployment_event_source = providers.Selector(
        providers.Callable(
            lambda enabled: "nomad" if enabled else "idle", config.nomad.enabled
        ),
        nomad=providers.Singleton(
            NomadDeploymentEventSource,
            client=nomad_stream_client,
            translator=nomad_job_event_translator,
            queue_size=config.nomad.queue_size,
        ),
        idle=providers.Singleton(IdleDeploymentEventSource),
    )

    # Application (use cases)
    list_applications_use_case = providers.Factory(
        ListCatalogEntriesUseCase,
        repository=application_repository,
        entry_type="application",
    )
    create_application_use_case = providers.Factory(
        CreateCatalogEntryUseCase,
        repository=application_repository,
        entry_type="application",
    )
    update_application_use_case = providers.Factory(
        UpdateCatalogEntryUseCase,
        repository=application_repository,
        entry_type="application",
    )
    delete_application_use_case = providers.Factory(
        DeleteCatalogEntryUseCase,
        repository=application_repository,
        entry_type="application",
    )
    reorder_applications_use_case = providers.Factory(
        ReorderCatalogEntriesUseCase,
        repository=application_repository,
        entry_type="application",
    )

    list_environments_use_case = providers.Factory(
        ListCatalogEntriesUseCase,
        repository=environment_repository,
        entry_type="environment",
    )
    create_environment_use_case = providers.Factory(
        CreateCatalogEntryUseCase,
        repository=environment_repository,
        entry_type="environment",
    )
    update_environment_use_case = providers.Factory(
        UpdateCatalogEntryUseCase,
        repository=environment_repository,
        entry_type="environment",
    )
    delete_environment_use_case = providers.Factory(
        DeleteCatalogEntryUseCase,
        repository=environment_repository,
        entry_type="environment",
    )
    reorder_environments_use_case = providers.Factory(
        ReorderCatalogEntriesUseCase,
        repository=environment_repository,
        entry_type="environment",
    )

    get_instances_use_case = providers.Factory(
        GetInstancesUseCase,
        instance_repository=instance_repository,
    )
    create_instance_use_case = providers.Factory(
        CreateInstanceUseCase,
        instance_repository=instance_repository,
        application_repository=application_repository,
        environment_repository=environment_repository,
    )
    update_instance_use_case = providers.Factory(
        UpdateInstanceUseCase,
        instance_repository=instance_repository,
        application_repository=application_repository,
        environment_repository=environment_repository,
    )

    get_deployments_use_case = providers.Factory(
        GetDeploymentsUseCase,
        deployment_repository=deployment_repository,
    )
    register_deployment_use_case = providers.Factory(
        RegisterDeploymentUseCase,
        target_registry=target_registry,
    )

    correlate_deployment_use_case = providers.Factory(
        CorrelateDeploymentUseCase,
        target_registry=target_registry,
    )
    run_version_stream_use_case = providers.Factory(
        RunVersionStreamUseCase,
        event_source=deployment_event_source,
        correlate_deployment=correlate_deployment_use_case,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        mongo_database=mongo_database,
        nomad_address=config.nomad.address,
        nomad_token=config.nomad.token,
        nomad_enabled=config.nomad.enabled,
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.api.title,
        description=config.api.description,
        version=config.api.version,
        environment=providers.Callable(_enum_value, config.environment),
        git_commit=config.api.git_commit,
        build_time=config.api.build_time,
        nomad_enabled=config.nomad.enabled,
        nomad_address=config.nomad.address,
        nomad_topic=config.nomad.topic,
        database_name=config.database.database_name,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        health_check_service=health_check_service,
        system_info=system_info,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Manage the MongoDB connection for the lifetime of a process.

    Used by the FastAPI lifespan and by the ingestion worker: indexes are
    created on entry and the client is closed on exit.
    """
    container = get_container()
    mongo_database = container.mongo_database()

    try:
        logger.info("container.mongo.ensure_connection")
        await mongo_database.create_indexes()
        logger.info("container.resources.initialized")
        yield container
    finally:
        logger.info("container.mongo.close")
        mongo_database.close()
        logger.info("container.resources.shutdown")
