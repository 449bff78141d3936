"""
Instances Router - Presentation Layer

Deployment targets. The instance name is the deployment name orchestrator
events are correlated with (``namespace.job.group.task`` for Nomad).
"""

from typing import List, Optional

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Query, status

from overseer.application.dtos.catalog_dto import (
    InstanceCreateDTO,
    InstanceDTO,
    InstanceUpdateDTO,
)
from overseer.application.use_cases.instance_use_cases import (
    CreateInstanceUseCase,
    GetInstancesUseCase,
    UpdateInstanceUseCase,
)
from overseer.domain.entities.errors import (
    CatalogEntryNotFoundError,
    CatalogValidationError,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/instances", tags=["Instances"])


@router.get("/", response_model=List[InstanceDTO])
@inject
async def get_instances(
    name: Optional[str] = Query(None, description="Exact deployment name"),
    get_instances_use_case: GetInstancesUseCase = Depends(
        Provide["get_instances_use_case"]
    ),
) -> List[InstanceDTO]:
    """List instances, optionally filtered by deployment name."""
    try:
        return await get_instances_use_case.execute(name=name)
    except Exception as e:
        logger.error("Failed to list instances", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.post("/", response_model=InstanceDTO, status_code=status.HTTP_201_CREATED)
@inject
async def create_instance(
    request: InstanceCreateDTO,
    create_instance_use_case: CreateInstanceUseCase = Depends(
        Provide["create_instance_use_case"]
    ),
) -> InstanceDTO:
    """
    Create an instance of an application in an environment.

    The name must be unique; events are attributed to at most one instance.
    """
    try:
        return await create_instance_use_case.execute(request)
    except CatalogEntryNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except CatalogValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error("Failed to create instance", name=request.name, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.put("/{instance_id}", response_model=InstanceDTO)
@inject
async def update_instance(
    instance_id: int,
    request: InstanceUpdateDTO,
    update_instance_use_case: UpdateInstanceUseCase = Depends(
        Provide["update_instance_use_case"]
    ),
) -> InstanceDTO:
    """Rename an instance or move it to another application or environment."""
    try:
        return await update_instance_use_case.execute(instance_id, request)
    except CatalogEntryNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except CatalogValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(
            "Failed to update instance", instance_id=instance_id, error=str(e)
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
