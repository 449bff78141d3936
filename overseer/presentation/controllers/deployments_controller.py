"""
Deployments Router - Presentation Layer

Read access to registered versions and manual registration.
"""

from typing import List, Optional

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Query, status

from overseer.application.dtos.deployment_dto import DeploymentCreateDTO, DeploymentDTO
from overseer.application.use_cases.deployment_use_cases import (
    GetDeploymentsUseCase,
    RegisterDeploymentUseCase,
)
from overseer.domain.entities.errors import (
    DeploymentRegistrationError,
    DeploymentValidationError,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/deployments", tags=["Deployments"])


@router.get("/", response_model=List[DeploymentDTO])
@inject
async def get_deployments(
    instance_id: Optional[int] = Query(None, gt=0, description="Filter by instance"),
    latest: bool = Query(False, description="Only the current version per instance"),
    skip: int = Query(0, ge=0, description="Number of registrations to skip"),
    limit: int = Query(
        100, ge=1, le=1000, description="Maximum number of registrations to return"
    ),
    get_deployments_use_case: GetDeploymentsUseCase = Depends(
        Provide["get_deployments_use_case"]
    ),
) -> List[DeploymentDTO]:
    """List registered versions, newest first."""
    try:
        return await get_deployments_use_case.execute(
            instance_id=instance_id, latest_only=latest, skip=skip, limit=limit
        )
    except Exception as e:
        logger.error("Failed to list deployments", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.post("/", response_model=DeploymentDTO, status_code=status.HTTP_201_CREATED)
@inject
async def register_deployment(
    request: DeploymentCreateDTO,
    register_deployment_use_case: RegisterDeploymentUseCase = Depends(
        Provide["register_deployment_use_case"]
    ),
) -> DeploymentDTO:
    """Register a version for an instance."""
    try:
        return await register_deployment_use_case.execute(request)
    except DeploymentValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DeploymentRegistrationError as e:
        logger.error(
            "Failed to register deployment",
            instance_id=request.instance_id,
            version=request.version,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Registration could not be stored",
        )
    except Exception as e:
        logger.error("Failed to register deployment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
