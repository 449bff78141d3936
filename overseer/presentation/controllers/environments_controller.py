"""
Environments Router - Presentation Layer

This module defines the FastAPI router for environment endpoints.
"""

from typing import List

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from overseer.application.dtos.catalog_dto import (
    CatalogEntryCreateDTO,
    CatalogEntryDTO,
    CatalogEntryUpdateDTO,
    ReorderDTO,
)
from overseer.application.use_cases.catalog_use_cases import (
    CreateCatalogEntryUseCase,
    DeleteCatalogEntryUseCase,
    ListCatalogEntriesUseCase,
    ReorderCatalogEntriesUseCase,
    UpdateCatalogEntryUseCase,
)
from overseer.domain.entities.errors import (
    CatalogEntryNotFoundError,
    CatalogValidationError,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/environments", tags=["Environments"])


@router.get("/", response_model=List[CatalogEntryDTO])
@inject
async def get_environments(
    list_use_case: ListCatalogEntriesUseCase = Depends(
        Provide["list_environments_use_case"]
    ),
) -> List[CatalogEntryDTO]:
    """List environments in display order."""
    try:
        return await list_use_case.execute()
    except Exception as e:
        logger.error("Failed to list environments", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.post(
    "/", response_model=CatalogEntryDTO, status_code=status.HTTP_201_CREATED
)
@inject
async def create_environment(
    request: CatalogEntryCreateDTO,
    create_use_case: CreateCatalogEntryUseCase = Depends(
        Provide["create_environment_use_case"]
    ),
) -> CatalogEntryDTO:
    """Create an environment, placed after the existing ones."""
    try:
        return await create_use_case.execute(request)
    except CatalogValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error("Failed to create environment", name=request.name, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.post("/reorder", response_model=List[CatalogEntryDTO])
@inject
async def reorder_environments(
    request: ReorderDTO,
    reorder_use_case: ReorderCatalogEntriesUseCase = Depends(
        Provide["reorder_environments_use_case"]
    ),
) -> List[CatalogEntryDTO]:
    """Set the display order from a complete list of environment IDs."""
    try:
        return await reorder_use_case.execute(request)
    except CatalogValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error("Failed to reorder environments", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.put("/{environment_id}", response_model=CatalogEntryDTO)
@inject
async def update_environment(
    environment_id: int,
    request: CatalogEntryUpdateDTO,
    update_use_case: UpdateCatalogEntryUseCase = Depends(
        Provide["update_environment_use_case"]
    ),
) -> CatalogEntryDTO:
    """Rename an environment."""
    try:
        return await update_use_case.execute(environment_id, request)
    except CatalogEntryNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.error(
            "Failed to update environment",
            environment_id=environment_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.delete("/{environment_id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_environment(
    environment_id: int,
    delete_use_case: DeleteCatalogEntryUseCase = Depends(
        Provide["delete_environment_use_case"]
    ),
) -> None:
    """Delete an environment."""
    try:
        await delete_use_case.execute(environment_id)
    except CatalogEntryNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.error(
            "Failed to delete environment",
            environment_id=environment_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
