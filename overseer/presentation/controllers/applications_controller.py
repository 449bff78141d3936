"""
Applications Router - Presentation Layer

This module defines the FastAPI router for application endpoints.
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

router = APIRouter(prefix="/applications", tags=["Applications"])


@router.get("/", response_model=List[CatalogEntryDTO])
@inject
async def get_applications(
    list_use_case: ListCatalogEntriesUseCase = Depends(
        Provide["list_applications_use_case"]
    ),
) -> List[CatalogEntryDTO]:
    """List applications in display order."""
    try:
        return await list_use_case.execute()
    except Exception as e:
        logger.error("Failed to list applications", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.post(
    "/", response_model=CatalogEntryDTO, status_code=status.HTTP_201_CREATED
)
@inject
async def create_application(
    request: CatalogEntryCreateDTO,
    create_use_case: CreateCatalogEntryUseCase = Depends(
        Provide["create_application_use_case"]
    ),
) -> CatalogEntryDTO:
    """Create an application, placed after the existing ones."""
    try:
        return await create_use_case.execute(request)
    except CatalogValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error("Failed to create application", name=request.name, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.post("/reorder", response_model=List[CatalogEntryDTO])
@inject
async def reorder_applications(
    request: ReorderDTO,
    reorder_use_case: ReorderCatalogEntriesUseCase = Depends(
        Provide["reorder_applications_use_case"]
    ),
) -> List[CatalogEntryDTO]:
    """Set the display order from a complete list of application IDs."""
    try:
        return await reorder_use_case.execute(request)
    except CatalogValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error("Failed to reorder applications", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.put("/{application_id}", response_model=CatalogEntryDTO)
@inject
async def update_application(
    application_id: int,
    request: CatalogEntryUpdateDTO,
    update_use_case: UpdateCatalogEntryUseCase = Depends(
        Provide["update_application_use_case"]
    ),
) -> CatalogEntryDTO:
    """Rename an application."""
    try:
        return await update_use_case.execute(application_id, request)
    except CatalogEntryNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.error(
            "Failed to update application",
            application_id=application_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.delete("/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_application(
    application_id: int,
    delete_use_case: DeleteCatalogEntryUseCase = Depends(
        Provide["delete_application_use_case"]
    ),
) -> None:
    """Delete an application."""
    try:
        await delete_use_case.execute(application_id)
    except CatalogEntryNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.error(
            "Failed to delete application",
            application_id=application_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
