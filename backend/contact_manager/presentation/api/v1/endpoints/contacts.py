"""Contact CRUD and bulk-import endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, UploadFile, status

from contact_manager.application.schemas import (
    ContactDto,
    ContactFieldUpdate,
    ContactPageResponse,
    CsvImportResultResponse,
    ErrorResponse,
    FieldViolationSchema,
)
from contact_manager.application.services import ContactService, CsvImportService
from contact_manager.config import get_settings
from contact_manager.domain.entities import PaginationRequest
from contact_manager.infrastructure.dependencies import (
    get_contact_service,
    get_csv_import_service,
)

logger = logging.getLogger(__name__)

settings = get_settings()

router = APIRouter(prefix="/contacts", tags=["Contacts"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
_INVALID = {status.HTTP_400_BAD_REQUEST: {"model": list[FieldViolationSchema]}}


@router.get("", response_model=ContactPageResponse)
async def list_contacts_page(
    page_number: int = Query(1, ge=1, alias="pageNumber"),
    page_size: int = Query(
        settings.default_page_size, ge=1, le=settings.max_page_size, alias="pageSize"
    ),
    service: ContactService = Depends(get_contact_service),
) -> ContactPageResponse:
    """Retrieve one page of contacts ordered by name."""
    logger.info("Retrieving contacts page %d (size %d)", page_number, page_size)
    page = await service.get_contacts_page(
        PaginationRequest(page_number=page_number, page_size=page_size)
    )
    return ContactPageResponse(
        items=page.items,
        total_count=page.total_count,
        page_number=page.page_number,
        page_size=page.page_size,
    )


@router.get("/all", response_model=list[ContactDto])
async def list_all_contacts(
    service: ContactService = Depends(get_contact_service),
) -> list[ContactDto]:
    """Retrieve every contact, unpaged."""
    return await service.list_contacts()


@router.get("/{contact_id}", response_model=ContactDto, responses=_NOT_FOUND)
async def get_contact(
    contact_id: int,
    service: ContactService = Depends(get_contact_service),
) -> ContactDto:
    """Retrieve a single contact by ID."""
    return await service.get_contact(contact_id)


@router.post(
    "",
    response_model=ContactDto,
    status_code=status.HTTP_201_CREATED,
    responses=_INVALID,
)
async def create_contact(
    data: ContactDto,
    service: ContactService = Depends(get_contact_service),
) -> ContactDto:
    """Create a new contact."""
    logger.info("Creating a new contact with name '%s'", data.name)
    return await service.create_contact(data)


@router.patch("/{contact_id}", response_model=ContactDto, responses={**_INVALID, **_NOT_FOUND})
async def update_contact(
    contact_id: int,
    data: ContactDto,
    service: ContactService = Depends(get_contact_service),
) -> ContactDto:
    """Overwrite every business field of an existing contact."""
    logger.info("Updating contact %d", contact_id)
    return await service.update_contact(contact_id, data)


@router.patch(
    "/{contact_id}/fields/{field}",
    response_model=ContactDto,
    responses={**_INVALID, **_NOT_FOUND},
)
async def update_contact_field(
    contact_id: int,
    field: str,
    body: ContactFieldUpdate,
    service: ContactService = Depends(get_contact_service),
) -> ContactDto:
    """Update a single field (Name, BirthDate, IsMarried, PhoneNumber or Salary)."""
    logger.info("Updating field '%s' of contact %d", field, contact_id)
    return await service.update_contact_field(contact_id, field, body.value)


@router.delete(
    "/{contact_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_NOT_FOUND,
)
async def delete_contact(
    contact_id: int,
    service: ContactService = Depends(get_contact_service),
) -> None:
    """Delete a contact by ID."""
    logger.info("Deleting contact %d", contact_id)
    await service.delete_contact(contact_id)


@router.post("/import", response_model=CsvImportResultResponse)
async def import_contacts(
    file: UploadFile,
    service: CsvImportService = Depends(get_csv_import_service),
) -> CsvImportResultResponse:
    """Bulk-create contacts from a comma-separated file with a header row."""
    content = await file.read()
    if len(content) > settings.max_upload_size_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File exceeds {settings.max_upload_size_mb} MB",
        )

    result = await service.import_contacts(content, file.filename)
    return CsvImportResultResponse(
        success=result.success,
        imported_count=result.imported_count,
        errors=result.errors,
    )
