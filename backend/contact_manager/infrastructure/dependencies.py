"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from contact_manager.application.services import ContactService, CsvImportService
from contact_manager.application.validators import ContactValidator
from contact_manager.config import get_settings
from contact_manager.infrastructure.database.repositories import SQLAlchemyContactRepository
from contact_manager.infrastructure.database.session import get_db_session
from contact_manager.infrastructure.readers.contact_csv_reader import ContactCsvReader


def get_contact_validator() -> ContactValidator:
    """Provides the contact rule set."""
    return ContactValidator()


async def get_contact_service(
    session: AsyncSession = Depends(get_db_session),
    validator: ContactValidator = Depends(get_contact_validator),
) -> AsyncGenerator[ContactService, None]:
    """Provides a ContactService instance with its repository wired up."""
    repository = SQLAlchemyContactRepository(session)
    yield ContactService(repository, validator)


async def get_csv_import_service(
    contact_service: ContactService = Depends(get_contact_service),
    validator: ContactValidator = Depends(get_contact_validator),
) -> AsyncGenerator[CsvImportService, None]:
    """Provides a CsvImportService that creates contacts through the request's ContactService."""
    settings = get_settings()
    reader = ContactCsvReader(encoding=settings.csv_encoding)
    yield CsvImportService(
        contact_service=contact_service,
        file_reader=reader,
        validator=validator,
    )
