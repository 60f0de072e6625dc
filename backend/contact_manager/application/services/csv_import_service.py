"""CSV import service — bulk-creates contacts from an uploaded file."""

import logging

from contact_manager.application.interfaces import ContactFileReader
from contact_manager.application.services.contact_service import ContactService
from contact_manager.application.validators import ContactValidator
from contact_manager.domain.entities import ImportResult
from contact_manager.domain.exceptions import CsvParseError
from contact_manager.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

logger = logging.getLogger(__name__)
plog = PipelineLogger("CsvImportService")

# The header occupies row 1, so the first data record is row 2
_FIRST_DATA_ROW = 2


class CsvImportService:
    """Application service for the contact bulk-import pipeline.

    Pipeline: Parse whole file → for each row: Validate → Create (own commit)

    A parse failure aborts the import before anything is persisted. A row
    that fails validation is reported and skipped; rows around it are still
    imported, so a result can be a partial success.
    """

    def __init__(
        self,
        contact_service: ContactService,
        file_reader: ContactFileReader,
        validator: ContactValidator | None = None,
    ):
        self._contact_service = contact_service
        self._reader = file_reader
        self._validator = validator or ContactValidator()

    async def import_contacts(self, content: bytes, filename: str | None = None) -> ImportResult:
        """Import every valid row of ``content`` and report the invalid ones."""
        label = filename or "<upload>"
        result = ImportResult()

        plog.separator(f"Importing: {label}")
        plog.step_start(PipelineStage.UPLOAD, f"Received file '{label}'", size_bytes=len(content))

        if not content:
            plog.step_error(PipelineStage.ERROR, f"File '{label}' is empty")
            result.errors.append("File is empty.")
            return result

        try:
            with plog.timed_step(PipelineStage.PARSE, f"Parsing '{label}'"):
                records = self._reader.read(content)
        except CsvParseError as e:
            logger.warning("Import of '%s' aborted: %s", label, e)
            result.errors.append(f"CSV parsing error: {e}")
            return result

        plog.detail(f"Parsed {len(records)} data rows")

        for row_number, record in enumerate(records, start=_FIRST_DATA_ROW):
            validation = self._validator.validate(record)
            if not validation.is_valid:
                errors = ", ".join(validation.messages)
                plog.step_error(PipelineStage.VALIDATE, f"Row {row_number} rejected: {errors}")
                result.errors.append(f"Row {row_number} validation errors: {errors}")
                continue

            created = await self._contact_service.create_contact(record)
            result.imported_count += 1
            plog.detail(f"Row {row_number} imported", id=created.id)

        if result.success:
            plog.step_complete(
                PipelineStage.COMPLETE,
                f"Imported {result.imported_count} contacts from '{label}'",
            )
        else:
            plog.step_complete(
                PipelineStage.PERSIST,
                f"Imported {result.imported_count} contacts from '{label}'",
                rejected=len(result.errors),
            )
        return result
