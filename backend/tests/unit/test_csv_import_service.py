"""Unit tests for the CsvImportService pipeline."""

import pytest

from contact_manager.application.services import ContactService, CsvImportService
from contact_manager.infrastructure.readers.contact_csv_reader import ContactCsvReader

HEADER = b"Name,BirthDate,IsMarried,PhoneNumber,Salary\n"


@pytest.fixture
def importer(repository, validator) -> CsvImportService:
    return CsvImportService(
        contact_service=ContactService(repository, validator),
        file_reader=ContactCsvReader(),
        validator=validator,
    )


@pytest.mark.asyncio
async def test_all_valid_rows_are_imported(importer: CsvImportService, repository):
    content = HEADER + b"Alice,1990-01-02,true,1234567,10\nBob,1991-03-04,false,7654321,20\n"

    result = await importer.import_contacts(content, "contacts.csv")

    assert result.success is True
    assert result.errors == []
    assert result.imported_count == 2
    assert repository.count == 2


@pytest.mark.asyncio
async def test_invalid_row_is_reported_and_others_imported(importer: CsvImportService, repository):
    content = (
        HEADER
        + b"Alice,1990-01-02,true,1234567,10\n"
        + b"Bob,1991-03-04,false,12ab,20\n"
        + b"Carol,1992-05-06,true,+380677777777,30\n"
    )

    result = await importer.import_contacts(content, "contacts.csv")

    assert result.success is False
    assert len(result.errors) == 1
    assert result.errors[0].startswith("Row 3 validation errors: ")
    assert "Phone number must contain only digits" in result.errors[0]
    assert result.imported_count == 2
    assert sorted(c.name for c in await repository.get_all()) == ["Alice", "Carol"]


@pytest.mark.asyncio
async def test_row_messages_are_joined(importer: CsvImportService):
    content = HEADER + b",1990-01-02,true,1234567,0\n"

    result = await importer.import_contacts(content)

    assert result.errors == [
        "Row 2 validation errors: Name is required, Salary is required, "
        "Salary must be greater than 0"
    ]


@pytest.mark.asyncio
async def test_each_valid_row_commits_on_its_own(importer: CsvImportService, repository):
    content = HEADER + b"A,1990-01-02,true,1234567,1\nB,1990-01-02,true,1234567,2\n"
    await importer.import_contacts(content)
    assert repository.save_count == 2


@pytest.mark.asyncio
async def test_empty_file_is_rejected(importer: CsvImportService, repository):
    result = await importer.import_contacts(b"", "empty.csv")
    assert result.success is False
    assert result.errors == ["File is empty."]
    assert repository.count == 0


@pytest.mark.asyncio
async def test_parse_error_aborts_whole_import(importer: CsvImportService, repository):
    content = (
        HEADER
        + b"Alice,1990-01-02,true,1234567,10\n"
        + b"Bob,not-a-date,false,7654321,20\n"
    )

    result = await importer.import_contacts(content)

    assert result.success is False
    assert len(result.errors) == 1
    assert result.errors[0].startswith("CSV parsing error: ")
    assert repository.count == 0


@pytest.mark.asyncio
async def test_header_only_file_succeeds_with_nothing_imported(importer: CsvImportService):
    result = await importer.import_contacts(HEADER)
    assert result.success is True
    assert result.imported_count == 0
