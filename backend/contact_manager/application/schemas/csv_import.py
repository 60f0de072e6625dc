"""Pydantic DTOs for the CSV bulk-import endpoint."""

from pydantic import BaseModel, Field


class CsvImportResultResponse(BaseModel):
    """Outcome of a bulk import: success flag plus per-row error strings."""

    success: bool
    imported_count: int = 0
    errors: list[str] = Field(default_factory=list)
