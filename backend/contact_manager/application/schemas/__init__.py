from .contact import (
    ContactDto,
    ContactFieldUpdate,
    ContactPageResponse,
    ErrorResponse,
    FieldViolationSchema,
)
from .csv_import import CsvImportResultResponse

__all__ = [
    "ContactDto",
    "ContactFieldUpdate",
    "ContactPageResponse",
    "ErrorResponse",
    "FieldViolationSchema",
    "CsvImportResultResponse",
]
