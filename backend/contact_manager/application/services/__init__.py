from .contact_service import ContactService
from .csv_import_service import CsvImportService

__all__ = [
    "ContactService",
    "CsvImportService",
]
