from .contact import Contact
from .paging import PagedResult, PaginationRequest
from .validation import FieldViolation, ValidationResult
from .import_result import ImportResult

__all__ = [
    "Contact",
    "PagedResult",
    "PaginationRequest",
    "FieldViolation",
    "ValidationResult",
    "ImportResult",
]
