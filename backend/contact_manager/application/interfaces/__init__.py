from .contact_repository import ContactRepository
from .contact_file_reader import ContactFileReader

__all__ = [
    "ContactRepository",
    "ContactFileReader",
]
