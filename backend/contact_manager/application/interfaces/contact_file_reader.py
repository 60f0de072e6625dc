"""Abstract interface (port) for reading contacts out of an uploaded file."""

from abc import ABC, abstractmethod

from contact_manager.application.schemas.contact import ContactDto


class ContactFileReader(ABC):
    """Port for bulk-import file parsing — implemented in the infrastructure layer."""

    @abstractmethod
    def read(self, content: bytes) -> list[ContactDto]:
        """Parse the whole file into transfer records, in file order.

        Args:
            content: Raw bytes of the uploaded file.

        Returns:
            One ContactDto per data row.

        Raises:
            CsvParseError: If any part of the file is structurally invalid.
                No partial result is returned in that case.
        """
        ...
