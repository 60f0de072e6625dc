"""Abstract repository interface (port) for Contact persistence."""

from abc import ABC, abstractmethod

from contact_manager.domain.entities import Contact, PagedResult, PaginationRequest


class ContactRepository(ABC):
    """Port for contact persistence — implemented in the infrastructure layer.

    Mutations are staged on the repository's unit of work and only reach the
    store when :meth:`save_changes` is awaited.
    """

    @abstractmethod
    async def get_all(self) -> list[Contact]:
        """Retrieve every contact, ordered by name."""
        ...

    @abstractmethod
    async def get_page(self, request: PaginationRequest) -> PagedResult[Contact]:
        """Retrieve one page of contacts ordered by name, plus the total row count."""
        ...

    @abstractmethod
    async def get_by_id(self, contact_id: int) -> Contact | None:
        """Read-only lookup; changes to the returned entity are never saved."""
        ...

    @abstractmethod
    async def get_by_id_tracked(self, contact_id: int) -> Contact | None:
        """Lookup whose in-place changes are written by the next save_changes()."""
        ...

    @abstractmethod
    async def add(self, contact: Contact) -> None:
        """Stage a new contact for insertion. The id is assigned on save."""
        ...

    @abstractmethod
    async def remove(self, contact: Contact) -> None:
        """Stage an existing contact for deletion."""
        ...

    @abstractmethod
    async def save_changes(self) -> None:
        """Write all staged changes to the store and commit.

        The commit ends tracking: entities fetched or added before it are
        no longer watched by later saves.
        """
        ...
