"""Shared fixtures for unit tests."""

import dataclasses
from datetime import date

import pytest

from contact_manager.application.interfaces import ContactRepository
from contact_manager.application.validators import ContactValidator
from contact_manager.domain.entities import Contact, PagedResult, PaginationRequest

TODAY = date(2026, 10, 19)


class FakeContactRepository(ContactRepository):
    """In-memory fake repository with the same unit-of-work semantics as the real one."""

    def __init__(self):
        self._rows: dict[int, Contact] = {}
        self._next_id = 1
        self._tracked: list[Contact] = []
        self._pending: list[Contact] = []
        self.save_count = 0

    def _sorted(self) -> list[Contact]:
        return sorted(self._rows.values(), key=lambda c: (c.name, c.id))

    async def get_all(self) -> list[Contact]:
        return [dataclasses.replace(c) for c in self._sorted()]

    async def get_page(self, request: PaginationRequest) -> PagedResult[Contact]:
        rows = self._sorted()
        window = rows[request.skip : request.skip + request.page_size]
        return PagedResult(
            items=[dataclasses.replace(c) for c in window],
            total_count=len(rows),
            page_number=request.page_number,
            page_size=request.page_size,
        )

    async def get_by_id(self, contact_id: int) -> Contact | None:
        row = self._rows.get(contact_id)
        return dataclasses.replace(row) if row else None

    async def get_by_id_tracked(self, contact_id: int) -> Contact | None:
        row = self._rows.get(contact_id)
        if row is None:
            return None
        entity = dataclasses.replace(row)
        self._tracked.append(entity)
        return entity

    async def add(self, contact: Contact) -> None:
        self._pending.append(contact)

    async def remove(self, contact: Contact) -> None:
        if contact.id not in self._rows:
            raise ValueError(f"Contact {contact.id} not found")
        del self._rows[contact.id]

    async def save_changes(self) -> None:
        self.save_count += 1
        for entity in self._tracked:
            if entity.id in self._rows:
                self._rows[entity.id] = dataclasses.replace(entity)
        for entity in self._pending:
            entity.id = self._next_id
            self._next_id += 1
            self._rows[entity.id] = dataclasses.replace(entity)
        self._tracked.clear()
        self._pending.clear()

    def stored(self, contact_id: int) -> Contact | None:
        """Committed state of a row, bypassing tracking."""
        return self._rows.get(contact_id)

    @property
    def count(self) -> int:
        return len(self._rows)


@pytest.fixture
def repository() -> FakeContactRepository:
    return FakeContactRepository()


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def validator(today: date) -> ContactValidator:
    return ContactValidator(today=lambda: today)
