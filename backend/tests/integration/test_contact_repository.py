"""Integration tests for SQLAlchemyContactRepository against in-memory SQLite."""

from datetime import date
from decimal import Decimal

import pytest

from contact_manager.domain.entities import Contact, PaginationRequest
from contact_manager.infrastructure.database.repositories import SQLAlchemyContactRepository


def _contact(name: str, salary: str = "100.00") -> Contact:
    return Contact(
        name=name,
        birth_date=date(1990, 1, 2),
        is_married=True,
        phone_number="+380677777777",
        salary=Decimal(salary),
    )


@pytest.mark.asyncio
async def test_add_assigns_id_on_save(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyContactRepository(session)
        contact = _contact("Alice")
        await repo.add(contact)
        assert contact.id is None

        await repo.save_changes()
        assert contact.id is not None

    async with session_factory() as session:
        fetched = await SQLAlchemyContactRepository(session).get_by_id(contact.id)
    assert fetched == contact


@pytest.mark.asyncio
async def test_get_by_id_missing_returns_none(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyContactRepository(session)
        assert await repo.get_by_id(12345) is None
        assert await repo.get_by_id_tracked(12345) is None


@pytest.mark.asyncio
async def test_tracked_changes_are_saved(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyContactRepository(session)
        contact = _contact("Before")
        await repo.add(contact)
        await repo.save_changes()

    async with session_factory() as session:
        repo = SQLAlchemyContactRepository(session)
        tracked = await repo.get_by_id_tracked(contact.id)
        tracked.name = "After"
        tracked.salary = Decimal("555.55")
        await repo.save_changes()

    async with session_factory() as session:
        stored = await SQLAlchemyContactRepository(session).get_by_id(contact.id)
    assert stored.name == "After"
    assert stored.salary == Decimal("555.55")


@pytest.mark.asyncio
async def test_read_only_changes_are_not_saved(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyContactRepository(session)
        contact = _contact("Unchanged")
        await repo.add(contact)
        await repo.save_changes()

    async with session_factory() as session:
        repo = SQLAlchemyContactRepository(session)
        detached = await repo.get_by_id(contact.id)
        detached.name = "Changed"
        await repo.save_changes()

    async with session_factory() as session:
        stored = await SQLAlchemyContactRepository(session).get_by_id(contact.id)
    assert stored.name == "Unchanged"


@pytest.mark.asyncio
async def test_get_page_orders_by_name_and_counts_all(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyContactRepository(session)
        for name in ["Eve", "Dan", "Cid", "Bea", "Ann"]:
            await repo.add(_contact(name))
        await repo.save_changes()

        first = await repo.get_page(PaginationRequest(page_number=1, page_size=2))
        last = await repo.get_page(PaginationRequest(page_number=3, page_size=2))
        beyond = await repo.get_page(PaginationRequest(page_number=4, page_size=2))

    assert [c.name for c in first.items] == ["Ann", "Bea"]
    assert [c.name for c in last.items] == ["Eve"]
    assert beyond.items == []
    for page in (first, last, beyond):
        assert page.total_count == 5
        assert len(page.items) <= page.page_size


@pytest.mark.asyncio
async def test_get_all_orders_by_name(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyContactRepository(session)
        for name in ["Zed", "Amy", "Kim"]:
            await repo.add(_contact(name))
        await repo.save_changes()
        contacts = await repo.get_all()
    assert [c.name for c in contacts] == ["Amy", "Kim", "Zed"]


@pytest.mark.asyncio
async def test_remove_deletes_row(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyContactRepository(session)
        contact = _contact("Gone")
        await repo.add(contact)
        await repo.save_changes()

        await repo.remove(await repo.get_by_id(contact.id))
        await repo.save_changes()

        assert await repo.get_by_id(contact.id) is None


@pytest.mark.asyncio
async def test_save_changes_ends_tracking(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyContactRepository(session)
        added = _contact("Added")
        await repo.add(added)
        await repo.save_changes()

        tracked = await repo.get_by_id_tracked(added.id)
        tracked.name = "Renamed"
        await repo.save_changes()

        # Neither entity is watched any more
        added.name = "Stale add"
        tracked.name = "Stale fetch"
        await repo.save_changes()

    async with session_factory() as session:
        stored = await SQLAlchemyContactRepository(session).get_by_id(added.id)
    assert stored.name == "Renamed"


@pytest.mark.asyncio
async def test_repeated_saves_only_write_new_rows(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyContactRepository(session)
        first = _contact("First")
        await repo.add(first)
        await repo.save_changes()
        first.salary = Decimal("1.00")

        for index in range(50):
            await repo.add(_contact(f"Row {index:02d}"))
            await repo.save_changes()

        page = await repo.get_page(PaginationRequest(page_number=1, page_size=100))

    assert page.total_count == 51
    stored_first = next(c for c in page.items if c.id == first.id)
    assert stored_first.salary == Decimal("100.00")
