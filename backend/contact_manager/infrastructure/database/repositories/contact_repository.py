"""Concrete repository implementation for Contact backed by SQLAlchemy."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from contact_manager.application.interfaces import ContactRepository
from contact_manager.domain.entities import Contact, PagedResult, PaginationRequest
from contact_manager.infrastructure.database.models import ContactModel


class SQLAlchemyContactRepository(ContactRepository):
    """Implements the ContactRepository port using SQLAlchemy async sessions.

    Domain entities handed out by :meth:`get_by_id_tracked` and accepted by
    :meth:`add` are remembered together with their ORM rows; :meth:`save_changes`
    copies entity state onto those rows, flushes, writes generated ids back
    and commits. Each commit ends the unit of work: entities must be fetched
    again to be changed again.
    """

    def __init__(self, session: AsyncSession):
        self._session = session
        self._tracked: list[tuple[Contact, ContactModel]] = []
        self._pending: list[tuple[Contact, ContactModel]] = []

    def _to_entity(self, model: ContactModel) -> Contact:
        """Map ORM model → domain entity."""
        return Contact(
            id=model.id,
            name=model.name,
            birth_date=model.birth_date,
            is_married=model.is_married,
            phone_number=model.phone_number,
            salary=model.salary,
        )

    def _to_model(self, entity: Contact) -> ContactModel:
        """Map domain entity → ORM model (for creation)."""
        return ContactModel(
            name=entity.name,
            birth_date=entity.birth_date,
            is_married=entity.is_married,
            phone_number=entity.phone_number,
            salary=entity.salary,
        )

    @staticmethod
    def _copy_to_model(entity: Contact, model: ContactModel) -> None:
        model.name = entity.name
        model.birth_date = entity.birth_date
        model.is_married = entity.is_married
        model.phone_number = entity.phone_number
        model.salary = entity.salary

    async def get_all(self) -> list[Contact]:
        stmt = select(ContactModel).order_by(ContactModel.name.asc(), ContactModel.id.asc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_page(self, request: PaginationRequest) -> PagedResult[Contact]:
        total_count = await self._session.scalar(
            select(func.count()).select_from(ContactModel)
        )

        stmt = (
            select(ContactModel)
            .order_by(ContactModel.name.asc(), ContactModel.id.asc())
            .offset(request.skip)
            .limit(request.page_size)
        )
        result = await self._session.execute(stmt)

        return PagedResult(
            items=[self._to_entity(row) for row in result.scalars().all()],
            total_count=total_count or 0,
            page_number=request.page_number,
            page_size=request.page_size,
        )

    async def get_by_id(self, contact_id: int) -> Contact | None:
        model = await self._session.get(ContactModel, contact_id)
        return self._to_entity(model) if model else None

    async def get_by_id_tracked(self, contact_id: int) -> Contact | None:
        model = await self._session.get(ContactModel, contact_id)
        if model is None:
            return None
        entity = self._to_entity(model)
        self._tracked.append((entity, model))
        return entity

    async def add(self, contact: Contact) -> None:
        model = self._to_model(contact)
        self._session.add(model)
        self._pending.append((contact, model))

    async def remove(self, contact: Contact) -> None:
        model = await self._session.get(ContactModel, contact.id)
        if model is None:
            raise ValueError(f"Contact {contact.id} not found in database")
        await self._session.delete(model)
        self._tracked = [(e, m) for e, m in self._tracked if m is not model]

    async def save_changes(self) -> None:
        for entity, model in self._tracked:
            self._copy_to_model(entity, model)
        await self._session.flush()

        for entity, model in self._pending:
            entity.id = model.id

        await self._session.commit()
        self._tracked.clear()
        self._pending.clear()
