"""Application service (use case) for Contact operations."""

import logging
from collections.abc import Callable
from typing import Any

from contact_manager.application.converters import parse_bool, parse_date, parse_decimal
from contact_manager.application.interfaces import ContactRepository
from contact_manager.application.mapping import apply_dto, contact_to_dto, dto_to_contact
from contact_manager.application.schemas.contact import ContactDto
from contact_manager.application.validators import ContactValidator
from contact_manager.domain.entities import PagedResult, PaginationRequest
from contact_manager.domain.exceptions import (
    ContactValidationError,
    EntityNotFoundError,
    MalformedInputError,
    UnknownFieldError,
)

logger = logging.getLogger(__name__)


def _as_text(value: str) -> str:
    return value


# Normalised field token → (attribute name, text converter)
_FIELD_CONVERTERS: dict[str, tuple[str, Callable[[str], Any]]] = {
    "name": ("name", _as_text),
    "birthdate": ("birth_date", parse_date),
    "ismarried": ("is_married", parse_bool),
    "phonenumber": ("phone_number", _as_text),
    "salary": ("salary", parse_decimal),
}


def _normalise_field_token(token: str) -> str:
    """``BirthDate``, ``birth_date`` and ``birthDate`` all become ``birthdate``."""
    return token.strip().replace("_", "").replace("-", "").lower()


class ContactService:
    """Orchestrates contact CRUD logic. Depends on the repository port (DI).

    Validation is enforced here for every create and update path, so callers
    cannot persist an invalid contact by skipping a boundary-level check.
    """

    def __init__(
        self,
        repository: ContactRepository,
        validator: ContactValidator | None = None,
    ):
        self._repository = repository
        self._validator = validator or ContactValidator()

    async def list_contacts(self) -> list[ContactDto]:
        logger.debug("Getting all contacts")
        contacts = await self._repository.get_all()
        logger.debug("Repository returned %d contacts", len(contacts))
        return [contact_to_dto(c) for c in contacts]

    async def get_contacts_page(self, request: PaginationRequest) -> PagedResult[ContactDto]:
        logger.debug(
            "Getting contacts page %d (size %d)", request.page_number, request.page_size
        )
        page = await self._repository.get_page(request)
        result = PagedResult(
            items=[contact_to_dto(c) for c in page.items],
            total_count=page.total_count,
            page_number=page.page_number,
            page_size=page.page_size,
        )
        logger.info(
            "Retrieved page %d with %d of %d contacts",
            result.page_number,
            len(result.items),
            result.total_count,
        )
        return result

    async def get_contact(self, contact_id: int) -> ContactDto:
        """Fetch a contact for editing."""
        contact = await self._repository.get_by_id_tracked(contact_id)
        if contact is None:
            raise EntityNotFoundError("Contact", contact_id)
        return contact_to_dto(contact)

    async def create_contact(self, data: ContactDto) -> ContactDto:
        logger.debug("Creating contact with name '%s'", data.name)
        self._ensure_valid(data)

        contact = dto_to_contact(data)
        await self._repository.add(contact)
        await self._repository.save_changes()

        logger.info("Created contact with id %s and name '%s'", contact.id, contact.name)
        return contact_to_dto(contact)

    async def update_contact(self, contact_id: int, data: ContactDto) -> ContactDto:
        logger.debug("Updating contact %d", contact_id)
        self._ensure_valid(data)

        contact = await self._repository.get_by_id_tracked(contact_id)
        if contact is None:
            raise EntityNotFoundError("Contact", contact_id)

        apply_dto(contact, data)
        await self._repository.save_changes()

        logger.info("Updated contact %d", contact_id)
        return contact_to_dto(contact)

    async def update_contact_field(
        self, contact_id: int, field: str, value: str
    ) -> ContactDto:
        """Update one field from its text form.

        Raises:
            EntityNotFoundError: No contact has ``contact_id``.
            UnknownFieldError: ``field`` does not name a contact field.
            MalformedInputError: ``value`` cannot be converted to the field type.
            ContactValidationError: The converted value breaks the field's rules.
        """
        logger.debug("Updating field '%s' of contact %d", field, contact_id)

        contact = await self._repository.get_by_id_tracked(contact_id)
        if contact is None:
            raise EntityNotFoundError("Contact", contact_id)

        entry = _FIELD_CONVERTERS.get(_normalise_field_token(field))
        if entry is None:
            raise UnknownFieldError(field)
        attribute, convert = entry

        try:
            converted = convert(value)
        except ValueError as e:
            raise MalformedInputError(attribute, value, str(e)) from e

        candidate = contact_to_dto(contact).model_copy(update={attribute: converted})
        result = self._validator.validate(candidate, [attribute])
        if not result.is_valid:
            logger.info(
                "Rejected update of '%s' on contact %d: %s",
                attribute,
                contact_id,
                ", ".join(result.messages),
            )
            raise ContactValidationError(result.violations)

        setattr(contact, attribute, converted)
        await self._repository.save_changes()

        logger.info("Updated field '%s' of contact %d", attribute, contact_id)
        return contact_to_dto(contact)

    async def delete_contact(self, contact_id: int) -> None:
        logger.debug("Deleting contact %d", contact_id)

        contact = await self._repository.get_by_id(contact_id)
        if contact is None:
            raise EntityNotFoundError("Contact", contact_id)

        await self._repository.remove(contact)
        await self._repository.save_changes()

        logger.info("Deleted contact %d", contact_id)

    def _ensure_valid(self, data: ContactDto) -> None:
        result = self._validator.validate(data)
        if not result.is_valid:
            raise ContactValidationError(result.violations)
