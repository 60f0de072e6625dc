"""Field-for-field mapping between ContactDto and the Contact entity."""

from contact_manager.application.schemas.contact import ContactDto
from contact_manager.domain.entities import Contact


def contact_to_dto(contact: Contact) -> ContactDto:
    """Map domain entity → transfer record (identifier included)."""
    return ContactDto(
        id=contact.id,
        name=contact.name,
        birth_date=contact.birth_date,
        is_married=contact.is_married,
        phone_number=contact.phone_number,
        salary=contact.salary,
    )


def dto_to_contact(dto: ContactDto) -> Contact:
    """Map transfer record → new domain entity.

    The client-supplied id is dropped; the store assigns one on insert.
    Only call this with a DTO that passed validation.
    """
    return Contact(
        name=dto.name,
        birth_date=dto.birth_date,
        is_married=dto.is_married,
        phone_number=dto.phone_number,
        salary=dto.salary,
    )


def apply_dto(contact: Contact, dto: ContactDto) -> None:
    """Overwrite every business field of ``contact`` from ``dto``."""
    contact.overwrite(
        name=dto.name,
        birth_date=dto.birth_date,
        is_married=dto.is_married,
        phone_number=dto.phone_number,
        salary=dto.salary,
    )
