"""Domain entity — pure Python business object for a stored contact."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass
class Contact:
    """Core domain entity for a single contact.

    The identifier is assigned by the store on insert and stays ``None``
    until the unit of work that added the contact has been saved.
    """

    name: str
    birth_date: date
    is_married: bool
    phone_number: str
    salary: Decimal
    id: int | None = None

    def overwrite(
        self,
        *,
        name: str,
        birth_date: date,
        is_married: bool,
        phone_number: str,
        salary: Decimal,
    ) -> None:
        """Replace every business field in place; the identifier is kept."""
        self.name = name
        self.birth_date = birth_date
        self.is_married = is_married
        self.phone_number = phone_number
        self.salary = salary
