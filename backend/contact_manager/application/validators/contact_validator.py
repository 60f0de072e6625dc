"""Per-field validation rules for contact transfer records."""

import re
from collections.abc import Callable, Iterable
from datetime import date
from decimal import Decimal

from contact_manager.application.schemas.contact import ContactDto
from contact_manager.domain.entities import ValidationResult
from contact_manager.domain.exceptions import UnknownFieldError

NAME_MAX_LENGTH = 50
MAX_AGE_YEARS = 110

# Salary is stored as NUMERIC(18, 2)
SALARY_PRECISION = 18
SALARY_SCALE = 2
SALARY_LIMIT = Decimal(10) ** (SALARY_PRECISION - SALARY_SCALE)

# Optional leading plus, then 7 to 15 digits
PHONE_PATTERN = re.compile(r"\+?[0-9]{7,15}")


def years_before(day: date, years: int) -> date:
    """Return the same calendar day ``years`` earlier (Feb 29 → Feb 28)."""
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)


class ContactValidator:
    """Evaluates the fixed contact rule set.

    Rules are grouped per field so that a caller can check only some fields
    (single-field updates). Every violated rule is reported, not just the
    first one.

    Usage:
        validator = ContactValidator()
        result = validator.validate(dto)                    # all rules
        result = validator.validate(dto, ["salary"])        # one field
    """

    # Field → rule method mapping
    _RULES: dict[str, str] = {
        "name": "_check_name",
        "birth_date": "_check_birth_date",
        "phone_number": "_check_phone_number",
        "salary": "_check_salary",
    }

    def __init__(self, today: Callable[[], date] = date.today):
        self._today = today

    @property
    def fields(self) -> list[str]:
        """Names of all fields that carry rules."""
        return list(self._RULES)

    def validate(
        self,
        contact: ContactDto,
        fields: Iterable[str] | None = None,
    ) -> ValidationResult:
        """Check ``contact`` against all rules, or only those of ``fields``.

        Raises:
            UnknownFieldError: If ``fields`` names something that is not
                a contact field.
        """
        selected = self.fields if fields is None else list(fields)
        result = ValidationResult()
        for field_name in selected:
            method_name = self._RULES.get(field_name)
            if method_name is None:
                if field_name in ContactDto.model_fields:
                    continue  # e.g. is_married has no rules
                raise UnknownFieldError(field_name)
            getattr(self, method_name)(contact, result)
        return result

    # ── Rules ────────────────────────────────────────────────────────

    def _check_name(self, contact: ContactDto, result: ValidationResult) -> None:
        if not contact.name or not contact.name.strip():
            result.add_error("name", "Name is required")
        if len(contact.name) > NAME_MAX_LENGTH:
            result.add_error("name", f"Name cannot exceed {NAME_MAX_LENGTH} characters")

    def _check_birth_date(self, contact: ContactDto, result: ValidationResult) -> None:
        if contact.birth_date is None:
            result.add_error("birth_date", "BirthDate is required")
            return
        today = self._today()
        if contact.birth_date >= today:
            result.add_error("birth_date", "BirthDate must be in the past")
        if contact.birth_date <= years_before(today, MAX_AGE_YEARS):
            result.add_error("birth_date", "BirthDate is not valid")

    def _check_phone_number(self, contact: ContactDto, result: ValidationResult) -> None:
        if not contact.phone_number or not contact.phone_number.strip():
            result.add_error("phone_number", "Phone number is required")
        if PHONE_PATTERN.fullmatch(contact.phone_number) is None:
            result.add_error(
                "phone_number",
                "Phone number must contain only digits and optional leading + (7-15 chars)",
            )

    def _check_salary(self, contact: ContactDto, result: ValidationResult) -> None:
        salary = contact.salary
        if salary is None:
            result.add_error("salary", "Salary is required")
            return
        # A zero salary counts as missing and as out of range
        if salary == Decimal(0):
            result.add_error("salary", "Salary is required")
        if salary <= Decimal(0):
            result.add_error("salary", "Salary must be greater than 0")
        if -salary.normalize().as_tuple().exponent > SALARY_SCALE:
            result.add_error(
                "salary", f"Salary cannot have more than {SALARY_SCALE} decimal places"
            )
        if abs(salary) >= SALARY_LIMIT:
            result.add_error(
                "salary",
                f"Salary cannot exceed {SALARY_PRECISION - SALARY_SCALE} integer digits",
            )
