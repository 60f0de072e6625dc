"""Domain-specific exceptions — framework-independent."""

from contact_manager.domain.entities.validation import FieldViolation


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ContactValidationError(Exception):
    """Raised when a contact violates one or more field rules.

    Always carries the full list of violations, never just the first one.
    """

    def __init__(self, violations: list[FieldViolation]):
        self.violations = list(violations)
        joined = ", ".join(v.message for v in self.violations)
        super().__init__(f"Contact validation failed: {joined}")


class MalformedInputError(Exception):
    """Raised when a raw field value cannot be converted to its typed form."""

    def __init__(
        self,
        field: str,
        value: str,
        reason: str | None = None,
        message: str | None = None,
    ):
        self.field = field
        self.value = value
        if message is None:
            message = f"Value '{value}' is not valid for field '{field}'"
            if reason:
                message = f"{message}: {reason}"
        super().__init__(message)


class UnknownFieldError(MalformedInputError):
    """Raised when a single-field update names a field that does not exist."""

    def __init__(self, field: str):
        super().__init__(field, "", message=f"Unknown contact field '{field}'")


class CsvParseError(Exception):
    """Raised when an uploaded CSV file cannot be parsed as a whole."""

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message)
