"""Validation outcome value objects."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FieldViolation:
    """A single broken rule: the offending field and a readable message."""

    field: str
    message: str


@dataclass
class ValidationResult:
    """Accumulates violations; valid while nothing has been added."""

    violations: list[FieldViolation] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.violations

    def add_error(self, field: str, message: str) -> None:
        self.violations.append(FieldViolation(field=field, message=message))

    @property
    def messages(self) -> list[str]:
        return [v.message for v in self.violations]
