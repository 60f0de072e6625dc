"""Outcome of a bulk contact import."""

from dataclasses import dataclass, field


@dataclass
class ImportResult:
    """Per-row error strings collected while importing a file.

    ``success`` is derived: an import succeeded iff no error was recorded.
    Rows that passed validation were persisted even when ``success`` is False.
    """

    errors: list[str] = field(default_factory=list)
    imported_count: int = 0

    @property
    def success(self) -> bool:
        return not self.errors
