"""Paging value objects shared by repositories and services."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PaginationRequest:
    """A 1-based page number and a page size."""

    page_number: int = 1
    page_size: int = 10

    def __post_init__(self) -> None:
        if self.page_number < 1:
            raise ValueError(f"page_number must be >= 1, got {self.page_number}")
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")

    @property
    def skip(self) -> int:
        """Zero-based number of rows to bypass before the page starts."""
        return (self.page_number - 1) * self.page_size


@dataclass
class PagedResult(Generic[T]):
    """One page of items plus the size of the full, unpaged set."""

    items: list[T] = field(default_factory=list)
    total_count: int = 0
    page_number: int = 1
    page_size: int = 10
