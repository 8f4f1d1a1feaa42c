"""Pagination primitives shared by repositories and use cases."""
import math
from dataclasses import dataclass, field
from typing import Callable, Generic, List, TypeVar

from app.domain.exceptions import InvalidArgumentError

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page index, page size and ascending sort field."""
    page: int
    size: int
    sort_by: str

    def __post_init__(self):
        if self.page is None or self.page < 0:
            raise InvalidArgumentError("Page index must not be negative")
        if self.size is None or self.size < 1:
            raise InvalidArgumentError("Page size must be at least 1")
        if not self.sort_by or not self.sort_by.strip():
            raise InvalidArgumentError("Sort field cannot be blank")

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    """One slice of a sorted result set plus total-count metadata."""
    content: List[T] = field(default_factory=list)
    page: int = 0
    size: int = 1
    total_elements: int = 0

    @property
    def total_pages(self) -> int:
        if self.total_elements == 0:
            return 0
        return math.ceil(self.total_elements / self.size)

    def map(self, fn: Callable[[T], R]) -> "Page[R]":
        return Page(
            content=[fn(item) for item in self.content],
            page=self.page,
            size=self.size,
            total_elements=self.total_elements,
        )
