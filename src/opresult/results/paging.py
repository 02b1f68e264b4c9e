"""Paging primitives: PagedResult (output) and PaginationParams (input).

Both are plain data holders with derived getters and no hidden state.
:class:`PaginationParams` is the canonical way to accept untrusted
page/size input: it normalizes rather than rejects, so callers that need
strict validation must call :meth:`PaginationParams.is_valid`.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Generic, Self, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")

MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 10


class PagedResult(BaseModel, Generic[T]):
    """A pre-paginated slice of a query, independent of any envelope."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    items: list[T] = Field(default_factory=list)
    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    total_count: int = Field(default=0, ge=0)

    @classmethod
    def create(
        cls,
        items: Iterable[T],
        total_count: int,
        page_number: int,
        page_size: int,
    ) -> Self:
        return cls(
            items=list(items),
            total_count=total_count,
            page_number=page_number,
            page_size=page_size,
        )

    @classmethod
    def empty(cls, page_number: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Self:
        return cls(items=[], total_count=0, page_number=page_number, page_size=page_size)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages

    @computed_field  # type: ignore[prop-decorator]
    @property
    def first_item_on_page(self) -> int:
        """1-based index of the first item shown, or 0 when there are none."""
        if self.total_count <= 0:
            return 0
        return (self.page_number - 1) * self.page_size + 1

    @computed_field  # type: ignore[prop-decorator]
    @property
    def last_item_on_page(self) -> int:
        return min(self.page_number * self.page_size, self.total_count)


class PaginationParams(BaseModel):
    """Requested page window.

    ``page_size`` is clamped to :data:`MAX_PAGE_SIZE` on construction and
    on assignment; a non-positive ``page_number`` becomes 1.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    page_number: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @field_validator("page_number")
    @classmethod
    def _normalize_page_number(cls, value: int) -> int:
        return value if value > 0 else 1

    @field_validator("page_size")
    @classmethod
    def _clamp_page_size(cls, value: int) -> int:
        return min(value, MAX_PAGE_SIZE)

    @property
    def skip(self) -> int:
        return (self.page_number - 1) * self.page_size

    @property
    def take(self) -> int:
        return self.page_size

    def is_valid(self) -> bool:
        return self.page_number > 0 and 0 < self.page_size <= MAX_PAGE_SIZE
