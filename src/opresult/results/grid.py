"""GridResult — a query result set bundled with paging counters.

The typed fields (``row_count``, ``total``, ``page``, ``page_size``,
``has_more``) are the source of truth. ``metadata`` is a derived view
rebuilt by :meth:`GridResult.sync_metadata` at the end of every mutator,
so serializers and loggers can read the counters without knowing the type.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence, Sized
from typing import Any, Generic, Self, TypeVar

from opresult.results.result import DataResult

T = TypeVar("T")

# metadata key -> typed field
METADATA_KEYS: dict[str, str] = {
    "rowCount": "row_count",
    "total": "total",
    "page": "page",
    "pageSize": "page_size",
    "hasMore": "has_more",
}


def safe_count(items: Iterable[Any] | None) -> int:
    """Count *items*, using ``len`` when the size is known.

    One-shot iterables are consumed; callers that still need the items
    should materialize them first.
    """
    if items is None:
        return 0
    if isinstance(items, Sized):
        return len(items)
    return sum(1 for _ in items)


class GridResult(DataResult[Sequence[T]], Generic[T]):
    """Tabular query result: ``DataResult[Sequence[T]]`` plus paging state.

    ``has_more`` is None (unknown) unless ``total``, ``page`` and
    ``page_size`` are all known.
    """

    row_count: int = 0
    total: int | None = None
    page: int | None = None
    page_size: int | None = None
    has_more: bool | None = None

    @property
    def data_type(self) -> Any:
        args = self.__pydantic_generic_metadata__["args"]
        return Sequence[args[0]] if args else Sequence[Any]

    def _recompute_has_more(self) -> None:
        if self.total is None or self.page is None or self.page_size is None:
            self.has_more = None
            return
        shown = max(0, (self.page - 1) * self.page_size) + min(self.page_size, self.row_count)
        self.has_more = shown < self.total

    def _changed(self) -> Self:
        self._recompute_has_more()
        return self.sync_metadata()

    def with_items(self, items: Iterable[T] | None) -> Self:
        """Set the rows and infer ``row_count``.

        Non-sequence iterables are materialized exactly once.
        """
        if items is not None and not isinstance(items, Sequence):
            items = list(items)
        self.data = items
        self.row_count = len(items) if items is not None else 0
        return self._changed()

    def with_data(self, data: Iterable[T] | None) -> Self:  # type: ignore[override]
        return self.with_items(data)

    def with_counts(self, row_count: int, total: int | None = None) -> Self:
        self.row_count = row_count
        self.total = total
        return self._changed()

    def with_row_count(self, row_count: int) -> Self:
        self.row_count = row_count
        return self._changed()

    def with_total(self, total: int | None) -> Self:
        self.total = total
        return self._changed()

    def with_paging(self, page: int | None, page_size: int | None) -> Self:
        """Set 1-based *page* and *page_size*; recompute ``has_more``."""
        self.page = page
        self.page_size = page_size
        return self._changed()

    def with_grid_paging(self, page: int | None, page_size: int | None) -> Self:
        return self.with_paging(page, page_size)

    def sync_metadata(self) -> Self:
        """Rebuild the paging keys in ``metadata`` from the typed fields.

        ``rowCount`` is always written; other keys are written when their
        field is set and removed when it is None. Idempotent.
        """
        for key, field_name in METADATA_KEYS.items():
            value = getattr(self, field_name)
            if value is None:
                if self.metadata is not None:
                    self.metadata.pop(key, None)
            else:
                self.add_metadata(key, value)
        return self
