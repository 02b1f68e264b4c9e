"""Construction helpers for the canonical envelope shapes.

Every call site that builds an outcome should go through these so that
success, warning, failure and not-found look the same everywhere:

- success: ``succeeded=True``, 200, ``found=True``
- warning: ``succeeded=True``, 204
- failure: ``succeeded=False``, 400, ``can_continue=False``
- grid not-found: ``succeeded=True``, ``found=False``, 200 (the query
  ran and matched nothing; not a failure)

Functions returning a typed :class:`DataResult` do so when a ``data``
argument is supplied; otherwise they return a plain :class:`Result`.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from http import HTTPStatus
from typing import Any, TypeVar, overload

from opresult.results.grid import GridResult
from opresult.results.public import PublicDataResult, PublicResult
from opresult.results.result import MISSING, DataResult, Result

T = TypeVar("T")

# --- Result / DataResult ---


@overload
def success(message: str | None = None) -> Result: ...
@overload
def success(message: str | None = None, *, data: T) -> DataResult[T]: ...
def success(message: str | None = None, *, data: Any = MISSING) -> Result:
    """Succeeded envelope; a positional argument is always the message."""
    if data is MISSING:
        return Result().succeed(message)
    return DataResult().succeed(message, data=data)


def warning(message: str = "", *, data: T | None = None) -> DataResult[T]:
    return DataResult().warn(message, data=data)


@overload
def failure(
    message: str = "",
    exception: BaseException | None = None,
    *,
    can_continue: bool = False,
) -> Result: ...
@overload
def failure(
    message: str = "",
    exception: BaseException | None = None,
    *,
    data: T,
    can_continue: bool = False,
) -> DataResult[T]: ...
def failure(
    message: str = "",
    exception: BaseException | None = None,
    *,
    data: Any = MISSING,
    can_continue: bool = False,
) -> Result:
    if data is MISSING:
        return Result().fail(message, exception, can_continue=can_continue)
    return DataResult().fail(message, exception, can_continue=can_continue, data=data)


# --- PublicResult ---


def public_success(message: str | None = None, *, data: Any = MISSING) -> PublicResult:
    if data is MISSING:
        return PublicResult.from_result(success(message))
    return PublicDataResult.from_result(success(message, data=data))


def public_failure(
    message: str = "",
    exception: BaseException | None = None,
    *,
    data: Any = MISSING,
) -> PublicResult:
    if data is MISSING:
        return PublicResult.from_result(failure(message, exception))
    return PublicDataResult.from_result(failure(message, exception, data=data))


# --- GridResult ---


def grid_success(
    items: Iterable[T] | None,
    total: int | None = None,
    page: int | None = None,
    page_size: int | None = None,
    message: str | None = None,
) -> GridResult[T]:
    """Successful grid; ``found`` reflects whether any rows came back."""
    grid: GridResult[Any] = GridResult()
    grid.with_items(items)
    grid.with_counts(grid.row_count, total)
    grid.with_paging(page, page_size)
    grid.succeeded = True
    grid.found = grid.row_count > 0
    grid.status_code = HTTPStatus.OK
    if message and message.strip():
        grid.message = message
    return grid.sync_metadata()


def _empty_grid() -> GridResult[Any]:
    grid: GridResult[Any] = GridResult()
    grid.data = []
    grid.row_count = 0
    grid.total = 0
    grid.page = 1
    grid.page_size = 0
    grid.has_more = False
    return grid


def grid_failure(
    message: str = "",
    can_continue: bool = False,
    exception: BaseException | None = None,
) -> GridResult[Any]:
    grid = _empty_grid()
    grid.succeeded = False
    grid.can_continue = can_continue
    grid.status_code = HTTPStatus.BAD_REQUEST
    grid.message = message
    grid.exception = exception
    return grid.sync_metadata()


def grid_not_found(message: str | None = None) -> GridResult[Any]:
    grid = _empty_grid()
    grid.succeeded = True
    grid.found = False
    grid.status_code = HTTPStatus.OK
    grid.message = message
    return grid.sync_metadata()


def public_grid_success(
    items: Iterable[T] | None,
    total: int | None = None,
    page: int | None = None,
    page_size: int | None = None,
    message: str | None = None,
) -> PublicDataResult[Sequence[T]]:
    return PublicDataResult.from_result(grid_success(items, total, page, page_size, message))


def public_grid_failure(
    message: str = "",
    can_continue: bool = False,
    exception: BaseException | None = None,
) -> PublicDataResult[Sequence[Any]]:
    return PublicDataResult.from_result(grid_failure(message, can_continue, exception))


def public_grid_not_found(message: str | None = None) -> PublicDataResult[Sequence[Any]]:
    return PublicDataResult.from_result(grid_not_found(message))
