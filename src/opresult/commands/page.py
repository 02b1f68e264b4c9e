"""Command: normalize paging input and show the resulting page window."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from opresult.commands._base import OprCommand

if TYPE_CHECKING:
    from opresult.commands._context import AppContext


@click.command(
    cls=OprCommand,
    examples="""\
  opresult page --page 2 --size 10 --total 25
  opresult page --page 0 --size 500
  opresult --json page --total 3""",
)
@click.option("--page", "page_number", type=int, default=1, help="1-based page number.")
@click.option("--size", "page_size", type=int, default=None, help="Items per page.")
@click.option("--total", type=int, default=0, help="Total items in the query.")
@click.pass_obj
def page(app: AppContext, page_number: int, page_size: int | None, total: int) -> None:
    """Clamp PAGE/SIZE like an API would and report the navigation window."""
    from opresult.results.factory import failure, success
    from opresult.results.paging import PagedResult, PaginationParams

    size = page_size if page_size is not None else app.settings.paging.default_page_size
    params = PaginationParams(page_number=page_number, page_size=size)
    if not params.is_valid():
        result = failure(f"Invalid paging parameters: page size {params.page_size}")
        result.add_error("Page size must be between 1 and 100.", "paging")
        app.emit(result)
        return
    if total < 0:
        result = failure("Invalid paging parameters: negative total")
        result.add_error("Total must not be negative.", "paging")
        app.emit(result)
        return

    window = PagedResult.create([], total, params.page_number, params.page_size)
    data = {
        "pageNumber": window.page_number,
        "pageSize": window.page_size,
        "skip": params.skip,
        "take": params.take,
        "totalCount": window.total_count,
        "totalPages": window.total_pages,
        "hasPreviousPage": window.has_previous_page,
        "hasNextPage": window.has_next_page,
        "firstItemOnPage": window.first_item_on_page,
        "lastItemOnPage": window.last_item_on_page,
    }
    app.emit(success(f"Page {window.page_number} of {window.total_pages}", data=data))
