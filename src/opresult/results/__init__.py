"""Operation-result envelopes.

Every internal operation returns one of these instead of raising. Callers
inspect ``succeeded``/``status_code``/``errors`` and branch; the API layer
projects the envelope to :class:`PublicResult` before it leaves the process.
"""

from opresult.results.error import ResultError
from opresult.results.grid import GridResult, safe_count
from opresult.results.paging import MAX_PAGE_SIZE, PagedResult, PaginationParams
from opresult.results.public import PublicDataResult, PublicResult
from opresult.results.result import (
    DataResult,
    MetadataCastError,
    MetadataNotFoundError,
    Result,
)

__all__ = [
    "MAX_PAGE_SIZE",
    "DataResult",
    "GridResult",
    "MetadataCastError",
    "MetadataNotFoundError",
    "PagedResult",
    "PaginationParams",
    "PublicDataResult",
    "PublicResult",
    "Result",
    "ResultError",
    "safe_count",
]
