"""opresult — uniform operation-result envelopes.

Import the envelope types from :mod:`opresult.results` and the canonical
builders from :mod:`opresult.results.factory`.
"""

from opresult.results import (
    DataResult,
    GridResult,
    PagedResult,
    PaginationParams,
    PublicDataResult,
    PublicResult,
    Result,
    ResultError,
)

__version__ = "0.3.0"

__all__ = [
    "DataResult",
    "GridResult",
    "PagedResult",
    "PaginationParams",
    "PublicDataResult",
    "PublicResult",
    "Result",
    "ResultError",
    "__version__",
]
