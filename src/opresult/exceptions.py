"""Application exception hierarchy.

Envelopes never raise these on their own; business code raises them,
catches them upstream, and stores the caught instance on
``Result.exception``. ``status_code`` lets an adapter pick the HTTP status
to report without inspecting the exception type.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any


class _CaseInsensitiveDict(dict[str, Any]):
    """Dict keyed by case-folded strings, preserving the last-written value."""

    def __setitem__(self, key: str, value: Any) -> None:
        super().__setitem__(key.casefold(), value)

    def __getitem__(self, key: str) -> Any:
        return super().__getitem__(key.casefold())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and super().__contains__(key.casefold())

    def __delitem__(self, key: str) -> None:
        super().__delitem__(key.casefold())

    def get(self, key: str, default: Any = None) -> Any:  # type: ignore[override]
        return super().get(key.casefold(), default)

    def pop(self, key: str, *default: Any) -> Any:  # type: ignore[override]
        return super().pop(key.casefold(), *default)

    def setdefault(self, key: str, default: Any = None) -> Any:  # type: ignore[override]
        return super().setdefault(key.casefold(), default)

    def update(self, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        for key, value in dict(*args, **kwargs).items():
            self[key] = value


class AppError(Exception):
    """Base class for errors raised by application code.

    Attributes:
        code: Machine-readable error code (``"error"`` when blank).
        status_code: Suggested HTTP status, or None.
        details: Free-form diagnostic text.
        correlation_id: Request correlation id, set via :meth:`with_correlation`.
        metadata: Case-insensitive extra context.
    """

    default_code = "error"

    def __init__(
        self,
        message: str = "An unexpected error has occurred.",
        code: str | None = None,
        status_code: HTTPStatus | int | None = None,
        details: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code if code and code.strip() else self.default_code
        self.status_code = HTTPStatus(status_code) if status_code is not None else None
        self.details = details
        self.correlation_id: str | None = None
        self.metadata: dict[str, Any] = _CaseInsensitiveDict()

    def with_correlation(self, correlation_id: str) -> AppError:
        self.correlation_id = correlation_id
        return self

    def with_meta(self, key: str, value: Any) -> AppError:
        """Attach a metadata entry. Blank keys are ignored."""
        if key and key.strip():
            self.metadata[key] = value
        return self


class DomainError(AppError):
    """A business rule was violated."""

    default_code = "domain_error"

    def __init__(self, message: str) -> None:
        super().__init__(message, self.default_code)


class ExternalServiceError(AppError):
    """A call to a third-party service failed."""

    default_code = "external_service_error"

    def __init__(
        self,
        provider: str | None,
        message: str,
        status_code: HTTPStatus | int,
        response_body: str | None = None,
    ) -> None:
        super().__init__(message, self.default_code, status_code)
        self.provider = provider or "external"
        self.response_body = response_body
