"""Result and DataResult — the universal operation envelope.

INVARIANT: Internal operations return an envelope instead of raising.
Callers inspect ``succeeded``/``status_code``/``errors`` and branch; the
envelope only *stores* an exception that was already caught upstream.

``succeeded`` and ``status_code`` always move together: every status
mutator below sets both. Factory-built instances never pair
``succeeded=True`` with a populated ``errors`` list; direct mutation can.
"""

from __future__ import annotations

import functools
from collections.abc import Iterable, Sized
from http import HTTPStatus
from typing import Any, Final, Generic, Self, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_serializer,
    field_validator,
)
from pydantic.alias_generators import to_camel

from opresult.exceptions import AppError
from opresult.results.error import ResultError
from opresult.results.status import StatusCode

T = TypeVar("T")

MISSING: Final[Any] = object()
"""Sentinel for "argument not supplied" where None is a legal payload."""


class MetadataNotFoundError(KeyError):
    """Raised by :meth:`Result.get_metadata` when the key is absent."""


class MetadataCastError(TypeError):
    """Raised by :meth:`Result.get_metadata` when the stored value cannot convert."""


def require_result(result: Any, name: str = "result") -> None:
    """Guard for helpers that accept an envelope argument."""
    if result is None:
        msg = f"{name} must not be None"
        raise TypeError(msg)


@functools.lru_cache(maxsize=64)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def _convert(value: Any, target: Any) -> Any:
    if isinstance(target, type) and isinstance(value, target):
        return value
    if target is str:
        return str(value)
    return _adapter(target).validate_python(value)


class Result(BaseModel):
    """Outcome of an operation without a typed payload.

    Attributes:
        succeeded: Whether the operation completed without error.
        status_code: HTTP-style status; serialized by symbolic name.
        message: Human-readable summary.
        errors: Ordered, append-only list of discrete failures.
        exception: An exception caught upstream, kept for diagnostics.
        metadata: Free-form key/value data; None until the first write.
        found: Whether the queried record was located. Independent of
            ``succeeded``.
        can_continue: Whether the caller may proceed after this outcome.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    succeeded: bool = False
    status_code: StatusCode | None = None
    message: str | None = None
    errors: list[ResultError] = Field(default_factory=list)
    exception: BaseException | None = None
    metadata: dict[str, Any] | None = None
    found: bool = False
    can_continue: bool = True

    # --- serialization ---

    @field_validator("exception", mode="before")
    @classmethod
    def _revive_exception(cls, value: Any) -> Any:
        # Serialized exceptions come back as {"type", "message"} dicts.
        if isinstance(value, dict):
            return AppError(str(value.get("message", "")), details=value.get("type"))
        if isinstance(value, str):
            return AppError(value)
        return value

    @field_serializer("exception")
    def _serialize_exception(self, exc: BaseException | None) -> dict[str, str] | None:
        if exc is None:
            return None
        return {"type": type(exc).__name__, "message": str(exc)}

    def _empty_fields(self, *, include_exception: bool) -> set[str]:
        skip: set[str] = set()
        if self.message is None:
            skip.add("message")
        if not self.errors:
            skip.add("errors")
        if self.exception is None or not include_exception:
            skip.add("exception")
        if not self.metadata:
            skip.add("metadata")
        return skip

    def to_dict(self, *, include_exception: bool = True) -> dict[str, Any]:
        """JSON-compatible dict with null/empty optional fields omitted."""
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude=self._empty_fields(include_exception=include_exception),
        )

    def to_json(self, *, include_exception: bool = True, indent: int | None = None) -> str:
        """Serialize without mutating; ``include_exception=False`` strips the exception."""
        return self.model_dump_json(
            by_alias=True,
            indent=indent,
            exclude=self._empty_fields(include_exception=include_exception),
        )

    # --- derived ---

    @property
    def failed(self) -> bool:
        return not self.succeeded

    @property
    def message_with_errors(self) -> str | None:
        """Message plus comma-joined errors, for diagnostics. None on success."""
        if self.succeeded:
            return None
        return (self.message or "") + "\n" + ",".join(str(e) for e in self.errors)

    def get_message_or_error(self) -> str:
        """Return a newline-terminated failure summary, or ``""`` on success.

        Lines, in order: the message (when not blank), the error strings
        joined by ``" | "``, and the exception message.
        """
        if self.succeeded:
            return ""
        lines: list[str] = []
        if self.message and self.message.strip():
            lines.append(self.message)
        if self.errors:
            lines.append(" | ".join(e.error or "" for e in self.errors))
        if self.exception is not None:
            lines.append(str(self.exception))
        return "".join(f"{line}\n" for line in lines)

    # --- status transitions ---

    def _set_status(self, succeeded: bool, status: HTTPStatus) -> Self:
        self.succeeded = succeeded
        self.status_code = status
        return self

    def succeed(self, message: str | None = None) -> Self:
        """Mark as succeeded (200) and found; set *message* when given."""
        self._set_status(True, HTTPStatus.OK).register_found()
        if message is not None:
            self.message = message
        return self

    def fail(
        self,
        message: str | None = None,
        exception: BaseException | None = None,
        *,
        can_continue: bool | None = None,
    ) -> Self:
        """Mark as failed (400).

        *message*, *exception* and *can_continue* are only assigned when
        supplied.
        """
        self._set_status(False, HTTPStatus.BAD_REQUEST)
        if can_continue is not None:
            self.can_continue = can_continue
        if message is not None:
            self.message = message
        if exception is not None:
            self.exception = exception
        return self

    def not_found(self, message: str | None = None) -> Self:
        """Mark as failed with 404. Does not touch ``found``."""
        return self._set_status(False, HTTPStatus.NOT_FOUND).with_message(message)

    def internal_server_error(self) -> Self:
        return self._set_status(False, HTTPStatus.INTERNAL_SERVER_ERROR)

    def unauthorized(self) -> Self:
        return self._set_status(False, HTTPStatus.UNAUTHORIZED)

    def handle_service_error(self, message: str, exception: BaseException | None = None) -> Self:
        """Fail with *message* and replace the stored exception (even with None)."""
        return self.fail(message).with_exception(exception)

    # --- fluent field setters ---

    def with_message(self, message: str | None) -> Self:
        self.message = message
        return self

    def with_error(self, error: str | None, code: str | None = None) -> Self:
        """Append an error. Without a *code*, blank messages are skipped."""
        if code is None and not (error and error.strip()):
            return self
        self.add_error(error, code)
        return self

    def with_errors(self, errors: Iterable[ResultError] | None) -> Self:
        self.add_errors(errors)
        return self

    def with_exception(self, exception: BaseException | None) -> Self:
        self.exception = exception
        return self

    def register_found(self) -> Self:
        self.found = True
        return self

    def register_not_found(self) -> Self:
        self.found = False
        return self

    def allow_continue(self, can_continue: bool) -> Self:
        self.can_continue = can_continue
        return self

    def with_row_count(self, count: int) -> Self:
        self.add_metadata("rowCount", count)
        return self

    # --- errors & metadata ---

    def add_error(self, message: str | None, code: str | None = None) -> None:
        """Append an error as-is. No validation, no de-duplication."""
        self.errors.append(ResultError(error=message, code=code))

    def add_errors(self, errors: Iterable[ResultError] | None) -> None:
        if errors is None:
            return
        self.errors.extend(errors)

    def add_metadata(self, key: str, value: Any) -> None:
        """Store *value* under *key*; the last write wins.

        Raises:
            ValueError: If *key* is None or blank.
        """
        if key is None or not key.strip():
            msg = "Metadata key cannot be null or empty."
            raise ValueError(msg)
        if self.metadata is None:
            self.metadata = {}
        self.metadata[key] = value

    def get_metadata(self, key: str, as_type: Any = None) -> Any:
        """Return the value stored under *key*, converted to *as_type* when given.

        Conversion follows pydantic's lax rules (``"42"`` -> ``42``).

        Raises:
            ValueError: If *key* is None or blank.
            MetadataNotFoundError: If *key* is absent.
            MetadataCastError: If the value is None or cannot be converted.
        """
        if key is None or not key.strip():
            msg = "Metadata key cannot be null or empty."
            raise ValueError(msg)
        if self.metadata is None or key not in self.metadata:
            msg = f"Metadata item not found: {key}"
            raise MetadataNotFoundError(msg)
        value = self.metadata[key]
        if as_type is None:
            return value
        type_name = getattr(as_type, "__name__", str(as_type))
        if value is None:
            msg = f"Metadata value for key '{key}' is None and cannot be converted to {type_name}."
            raise MetadataCastError(msg)
        try:
            return _convert(value, as_type)
        except (ValidationError, TypeError, ValueError) as exc:
            msg = (
                f"Cannot convert metadata value for key '{key}' "
                f"from {type(value).__name__} to {type_name}."
            )
            raise MetadataCastError(msg) from exc


class DataResult(Result, Generic[T]):
    """:class:`Result` carrying a typed payload in ``data``."""

    data: T | None = None

    @property
    def data_type(self) -> Any:
        """The parametrized payload type, or ``Any`` when unparametrized."""
        args = self.__pydantic_generic_metadata__["args"]
        return args[0] if args else Any

    def succeed(self, message: str | None = None, *, data: Any = MISSING) -> Self:
        super().succeed(message)
        if data is not MISSING:
            self.data = data
        return self

    def fail(
        self,
        message: str | None = None,
        exception: BaseException | None = None,
        *,
        can_continue: bool | None = None,
        data: Any = MISSING,
    ) -> Self:
        super().fail(message, exception, can_continue=can_continue)
        if data is not MISSING:
            self.data = data
        return self

    def warn(self, message: str | None = "", *, data: Any = MISSING) -> Self:
        """Succeed with 204: a soft, non-blocking issue worth surfacing."""
        self._set_status(True, HTTPStatus.NO_CONTENT).with_message(message)
        if data is not MISSING:
            self.data = data
        return self

    def handle_service_error(self, message: str, exception: BaseException | None = None) -> Self:
        super().handle_service_error(message, exception)
        return self.with_data(None)

    def with_data(self, data: T | None) -> Self:
        self.data = data
        return self

    def with_row_count_from_data(self) -> Self:
        """Record ``rowCount`` metadata from the payload.

        Sized payloads are measured directly; other iterables are
        materialized once into a list, which replaces ``data``.
        """
        data: Any = self.data
        if data is None:
            return self
        if not isinstance(data, Sized):
            if not isinstance(data, Iterable):
                return self
            data = list(data)
            self.data = data
        return self.with_row_count(len(data))
