"""PublicResult — the externally-safe projection of an envelope.

Only this shape reaches external clients. It drops the exception, the
status code and the metadata, and keeps the success flag, a non-blank
message, the non-blank error strings and (for the typed form) the data.
The conversion is one-way.
"""

from __future__ import annotations

from typing import Any, Generic, Self, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from opresult.results.result import DataResult, Result

T = TypeVar("T")


def _project(result: Result | None) -> dict[str, Any]:
    if result is None:
        return {"succeeded": False}
    message = result.message if result.message and result.message.strip() else None
    errors = [e.error for e in result.errors if e is not None and e.error and e.error.strip()]
    return {"succeeded": result.succeeded, "message": message, "errors": errors or None}


class PublicResult(BaseModel):
    """Projection of :class:`Result`. Build it with :meth:`from_result`."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    succeeded: bool = False
    message: str | None = None
    errors: list[str] | None = None

    @classmethod
    def from_result(cls, result: Result | None) -> Self:
        """Project *result*; a None envelope projects to a bare failure."""
        return cls(**_project(result))

    def _null_fields(self) -> set[str]:
        return {
            name
            for name in type(self).model_fields
            if name != "succeeded" and getattr(self, name) is None
        }

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible dict; null fields are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude=self._null_fields())

    def to_json(self, *, indent: int | None = None) -> str:
        return self.model_dump_json(by_alias=True, indent=indent, exclude=self._null_fields())


class PublicDataResult(PublicResult, Generic[T]):
    """Projection of :class:`DataResult`, keeping the payload."""

    data: T | None = None

    @classmethod
    def from_result(cls, result: Result | None) -> Self:
        fields = _project(result)
        if isinstance(result, DataResult):
            fields["data"] = result.data
        return cls(**fields)
