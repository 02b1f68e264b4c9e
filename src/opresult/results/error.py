"""ResultError — one discrete failure carried by an envelope."""

from __future__ import annotations

from pydantic import BaseModel


class ResultError(BaseModel):
    """Immutable ``(error, code)`` pair."""

    model_config = {"frozen": True}

    error: str | None = None
    code: str | None = None

    def __str__(self) -> str:
        if self.code:
            return f"Error[{self.code}]: {self.error or ''}"
        return self.error or ""
