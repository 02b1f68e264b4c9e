"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, opresult.toml only contains
overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from opresult.results.paging import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


class PagingConfig(BaseModel):
    """[paging] section."""

    model_config = {"frozen": True}

    default_page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True}

    include_exception: bool = False
    level: Literal["verbose", "information", "warning", "error", "critical"] = "error"
