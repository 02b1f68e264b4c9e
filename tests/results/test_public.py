"""Tests for the public projection."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from opresult.results.public import PublicDataResult, PublicResult
from opresult.results.result import DataResult, Result


def _internal_failure() -> DataResult[list[int]]:
    result = DataResult[list[int]]().fail("bad", RuntimeError("secret"), data=[1])
    result.add_error("first", "E1")
    result.add_error("  ")
    result.add_error(None)
    result.add_error("second")
    result.add_metadata("rowCount", 1)
    return result


class TestPublicResult:
    def test_drops_internal_fields(self) -> None:
        public = PublicResult.from_result(_internal_failure())
        dumped = public.to_dict()
        assert set(dumped) == {"succeeded", "message", "errors"}
        assert dumped["succeeded"] is False
        assert dumped["message"] == "bad"

    def test_keeps_only_non_blank_error_strings(self) -> None:
        public = PublicResult.from_result(_internal_failure())
        assert public.errors == ["first", "second"]

    def test_empty_errors_collapse_to_none(self) -> None:
        public = PublicResult.from_result(Result().succeed("ok"))
        assert public.errors is None
        assert "errors" not in json.loads(public.to_json())

    def test_blank_message_becomes_none(self) -> None:
        public = PublicResult.from_result(Result().fail("   "))
        assert public.message is None
        assert public.to_dict() == {"succeeded": False}

    def test_none_envelope(self) -> None:
        public = PublicResult.from_result(None)
        assert public.succeeded is False
        assert public.message is None
        assert public.errors is None

    def test_frozen(self) -> None:
        public = PublicResult.from_result(Result().succeed())
        with pytest.raises(ValidationError):
            public.succeeded = False  # type: ignore[misc]


class TestPublicDataResult:
    def test_keeps_data(self) -> None:
        public = PublicDataResult[list[int]].from_result(_internal_failure())
        assert public.data == [1]
        assert set(public.to_dict()) == {"succeeded", "message", "errors", "data"}

    def test_null_data_omitted(self) -> None:
        public = PublicDataResult[int].from_result(DataResult[int]().succeed())
        assert public.to_dict() == {"succeeded": True}

    def test_plain_result_has_no_data(self) -> None:
        public = PublicDataResult.from_result(Result().succeed("x"))
        assert public.data is None

    def test_never_exposes_exception_or_status(self) -> None:
        raw = PublicDataResult.from_result(_internal_failure()).to_json()
        assert "secret" not in raw
        assert "statusCode" not in raw
        assert "metadata" not in raw
