"""Tests for the canonical envelope builders."""

from __future__ import annotations

from http import HTTPStatus

import pytest

from opresult.results import factory
from opresult.results.grid import GridResult
from opresult.results.public import PublicDataResult, PublicResult
from opresult.results.result import DataResult, Result


class TestSuccess:
    def test_plain(self) -> None:
        result = factory.success()
        assert type(result) is Result
        assert result.succeeded is True
        assert result.status_code == HTTPStatus.OK
        assert result.found is True
        assert result.errors == []

    def test_with_message(self) -> None:
        assert factory.success(message="saved").message == "saved"

    def test_with_data(self) -> None:
        result = factory.success(data={"id": 1})
        assert isinstance(result, DataResult)
        assert result.data == {"id": 1}
        assert result.found is True

    def test_none_is_valid_data(self) -> None:
        assert isinstance(factory.success(data=None), DataResult)

    def test_positional_string_is_message(self) -> None:
        result = factory.success("Saved")
        assert type(result) is Result
        assert result.message == "Saved"

    def test_message_and_data(self) -> None:
        result = factory.success("Saved", data=5)
        assert result.message == "Saved"
        assert result.data == 5


class TestWarning:
    def test_defaults(self) -> None:
        result = factory.warning()
        assert result.succeeded is True
        assert result.status_code == HTTPStatus.NO_CONTENT
        assert result.message == ""

    def test_with_data(self) -> None:
        result = factory.warning("partial data", data=[1])
        assert result.data == [1]
        assert result.message == "partial data"

    def test_message_only(self) -> None:
        result = factory.warning("low stock")
        assert isinstance(result, DataResult)
        assert result.message == "low stock"
        assert result.data is None


class TestFailure:
    def test_message(self) -> None:
        result = factory.failure("boom")
        assert type(result) is Result
        assert result.succeeded is False
        assert result.status_code == HTTPStatus.BAD_REQUEST
        assert result.message == "boom"
        assert result.can_continue is False

    def test_exception(self) -> None:
        exc = ValueError("x")
        assert factory.failure("boom", exc).exception is exc

    def test_can_continue(self) -> None:
        assert factory.failure("boom", can_continue=True).can_continue is True

    def test_with_data(self) -> None:
        result = factory.failure("boom", data=[1, 2])
        assert isinstance(result, DataResult)
        assert result.data == [1, 2]

    def test_default_message_is_empty(self) -> None:
        assert factory.failure().message == ""


class TestPublic:
    def test_public_success(self) -> None:
        public = factory.public_success(message="ok")
        assert type(public) is PublicResult
        assert public.succeeded is True
        assert public.message == "ok"

    def test_public_success_with_data(self) -> None:
        public = factory.public_success(data=[1])
        assert isinstance(public, PublicDataResult)
        assert public.data == [1]

    def test_public_failure(self) -> None:
        public = factory.public_failure("bad", RuntimeError("hidden"))
        assert public.succeeded is False
        assert public.message == "bad"
        assert "hidden" not in public.to_json()

    def test_public_failure_with_data(self) -> None:
        public = factory.public_failure("bad", data={"field": "name"})
        assert isinstance(public, PublicDataResult)
        assert public.data == {"field": "name"}

    def test_public_failure_blank_message(self) -> None:
        assert factory.public_failure().message is None


class TestGridSuccess:
    def test_end_to_end(self) -> None:
        grid = factory.grid_success(["a", "b", "c"], total=10, page=1, page_size=3)
        assert isinstance(grid, GridResult)
        assert grid.row_count == 3
        assert grid.total == 10
        assert grid.has_more is True
        assert grid.succeeded is True
        assert grid.found is True
        assert grid.status_code == HTTPStatus.OK
        assert grid.metadata == {
            "rowCount": 3,
            "total": 10,
            "page": 1,
            "pageSize": 3,
            "hasMore": True,
        }

    def test_without_paging(self) -> None:
        grid = factory.grid_success([1, 2])
        assert grid.has_more is None
        assert grid.metadata == {"rowCount": 2}

    def test_zero_rows_is_success_not_found(self) -> None:
        grid = factory.grid_success([], total=0, page=1, page_size=10)
        assert grid.succeeded is True
        assert grid.found is False
        assert grid.has_more is False

    def test_message(self) -> None:
        assert factory.grid_success([1], message="loaded").message == "loaded"
        assert factory.grid_success([1], message="  ").message is None

    def test_generator_items(self) -> None:
        grid = factory.grid_success(x * 2 for x in range(3))
        assert grid.row_count == 3
        assert grid.data == [0, 2, 4]


class TestGridFailure:
    def test_shape(self) -> None:
        exc = RuntimeError("db")
        grid = factory.grid_failure("query failed", exception=exc)
        assert grid.succeeded is False
        assert grid.status_code == HTTPStatus.BAD_REQUEST
        assert grid.data == []
        assert grid.row_count == 0
        assert grid.total == 0
        assert grid.page == 1
        assert grid.page_size == 0
        assert grid.has_more is False
        assert grid.can_continue is False
        assert grid.exception is exc
        assert grid.message == "query failed"
        assert grid.metadata == {
            "rowCount": 0,
            "total": 0,
            "page": 1,
            "pageSize": 0,
            "hasMore": False,
        }

    def test_can_continue(self) -> None:
        assert factory.grid_failure(can_continue=True).can_continue is True


class TestGridNotFound:
    def test_shape(self) -> None:
        grid = factory.grid_not_found("nothing matched")
        assert grid.succeeded is True
        assert grid.found is False
        assert grid.status_code == HTTPStatus.OK
        assert grid.data == []
        assert grid.has_more is False
        assert grid.message == "nothing matched"

    def test_distinct_from_failure(self) -> None:
        assert factory.grid_not_found().succeeded != factory.grid_failure().succeeded


class TestPublicGrid:
    def test_success(self) -> None:
        public = factory.public_grid_success([1, 2], total=2, page=1, page_size=2)
        assert public.succeeded is True
        assert public.data == [1, 2]
        assert "rowCount" not in public.to_json()

    @pytest.mark.parametrize(
        ("public", "succeeded"),
        [
            (factory.public_grid_failure("x"), False),
            (factory.public_grid_not_found(), True),
        ],
    )
    def test_empty_outcomes(self, public: PublicDataResult, succeeded: bool) -> None:
        assert public.succeeded is succeeded
        assert public.data == []
