"""Tests for the ServiceResult contract."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from git_drive.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_defaults(self) -> None:
        result = ServiceResult(ok=True, op="list_navigators")
        assert result.data == {}
        assert result.warnings == []
        assert result.error is None

    def test_failure_carries_error(self) -> None:
        error = ServiceError(code="NOT_FOUND", message="No navigator found for `x`")
        result = ServiceResult(ok=False, op="trailers", error=error)
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert result.error.detail == {}

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="x")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]

    def test_json_dump(self) -> None:
        result = ServiceResult(ok=True, op="trailers", data={"trailers": ["a"]}, warnings=["w"])
        parsed = json.loads(result.model_dump_json())
        assert parsed == {
            "ok": True,
            "op": "trailers",
            "data": {"trailers": ["a"]},
            "warnings": ["w"],
            "error": None,
        }
