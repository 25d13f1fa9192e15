"""Tests for ServiceResult / ServiceError."""

import pytest

from gqlts.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_defaults(self) -> None:
        result = ServiceResult(ok=True, op="translate")
        assert result.data == {}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_failure_shorthand(self) -> None:
        result = ServiceResult.failure("fields", "UNKNOWN_TYPE", "Unknown type: Foo", type="Foo")
        assert result.ok is False
        assert result.error == ServiceError(
            code="UNKNOWN_TYPE", message="Unknown type: Foo", detail={"type": "Foo"}
        )

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="translate")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]

    def test_json_round_trip_shape(self) -> None:
        result = ServiceResult(ok=True, op="translate", data={"typescript": "string"})
        dumped = result.model_dump()
        assert dumped["data"] == {"typescript": "string"}
        assert dumped["ok"] is True
