"""Tests for ca_common.errors and ca_common.response."""

from src.ca_common.errors import (
    AppError,
    BackendUnavailableError,
    CorruptEntryError,
    InvalidIdError,
    MissingFieldError,
    RecordNotFoundError,
    UnknownNamespaceError,
)
from src.ca_common.response import ApiResponse, error_response, success_response


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=9002, message="Internal error")
        assert err.code == 9002
        assert err.message == "Internal error"
        assert err.http_status == 500

    def test_is_exception(self) -> None:
        assert isinstance(AppError(code=1001, message="test"), Exception)


class TestSpecificErrors:
    def test_invalid_id(self) -> None:
        err = InvalidIdError("id must be >= 0, got -1")
        assert err.code == 1001
        assert err.http_status == 422
        assert "-1" in err.message

    def test_unknown_namespace(self) -> None:
        err = UnknownNamespaceError("dept")
        assert err.code == 1002
        assert err.http_status == 404

    def test_record_not_found(self) -> None:
        err = RecordNotFoundError("emp", 999)
        assert err.code == 2001
        assert err.http_status == 404
        assert "emp:999" in err.message

    def test_missing_field(self) -> None:
        err = MissingFieldError(["sal", "comm"], "schema mismatch")
        assert err.code == 3001
        assert err.fields == ["sal", "comm"]
        assert err.message == "Row is missing declared fields: sal, comm (schema mismatch)"

    def test_corrupt_entry(self) -> None:
        err = CorruptEntryError("emp:1", "missing fields job")
        assert err.code == 3002
        assert err.key == "emp:1"

    def test_backend_unavailable(self) -> None:
        err = BackendUnavailableError("cache", "connection reset")
        assert err.code == 9001
        assert err.http_status == 503
        assert err.message == "cache unavailable: connection reset"


class TestApiResponse:
    def test_success(self) -> None:
        resp = success_response({"key": "emp:1"})
        assert isinstance(resp, ApiResponse)
        assert resp.code == 0
        assert resp.data == {"key": "emp:1"}
        assert resp.request_id.startswith("req_")

    def test_error(self) -> None:
        resp = error_response(2001, "Record not found: emp:999")
        assert resp.code == 2001
        assert resp.data is None
