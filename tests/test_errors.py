"""Tests for the exception hierarchy."""

from openpay_customers import (
    APIError,
    ConfigError,
    DecodeError,
    MissingMerchantError,
    OpenpayError,
    RequestError,
    TransportError,
)


class TestExceptionHierarchy:
    """Every package error derives from OpenpayError."""

    def test_subclasses(self) -> None:
        for cls in (
            ConfigError,
            RequestError,
            TransportError,
            DecodeError,
            MissingMerchantError,
        ):
            assert isinstance(cls("test"), OpenpayError)

    def test_api_error_is_openpay_error(self) -> None:
        assert isinstance(APIError(400, "bad"), OpenpayError)


class TestAPIError:
    """Mapping of Openpay error bodies."""

    def test_from_response(self) -> None:
        body = {
            "category": "request",
            "description": "The customer with id 'abc' does not exist",
            "http_code": 404,
            "error_code": 1005,
            "request_id": "1981cdb8-19cb-4bad-8256-e95d58bbb7fd",
        }
        err = APIError.from_response(404, body)
        assert err.http_code == 404
        assert err.error_code == 1005
        assert err.category == "request"
        assert err.request_id == "1981cdb8-19cb-4bad-8256-e95d58bbb7fd"
        assert err.raw == body
        assert str(err) == "Openpay responded with 404: The customer with id 'abc' does not exist"

    def test_from_response_falls_back_to_status(self) -> None:
        err = APIError.from_response(502, {})
        assert err.http_code == 502
        assert err.error_code is None
        assert err.description == ""

    def test_non_numeric_codes(self) -> None:
        body = {"http_code": "Service Unavailable", "error_code": "E_MAINT"}
        err = APIError.from_response(503, body)
        assert err.http_code == 503
        assert err.error_code is None
        assert err.raw == body

    def test_numeric_strings(self) -> None:
        err = APIError.from_response(400, {"http_code": "400", "error_code": "1001"})
        assert err.http_code == 400
        assert err.error_code == 1001
