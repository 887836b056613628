"""Tests for REST error response models."""

from craftstore.entrypoints.http.error_responses import (
    NOT_FOUND_RESPONSE,
    VALIDATION_RESPONSE,
    ErrorDetail,
    ErrorResponse,
)


class TestErrorDetail:
    def test_creates_error_detail_with_all_fields(self) -> None:
        detail = ErrorDetail(field="quantity", message="Must be >= 1", code="INVALID_RANGE")

        assert detail.model_dump() == {
            "field": "quantity",
            "message": "Must be >= 1",
            "code": "INVALID_RANGE",
        }

    def test_code_is_optional(self) -> None:
        detail = ErrorDetail(field="cart_id", message="Must be a positive integer")

        assert detail.code is None


class TestErrorResponse:
    def test_creates_simple_error_response(self) -> None:
        response = ErrorResponse(detail="Cart with identifier '7' not found", code="NOT_FOUND")

        assert response.errors is None
        assert response.model_dump() == {
            "detail": "Cart with identifier '7' not found",
            "code": "NOT_FOUND",
            "errors": None,
        }

    def test_parses_validation_error_from_dict(self) -> None:
        data = {
            "detail": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": [
                {"field": "min_price", "message": "Must be >= 0", "code": "INVALID_RANGE"}
            ],
        }

        response = ErrorResponse.model_validate(data)

        assert response.errors is not None
        assert response.errors[0].field == "min_price"

    def test_serializes_to_json(self) -> None:
        json_str = ErrorResponse(detail="Conflict", code="CONFLICT").model_dump_json()

        assert '"detail":"Conflict"' in json_str
        assert '"code":"CONFLICT"' in json_str


def test_shared_route_responses() -> None:
    assert NOT_FOUND_RESPONSE[404]["model"] is ErrorResponse
    assert VALIDATION_RESPONSE[422]["model"] is ErrorResponse
