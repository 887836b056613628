"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "quantity",
                "message": "Must be >= 1",
                "code": "INVALID_RANGE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Product with identifier '42' not found",
                "code": "NOT_FOUND"
            }

        Validation error with fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "cart_id", "message": "Must be a positive integer", "code": "INVALID_ID"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Cart with identifier '7' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "min_price",
                            "message": "Must be less than or equal to max_price",
                            "code": "INVALID_RANGE",
                        }
                    ],
                },
            ]
        }
    )


# Shared OpenAPI response documentation for routes
NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Resource not found"}}
VALIDATION_RESPONSE = {422: {"model": ErrorResponse, "description": "Validation error"}}
