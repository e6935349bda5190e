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
                "field": "vehicle_id",
                "message": "Must not be blank",
                "code": "BLANK_ID",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Vehicle with identifier 'veh-404' not found",
                "code": "NOT_FOUND"
            }

        Catalog unavailable:
            {
                "detail": "Failed to fetch vehicle data: 500",
                "code": "CATALOG_LOAD_ERROR"
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Vehicle with identifier 'veh-404' not found", "code": "NOT_FOUND"},
                {"detail": "Failed to fetch vehicle data: 500", "code": "CATALOG_LOAD_ERROR"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "vehicle_id",
                            "message": "Must not be blank",
                            "code": "BLANK_ID",
                        },
                    ],
                },
            ]
        }
    )
